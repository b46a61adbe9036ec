"""Per-kind configuration schemas shared by the loader and the validator."""

from __future__ import annotations

import types
from dataclasses import dataclass, field, fields
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Union, get_args, get_origin, get_type_hints

from variantkit.components.action_buttons import ActionButtonsConfig
from variantkit.components.button import ButtonConfig
from variantkit.components.footer import FooterConfig, FooterLink, FooterSection
from variantkit.components.header import HeaderConfig, NavItem
from variantkit.components.logo import LogoConfig
from variantkit.components.page import PageConfig
from variantkit.errors import ConfigError
from variantkit.model.dimension import VariantDimension
from variantkit.model.icon import ICON_POSITIONS, IconDescriptor
from variantkit.model.layout import LayoutOverrides
from variantkit.registry import tables

__all__ = ["ComponentSchema", "SCHEMAS", "TOP_LEVEL_KINDS", "matches_type", "schema_for"]

# Activation handles cannot come from declarative input.
_HANDLE_KEYS = frozenset({"on_click", "on_mobile_menu_toggle"})


@dataclass(frozen=True)
class ComponentSchema:
    """What a config dict for one component kind may contain.

    Attributes:
        kind: Component kind name used on the CLI and web API.
        factory: Dataclass the loader builds.
        dimensions: Keys whose values are checked against a dimension.
        children: Keys holding nested configs, mapped to (kind, is_list).
        aliases: Legacy key -> current key.
        required: Keys that must be present.
    """

    kind: str
    factory: type
    dimensions: Mapping[str, VariantDimension] = field(default_factory=dict)
    children: Mapping[str, tuple[str, bool]] = field(default_factory=dict)
    aliases: Mapping[str, str] = field(default_factory=dict)
    required: frozenset[str] = frozenset()

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(f.name for f in fields(self.factory)) - _HANDLE_KEYS

    @property
    def scalar_fields(self) -> Mapping[str, tuple[Any, str]]:
        """Non-nested keys mapped to ``(type hint, annotation text)``."""
        return {
            name: typed
            for name, typed in _field_types(self.factory).items()
            if name in self.keys and name not in self.children
        }


@lru_cache(maxsize=None)
def _field_types(factory: type) -> Mapping[str, tuple[Any, str]]:
    hints = get_type_hints(factory)
    return MappingProxyType({f.name: (hints[f.name], str(f.type)) for f in fields(factory)})


def matches_type(hint: Any, value: Any) -> bool:
    """True when a JSON-decoded *value* fits the field annotation *hint*.

    ``bool`` is not accepted where an ``int`` is expected. Annotations other
    than plain scalars and their unions (``Any``, nested configs) accept
    anything; nested configs are checked when they are loaded.
    """
    if hint is Any:
        return True
    if get_origin(hint) in (Union, types.UnionType):
        return any(matches_type(arg, value) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if hint is str:
        return isinstance(value, str)
    return True


def _dims(spec, *names: str) -> dict[str, VariantDimension]:
    by_name = {d.name: d for d in spec.dimensions}
    return {name: by_name[name] for name in names}


ICON_POSITION = VariantDimension(
    name="position", fragments={p: "" for p in sorted(ICON_POSITIONS)}, default="left"
)
LAYOUT_VARIANT = VariantDimension(
    name="variant", fragments={name: "" for name in tables.LAYOUT_PRESETS}, default="default"
)

SCHEMAS: Mapping[str, ComponentSchema] = MappingProxyType({
    s.kind: s
    for s in (
        ComponentSchema(
            kind="icon",
            factory=IconDescriptor,
            dimensions={"position": ICON_POSITION},
            aliases={"src": "address", "alt": "alt_text", "className": "class_name"},
            required=frozenset({"address", "alt_text"}),
        ),
        ComponentSchema(
            kind="button",
            factory=ButtonConfig,
            dimensions=_dims(tables.BUTTON_SPEC, "variant", "size", "width"),
            children={"icon": ("icon", False)},
            aliases={
                "className": "class_name",
                "loadingText": "loading_text",
                "ariaLabel": "aria_label",
                "iconPosition": "icon_position",
            },
        ),
        ComponentSchema(
            kind="action_buttons",
            factory=ActionButtonsConfig,
            dimensions=_dims(
                tables.ACTION_GROUP_SPEC,
                "direction",
                "align",
                "gap",
                "width",
                "mobile_behavior",
                "tablet_behavior",
            ),
            children={"buttons": ("button", True)},
            aliases={"className": "class_name", "responsive": "mobile_behavior"},
        ),
        ComponentSchema(
            kind="logo",
            factory=LogoConfig,
            dimensions=_dims(tables.LOGO_SPEC, "size"),
            aliases={
                "src": "address",
                "alt": "alt_text",
                "className": "class_name",
                "linkToHome": "link_to_home",
                "invertOnDark": "invert_on_dark",
            },
        ),
        ComponentSchema(
            kind="nav_item",
            factory=NavItem,
            required=frozenset({"label", "href"}),
        ),
        ComponentSchema(
            kind="header",
            factory=HeaderConfig,
            dimensions=_dims(tables.HEADER_SPEC, "variant"),
            children={
                "logo": ("logo", False),
                "navigation": ("nav_item", True),
                "actions": ("button", True),
            },
            aliases={
                "className": "class_name",
                "showLogo": "show_logo",
                "showMobileMenu": "show_mobile_menu",
                "mobileMenuOpen": "mobile_menu_open",
            },
        ),
        ComponentSchema(
            kind="footer_link",
            factory=FooterLink,
            aliases={"ariaHidden": "aria_hidden"},
            required=frozenset({"label", "href"}),
        ),
        ComponentSchema(
            kind="footer_section",
            factory=FooterSection,
            children={"links": ("footer_link", True)},
        ),
        ComponentSchema(
            kind="footer",
            factory=FooterConfig,
            dimensions=_dims(tables.FOOTER_CONTENT_SPEC, "variant"),
            children={
                "links": ("footer_link", True),
                "sections": ("footer_section", True),
                "logo": ("logo", False),
            },
            aliases={
                "className": "class_name",
                "showLogo": "show_logo",
                "gridPosition": "grid_position",
            },
        ),
        ComponentSchema(
            kind="layout",
            factory=LayoutOverrides,
            dimensions={"max_width": tables.MAX_WIDTH, "background": tables.BACKGROUND},
            aliases={"maxWidth": "max_width", "className": "class_name"},
        ),
        ComponentSchema(
            kind="page",
            factory=PageConfig,
            dimensions={"variant": LAYOUT_VARIANT},
            children={
                "overrides": ("layout", False),
                "header": ("header", False),
                "footer": ("footer", False),
            },
        ),
    )
})

# Kinds a caller may resolve directly; the rest only appear nested.
TOP_LEVEL_KINDS = ("button", "action_buttons", "logo", "header", "footer", "page")


def schema_for(kind: str) -> ComponentSchema:
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise ConfigError(f"Unknown component kind {kind!r}", component=kind) from None
