"""Button resolution: one label, optional icon, link or action semantics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from variantkit.compose.composer import StyleResolver, resolve_style
from variantkit.elements.resolver import (
    activation_handle,
    element_attributes,
    resolve_element_kind,
    resolve_interaction,
)
from variantkit.links.resolver import resolve_link
from variantkit.model.element import ButtonContent, ElementKind, RenderPlan
from variantkit.model.icon import IconDescriptor
from variantkit.registry.tables import BUTTON_SPEC

__all__ = ["ButtonConfig", "resolve_button"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ButtonConfig:
    """Declarative button configuration.

    ``variant``, ``size`` and ``width`` left as None take the generic
    defaults from the button style table.
    """

    label: str = ""
    href: str | None = None
    variant: str | None = None
    size: str | None = None
    width: str | None = None
    icon: IconDescriptor | None = None
    external: bool | None = None
    target: str | None = None
    rel: str | None = None
    class_name: str = ""
    loading: bool = False
    loading_text: str | None = None
    disabled: bool = False
    aria_label: str | None = None
    on_click: Any = field(default=None, compare=False)


def _content(config: ButtonConfig, loading: bool) -> ButtonContent:
    label = config.loading_text if loading and config.loading_text else config.label
    icon = None if loading else config.icon
    return ButtonContent(
        label=label,
        indicator=loading,
        icon_left=icon if icon is not None and icon.position != "right" else None,
        icon_right=icon if icon is not None and icon.position == "right" else None,
    )


def resolve_button(config: ButtonConfig, styles: StyleResolver = resolve_style) -> RenderPlan:
    """Resolve *config* into a :class:`RenderPlan`.

    Raises:
        ConfigError: unknown variant, size or width.
    """
    kind = resolve_element_kind(bool(config.href))
    state = resolve_interaction(config.disabled, config.loading)
    style = styles(
        BUTTON_SPEC,
        {
            "variant": config.variant,
            "size": config.size,
            "width": config.width,
            "inert": state.inert,
        },
        config.class_name,
    )

    link = None
    if kind is ElementKind.NAVIGABLE:
        link = resolve_link(config.href, config.external, config.target, config.rel)
    attributes = element_attributes(kind, state, href=config.href, link=link)
    if config.aria_label:
        attributes["aria-label"] = config.aria_label

    logger.debug("Button %r -> %s", config.label, kind.value)
    return RenderPlan(
        class_string=style.class_string,
        element_kind=kind,
        attributes=attributes,
        content=_content(config, state.loading),
        handle=activation_handle(state, config.on_click),
    )
