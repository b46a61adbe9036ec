"""Navigation header: brand logo, desktop nav, actions and mobile menu."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from variantkit.components.button import ButtonConfig, resolve_button
from variantkit.components.logo import LogoConfig, LogoPlan, resolve_logo
from variantkit.components.navlink import LinkPlan, resolve_text_link
from variantkit.compose.composer import StyleResolver, merge_classes, resolve_style
from variantkit.model.element import RenderPlan
from variantkit.registry import tables

__all__ = ["HeaderConfig", "HeaderPlan", "NavItem", "resolve_header"]

MOBILE_MENU_LABEL = "Toggle mobile menu"


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    active: bool = False
    external: bool | None = None
    icon: Any = None


@dataclass(frozen=True)
class HeaderConfig:
    show_logo: bool = True
    logo: LogoConfig | None = None
    navigation: tuple[NavItem, ...] = ()
    actions: tuple[ButtonConfig, ...] = ()
    sticky: bool = False
    bordered: bool = False
    variant: str | None = None
    class_name: str = ""
    show_mobile_menu: bool = False
    mobile_menu_open: bool = False
    on_mobile_menu_toggle: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class HeaderPlan:
    class_string: str
    container_classes: str
    row_classes: str
    logo: LogoPlan | None
    nav_classes: str | None
    navigation: tuple[LinkPlan, ...]
    actions_classes: str
    actions: tuple[RenderPlan, ...]
    menu_toggle: RenderPlan | None = None
    menu_icon_bars: tuple[str, ...] = ()
    mobile_menu_classes: str | None = None
    mobile_menu: tuple[LinkPlan, ...] = ()


def _brand_logo(logo: LogoConfig | None, styles: StyleResolver) -> LogoPlan:
    logo = logo or LogoConfig()
    return resolve_logo(
        replace(
            logo,
            size=logo.size or "md",
            link_to_home=logo.link_to_home is not False,
            priority=True,
            class_name=merge_classes("select-none", logo.class_name),
        ),
        styles,
    )


def _menu_toggle(config: HeaderConfig, styles: StyleResolver) -> RenderPlan:
    plan = resolve_button(
        ButtonConfig(
            variant="ghost",
            size="icon",
            class_name="md:hidden",
            aria_label=MOBILE_MENU_LABEL,
            on_click=config.on_mobile_menu_toggle,
        ),
        styles,
    )
    attributes = dict(plan.attributes)
    attributes["aria-expanded"] = "true" if config.mobile_menu_open else "false"
    return replace(plan, attributes=attributes)


def resolve_header(config: HeaderConfig, styles: StyleResolver = resolve_style) -> HeaderPlan:
    style = styles(
        tables.HEADER_SPEC,
        {"variant": config.variant, "sticky": config.sticky, "bordered": config.bordered},
        config.class_name,
    )

    navigation = tuple(
        resolve_text_link(
            tables.NAV_LINK_SPEC,
            item.label,
            item.href,
            external=item.external,
            style_config={"active": item.active},
            icon=item.icon,
            styles=styles,
        )
        for item in config.navigation
    )

    menu_toggle = None
    bars: tuple[str, ...] = ()
    mobile_menu: tuple[LinkPlan, ...] = ()
    if config.show_mobile_menu:
        menu_toggle = _menu_toggle(config, styles)
        bars = tuple(
            styles(tables.MENU_ICON_BAR_SPEC, {"bar": bar, "open": config.mobile_menu_open}, None).class_string
            for bar in ("top", "middle", "bottom")
        )
        if config.mobile_menu_open and config.navigation:
            # Choosing an item closes the menu.
            mobile_menu = tuple(
                resolve_text_link(
                    tables.MOBILE_MENU_ITEM_SPEC,
                    item.label,
                    item.href,
                    external=item.external,
                    style_config={"active": item.active},
                    icon=item.icon,
                    handle=config.on_mobile_menu_toggle,
                    styles=styles,
                )
                for item in config.navigation
            )

    return HeaderPlan(
        class_string=style.class_string,
        container_classes=tables.HEADER_CONTAINER_CLASSES,
        row_classes=tables.HEADER_ROW_CLASSES,
        logo=_brand_logo(config.logo, styles) if config.show_logo else None,
        nav_classes=tables.HEADER_NAV_CLASSES if navigation else None,
        navigation=navigation,
        actions_classes=tables.HEADER_ACTIONS_CLASSES,
        actions=tuple(resolve_button(b, styles) for b in config.actions),
        menu_toggle=menu_toggle,
        menu_icon_bars=bars,
        mobile_menu_classes=tables.MOBILE_MENU_CLASSES if mobile_menu else None,
        mobile_menu=mobile_menu,
    )
