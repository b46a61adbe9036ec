"""Logo resolution: size presets, image classes and optional link wrapper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from variantkit.compose.composer import StyleResolver, resolve_style
from variantkit.elements.resolver import element_attributes, resolve_interaction
from variantkit.links.resolver import resolve_link
from variantkit.model.element import ElementKind, RenderPlan
from variantkit.registry.tables import (
    LOGO_CUSTOM_FALLBACK,
    LOGO_LINK_CLASSES,
    LOGO_SIZES,
    LOGO_SKELETON_CLASSES,
    LOGO_SPEC,
)
from variantkit.registry.variants import registry_for

__all__ = ["LogoConfig", "LogoPlan", "SkeletonPlan", "logo_dimensions", "logo_skeleton", "resolve_logo"]

HOME_HREF = "/"


@dataclass(frozen=True)
class LogoConfig:
    address: str = "/next.svg"
    alt_text: str = "Logo"
    width: int | None = None
    height: int | None = None
    invert_on_dark: bool = True
    # None means "not specified"; containers such as the header pick their own default.
    link_to_home: bool | None = None
    href: str = HOME_HREF
    size: str | None = None
    class_name: str = ""
    priority: bool = False
    loading: bool = False
    on_click: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class LogoPlan:
    class_string: str
    address: str
    alt_text: str
    width: int | None
    height: int | None
    priority: bool = False
    handle: Any = None
    link: RenderPlan | None = None


@dataclass(frozen=True)
class SkeletonPlan:
    class_string: str
    width: int | None
    height: int | None


def logo_dimensions(
    size: str | None, width: int | None = None, height: int | None = None
) -> tuple[int | None, int | None]:
    """Final pixel size: explicit width/height win over the size preset."""
    size = registry_for(LOGO_SPEC).check("size", size)
    if size == "custom":
        preset_w, preset_h = width or LOGO_CUSTOM_FALLBACK[0], height or LOGO_CUSTOM_FALLBACK[1]
    else:
        preset_w, preset_h = LOGO_SIZES[size]
    return width or preset_w, height or preset_h


def resolve_logo(config: LogoConfig, styles: StyleResolver = resolve_style) -> LogoPlan:
    width, height = logo_dimensions(config.size, config.width, config.height)
    style = styles(
        LOGO_SPEC,
        {
            "size": config.size,
            "invert_on_dark": config.invert_on_dark,
            "loading": config.loading,
            "clickable": config.on_click is not None,
        },
        config.class_name,
    )

    link = None
    if config.link_to_home or config.href != HOME_HREF:
        link = RenderPlan(
            class_string=LOGO_LINK_CLASSES,
            element_kind=ElementKind.NAVIGABLE,
            attributes=element_attributes(
                ElementKind.NAVIGABLE,
                resolve_interaction(),
                href=config.href,
                link=resolve_link(config.href),
            ),
        )

    return LogoPlan(
        class_string=style.class_string,
        address=config.address,
        alt_text=config.alt_text,
        width=width,
        height=height,
        priority=config.priority,
        handle=config.on_click,
        link=link,
    )


def logo_skeleton(size: str | None = None) -> SkeletonPlan:
    """Loading placeholder sized like the logo preset."""
    size = registry_for(LOGO_SPEC).check("size", size)
    width, height = LOGO_SIZES[size]
    return SkeletonPlan(class_string=LOGO_SKELETON_CLASSES, width=width, height=height)
