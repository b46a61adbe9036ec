"""Text links shared by headers and footers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from variantkit.compose.composer import StyleResolver, resolve_style
from variantkit.elements.resolver import element_attributes, resolve_interaction
from variantkit.links.resolver import resolve_link
from variantkit.model.dimension import ComponentStyleSpec
from variantkit.model.element import ElementKind, RenderPlan

__all__ = ["LinkPlan", "resolve_text_link"]


@dataclass(frozen=True)
class LinkPlan:
    """A labelled navigable element.

    ``is_external`` tells the renderer to draw the external-link marker.
    """

    label: str
    render: RenderPlan
    is_external: bool
    icon: Any = None


def resolve_text_link(
    spec: ComponentStyleSpec,
    label: str,
    href: str,
    *,
    external: bool | None = None,
    style_config: Mapping[str, Any] | None = None,
    icon: Any = None,
    extra_attributes: Mapping[str, Any] | None = None,
    handle: Any = None,
    styles: StyleResolver = resolve_style,
) -> LinkPlan:
    link = resolve_link(href, external)
    attributes = element_attributes(
        ElementKind.NAVIGABLE, resolve_interaction(), href=href, link=link
    )
    if extra_attributes:
        attributes.update(extra_attributes)
    style = styles(spec, style_config or {}, None)
    return LinkPlan(
        label=label,
        render=RenderPlan(
            class_string=style.class_string,
            element_kind=ElementKind.NAVIGABLE,
            attributes=attributes,
            handle=handle,
        ),
        is_external=link.is_external,
        icon=icon,
    )
