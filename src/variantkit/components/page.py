"""Page shell: layout preset plus optional header and footer."""

from __future__ import annotations

from dataclasses import dataclass, field

from variantkit.components.footer import FooterConfig, FooterPlan, resolve_footer
from variantkit.components.header import HeaderConfig, HeaderPlan, resolve_header
from variantkit.compose.composer import StyleResolver, resolve_style
from variantkit.layout.engine import resolve_layout
from variantkit.model.layout import LayoutOverrides, ResolvedLayout

__all__ = ["PageConfig", "PagePlan", "resolve_page"]


@dataclass(frozen=True)
class PageConfig:
    variant: str = "default"
    overrides: LayoutOverrides = field(default_factory=LayoutOverrides)
    header: HeaderConfig | None = None
    footer: FooterConfig | None = None


@dataclass(frozen=True)
class PagePlan:
    layout: ResolvedLayout
    header: HeaderPlan | None = None
    footer: FooterPlan | None = None


def _default_footer(variant: str) -> FooterConfig:
    from variantkit.presets import next_js_footer

    if variant == "default":
        return next_js_footer()
    return FooterConfig(variant="simple")


def resolve_page(config: PageConfig, styles: StyleResolver = resolve_style) -> PagePlan:
    """Resolve the layout first; its context decides which chrome is built."""
    layout = resolve_layout(config.variant, config.overrides)
    context = layout.context

    header = None
    if context.has_header:
        header = resolve_header(config.header or HeaderConfig(), styles)

    footer = None
    if context.has_footer:
        footer = resolve_footer(config.footer or _default_footer(context.variant), styles)

    return PagePlan(layout=layout, header=header, footer=footer)
