"""Layout composition: preset + instance overrides -> structural classes."""

from __future__ import annotations

import logging
from typing import Mapping

from variantkit.compose.composer import compose, merge_classes
from variantkit.errors import ConfigError
from variantkit.model.layout import LayoutContext, LayoutOverrides, LayoutPreset, ResolvedLayout
from variantkit.registry.tables import (
    BACKGROUND,
    DIRECTION,
    FONT_CLASSES,
    FULLSCREEN_PADDING_CLASSES,
    LAYOUT_PRESETS,
    MAX_WIDTH,
    MOBILE_BEHAVIOR,
    RESPONSIVE_RULES,
)
from variantkit.registry.variants import VariantRegistry

__all__ = ["resolve_layout", "responsive_fragment", "preset"]

logger = logging.getLogger(__name__)

_LAYOUT_REGISTRY = VariantRegistry((MAX_WIDTH, BACKGROUND), component="page")
_RESPONSIVE_REGISTRY = VariantRegistry((MOBILE_BEHAVIOR, DIRECTION), component="responsive")


def preset(name: str, presets: Mapping[str, LayoutPreset] = LAYOUT_PRESETS) -> LayoutPreset:
    """Look up a layout preset by name; unknown names are an error."""
    try:
        return presets[name]
    except KeyError:
        allowed = ", ".join(sorted(presets))
        raise ConfigError(
            f"Unknown layout preset {name!r} (allowed: {allowed})",
            component="page",
            dimension="variant",
            value=name,
        ) from None


def responsive_fragment(mobile_behavior: str | None = None, direction: str | None = None) -> str:
    """Return the responsive class fragment for a flex container.

    ``stack`` only contributes for horizontal layouts; ``wrap`` and
    ``scroll`` contribute regardless of direction.
    """
    config = {
        "mobile_behavior": _RESPONSIVE_REGISTRY.check("mobile_behavior", mobile_behavior),
        "direction": _RESPONSIVE_REGISTRY.check("direction", direction),
    }
    return compose((), (), RESPONSIVE_RULES, None, config)


def resolve_layout(
    preset_name: str,
    overrides: LayoutOverrides | None = None,
    presets: Mapping[str, LayoutPreset] = LAYOUT_PRESETS,
) -> ResolvedLayout:
    """Resolve a page-shell layout.

    Raises:
        ConfigError: unknown preset, max-width key or background.
    """
    overrides = overrides or LayoutOverrides()
    layout = preset(preset_name, presets)

    # max_width is optional: absent means no fragment, not the table default.
    max_width = ""
    if overrides.max_width is not None:
        max_width = _LAYOUT_REGISTRY.resolve("max_width", overrides.max_width)
    background = _LAYOUT_REGISTRY.resolve("background", overrides.background)

    container_classes = merge_classes(
        layout.container_classes,
        background,
        FONT_CLASSES,
        "w-full" if overrides.fluid else "",
        overrides.container_class,
        overrides.class_name,
    )
    main_classes = merge_classes(
        layout.main_classes,
        overrides.main_class,
        max_width,
        "mx-auto" if overrides.centered and preset_name != "centered" else "",
        FULLSCREEN_PADDING_CLASSES if overrides.padding and preset_name == "fullscreen" else "",
    )
    context = LayoutContext(
        variant=preset_name,
        has_header=overrides.show_header,
        has_footer=overrides.show_footer,
    )
    logger.debug("Resolved layout %s (header=%s footer=%s)", preset_name, context.has_header, context.has_footer)
    return ResolvedLayout(
        container_classes=container_classes,
        main_classes=main_classes,
        footer_classes=merge_classes(layout.footer_classes),
        context=context,
    )
