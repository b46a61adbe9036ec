"""Tests for page-shell layout composition and responsive fragments."""

import dataclasses

import pytest

from variantkit.errors import ConfigError
from variantkit.layout import preset, resolve_layout, responsive_fragment
from variantkit.model.layout import LayoutOverrides, LayoutPreset
from variantkit.registry.tables import FONT_CLASSES, LAYOUT_PRESETS


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


class TestPresets:
    def test_known_presets(self):
        assert set(LAYOUT_PRESETS) == {"default", "landing", "app", "docs", "centered", "fullscreen"}

    def test_lookup(self):
        assert preset("centered").main_classes == "w-full max-w-md"

    def test_unknown_preset(self):
        with pytest.raises(ConfigError, match="Unknown layout preset 'sidebar'") as exc_info:
            preset("sidebar")
        assert exc_info.value.component == "page"
        assert exc_info.value.value == "sidebar"

    def test_custom_preset_table(self):
        table = {"bare": LayoutPreset("c", "m", "f")}
        layout = resolve_layout("bare", presets=table)
        assert layout.container_classes.startswith("c ")
        assert layout.main_classes == "m"
        assert layout.footer_classes == "f"


# ---------------------------------------------------------------------------
# resolve_layout
# ---------------------------------------------------------------------------


class TestResolveLayout:
    def test_default_preset(self):
        layout = resolve_layout("default")
        assert layout.container_classes == (
            "grid grid-rows-[20px_1fr_20px] items-center justify-items-center "
            "min-h-screen p-8 pb-20 gap-16 sm:p-20 " + FONT_CLASSES
        )
        assert layout.main_classes == "flex flex-col gap-[32px] row-start-2 items-center sm:items-start"
        assert layout.footer_classes == "row-start-3"

    def test_context_defaults(self):
        context = resolve_layout("app").context
        assert context.variant == "app"
        assert context.has_header is False
        assert context.has_footer is True

    def test_context_reflects_overrides(self):
        context = resolve_layout("landing", LayoutOverrides(show_header=True, show_footer=False)).context
        assert context.has_header is True
        assert context.has_footer is False

    def test_centered_with_md_width_dedupes(self):
        layout = resolve_layout("centered", LayoutOverrides(max_width="md"))
        assert layout.main_classes == "w-full max-w-md"

    def test_centered_flag_adds_auto_margin(self):
        layout = resolve_layout("app", LayoutOverrides(centered=True, max_width="lg"))
        assert layout.main_classes.endswith("max-w-lg mx-auto")

    def test_centered_flag_skipped_for_centered_preset(self):
        layout = resolve_layout("centered", LayoutOverrides(centered=True))
        assert "mx-auto" not in layout.main_classes.split()

    def test_max_width_absent_adds_nothing(self):
        assert resolve_layout("fullscreen").main_classes.split()[0] == "flex-1"
        assert not any(t.startswith("max-w") for t in resolve_layout("app").main_classes.split())

    def test_unknown_max_width(self):
        with pytest.raises(ConfigError, match="max_width") as exc_info:
            resolve_layout("app", LayoutOverrides(max_width="3xl"))
        assert exc_info.value.dimension == "max_width"

    def test_unknown_background(self):
        with pytest.raises(ConfigError, match="background"):
            resolve_layout("app", LayoutOverrides(background="stripes"))

    def test_background_precedes_font(self):
        layout = resolve_layout("landing", LayoutOverrides(background="grid"))
        tokens = layout.container_classes.split()
        assert tokens.index("bg-grid-pattern") < tokens.index(FONT_CLASSES)

    def test_fullscreen_padding(self):
        assert resolve_layout("fullscreen").main_classes == "flex-1 p-4 sm:p-6 lg:p-8"
        assert resolve_layout("fullscreen", LayoutOverrides(padding=False)).main_classes == "flex-1"

    def test_padding_only_applies_to_fullscreen(self):
        assert "lg:p-8" not in resolve_layout("landing").main_classes.split()

    def test_container_order(self):
        layout = resolve_layout(
            "landing",
            LayoutOverrides(fluid=True, container_class="bg-red-50", class_name="custom"),
        )
        assert layout.container_classes.split()[-3:] == ["w-full", "bg-red-50", "custom"]

    def test_main_class_after_preset(self):
        layout = resolve_layout("app", LayoutOverrides(main_class="py-2"))
        assert layout.main_classes.split()[-1] == "py-2"

    def test_contexts_are_distinct_and_frozen(self):
        first = resolve_layout("app").context
        second = resolve_layout("docs", LayoutOverrides(show_header=True)).context
        assert first != second
        assert first.variant == "app"
        with pytest.raises(dataclasses.FrozenInstanceError):
            first.has_header = True

    def test_deterministic(self):
        overrides = LayoutOverrides(max_width="xl", background="dots")
        assert resolve_layout("docs", overrides) == resolve_layout("docs", overrides)


# ---------------------------------------------------------------------------
# responsive_fragment
# ---------------------------------------------------------------------------


class TestResponsiveFragment:
    def test_stack_horizontal(self):
        assert responsive_fragment("stack", "horizontal") == "flex-col sm:flex-row"

    def test_stack_vertical_contributes_nothing(self):
        assert responsive_fragment("stack", "vertical") == ""

    def test_defaults(self):
        assert responsive_fragment() == "flex-col sm:flex-row"

    def test_wrap(self):
        assert responsive_fragment("wrap", "vertical") == "flex-row flex-wrap"

    def test_scroll(self):
        assert responsive_fragment("scroll") == "flex-row overflow-x-auto"

    def test_unknown_behavior(self):
        with pytest.raises(ConfigError, match="mobile_behavior"):
            responsive_fragment("collapse")
