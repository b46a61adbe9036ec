"""Tests for building component configs from plain dicts."""

import warnings

import pytest

from variantkit.components import ActionButtonsConfig, ButtonConfig, FooterConfig, HeaderConfig, PageConfig
from variantkit.config import EngineConfig, load, schema_for
from variantkit.errors import ConfigError, DeprecatedKeyWarning
from variantkit.model.icon import IconDescriptor
from variantkit.model.layout import LayoutOverrides

LENIENT = EngineConfig(strict_keys=False)
QUIET = EngineConfig(warn_deprecated=False)


# ---------------------------------------------------------------------------
# Basic loading
# ---------------------------------------------------------------------------


class TestLoad:
    def test_button(self):
        config = load("button", {"label": "Go", "href": "/go", "variant": "secondary"})
        assert config == ButtonConfig(label="Go", href="/go", variant="secondary")

    def test_empty_dict_gives_defaults(self):
        assert load("header", {}) == HeaderConfig()

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="expected a mapping, got list"):
            load("button", [])

    def test_unknown_kind(self):
        with pytest.raises(ConfigError, match="Unknown component kind 'carousel'"):
            load("carousel", {})

    def test_dimension_values_not_checked_at_load(self):
        assert load("button", {"variant": "bogus"}).variant == "bogus"

    def test_handles_not_accepted(self):
        with pytest.raises(ConfigError, match="unknown key 'on_click'"):
            load("button", {"on_click": "alert(1)"})

    def test_schema_keys_exclude_handles(self):
        assert "on_mobile_menu_toggle" not in schema_for("header").keys
        assert "mobile_menu_open" in schema_for("header").keys


# ---------------------------------------------------------------------------
# Unknown keys
# ---------------------------------------------------------------------------


class TestUnknownKeys:
    def test_strict_by_default(self):
        with pytest.raises(ConfigError, match="unknown key 'colour'") as exc_info:
            load("button", {"label": "x", "colour": "red"})
        assert exc_info.value.key == "colour"
        assert exc_info.value.component == "button"

    def test_lenient_drops_and_logs(self, caplog):
        with caplog.at_level("WARNING", logger="variantkit.config.loader"):
            config = load("button", {"label": "x", "colour": "red"}, LENIENT)
        assert config == ButtonConfig(label="x")
        assert "ignoring unknown key 'colour'" in caplog.text

    def test_nested_unknown_key(self):
        with pytest.raises(ConfigError, match="header: unknown key"):
            load("page", {"header": {"menu": True}})


# ---------------------------------------------------------------------------
# Legacy keys
# ---------------------------------------------------------------------------


class TestLegacyKeys:
    def test_camel_case_honored(self):
        with pytest.warns(DeprecatedKeyWarning, match="'className' is deprecated, use 'class_name'"):
            config = load("button", {"label": "x", "className": "mt-2"})
        assert config.class_name == "mt-2"

    def test_current_key_wins(self):
        with pytest.warns(DeprecatedKeyWarning):
            config = load("button", {"class_name": "new", "className": "old"})
        assert config.class_name == "new"

    def test_logo_aliases(self):
        with pytest.warns(DeprecatedKeyWarning):
            config = load("logo", {"src": "/a.svg", "alt": "A", "linkToHome": True})
        assert (config.address, config.alt_text, config.link_to_home) == ("/a.svg", "A", True)

    def test_icon_position_merged_into_icon(self):
        data = {"label": "Next", "icon": {"address": "/arrow.svg", "alt_text": "arrow"}, "iconPosition": "right"}
        with pytest.warns(DeprecatedKeyWarning, match="icon.position"):
            config = load("button", data)
        assert config.icon.position == "right"

    def test_icon_position_does_not_override_icon(self):
        data = {
            "icon": {"address": "/a.svg", "alt_text": "a", "position": "left"},
            "iconPosition": "right",
        }
        config = load("button", data, QUIET)
        assert config.icon.position == "left"

    def test_responsive_expanded(self):
        with pytest.warns(DeprecatedKeyWarning):
            config = load("action_buttons", {"responsive": {"mobile": "wrap", "tablet": "column"}})
        assert config.mobile_behavior == "wrap"
        assert config.tablet_behavior == "column"

    def test_responsive_does_not_override_current_key(self):
        config = load("action_buttons", {"mobile_behavior": "scroll", "responsive": {"mobile": "wrap"}}, QUIET)
        assert config.mobile_behavior == "scroll"

    def test_responsive_must_be_mapping(self):
        with pytest.raises(ConfigError, match="'responsive' must be a mapping"):
            load("action_buttons", {"responsive": "wrap"}, QUIET)

    def test_responsive_unknown_subkey(self):
        with pytest.raises(ConfigError, match="unknown responsive key"):
            load("action_buttons", {"responsive": {"desktop": "row"}}, QUIET)

    def test_warnings_can_be_silenced(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            config = load("button", {"className": "x"}, QUIET)
        assert config.class_name == "x"

    def test_collector_receives_notices(self):
        notices: list[str] = []
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            config = load("button", {"className": "x", "ariaLabel": "Go"}, deprecations=notices)
        assert config.class_name == "x"
        assert notices == [
            "button: 'className' is deprecated, use 'class_name'",
            "button: 'ariaLabel' is deprecated, use 'aria_label'",
        ]

    def test_collector_gathers_nested_notices(self):
        notices: list[str] = []
        load("header", {"logo": {"src": "/a.svg"}, "actions": [{"loadingText": "..."}]}, deprecations=notices)
        assert notices == [
            "logo: 'src' is deprecated, use 'address'",
            "button: 'loadingText' is deprecated, use 'loading_text'",
        ]

    def test_collector_ignored_when_silenced(self):
        notices: list[str] = []
        load("button", {"className": "x"}, QUIET, deprecations=notices)
        assert notices == []

    def test_deprecation_logged(self, caplog):
        with caplog.at_level("WARNING", logger="variantkit.errors"):
            with pytest.warns(DeprecatedKeyWarning):
                load("footer", {"gridPosition": "mt-auto"})
        assert "'gridPosition' is deprecated" in caplog.text


# ---------------------------------------------------------------------------
# Nested configs
# ---------------------------------------------------------------------------


class TestNested:
    def test_action_buttons(self):
        config = load("action_buttons", {"buttons": [{"label": "A"}, {"label": "B", "href": "/b"}]})
        assert isinstance(config, ActionButtonsConfig)
        assert config.buttons == (ButtonConfig(label="A"), ButtonConfig(label="B", href="/b"))

    def test_list_child_must_be_list(self):
        with pytest.raises(ConfigError, match="'buttons' must be a list"):
            load("action_buttons", {"buttons": {"label": "A"}})

    def test_icon(self):
        config = load("button", {"icon": {"address": "/i.svg", "alt_text": "i", "width": 16}})
        assert config.icon == IconDescriptor(address="/i.svg", alt_text="i", width=16)

    def test_icon_missing_alt_text(self):
        with pytest.raises(ConfigError, match="missing required key"):
            load("button", {"icon": {"address": "/i.svg"}})

    def test_icon_empty_alt_text(self):
        with pytest.raises(ConfigError, match="alt text"):
            load("button", {"icon": {"address": "/i.svg", "alt_text": ""}})

    def test_footer_sections(self):
        config = load(
            "footer",
            {
                "variant": "detailed",
                "sections": [{"title": "Docs", "links": [{"label": "API", "href": "/api"}]}],
            },
        )
        assert isinstance(config, FooterConfig)
        assert config.sections[0].links[0].label == "API"

    def test_nav_item_required(self):
        with pytest.raises(ConfigError, match=r"missing required key\(s\) \['href'\]"):
            load("header", {"navigation": [{"label": "Docs"}]})

    def test_page(self):
        config = load(
            "page",
            {
                "variant": "centered",
                "overrides": {"max_width": "sm", "show_footer": False},
                "header": {"sticky": True},
            },
        )
        assert isinstance(config, PageConfig)
        assert config.overrides == LayoutOverrides(max_width="sm", show_footer=False)
        assert config.header == HeaderConfig(sticky=True)


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------


class TestFieldTypes:
    def test_href_must_be_string(self):
        with pytest.raises(ConfigError, match="'href' must be str \\| None, got int") as exc_info:
            load("button", {"label": "Go", "href": 123})
        assert (exc_info.value.component, exc_info.value.key) == ("button", "href")

    def test_target_must_be_string(self):
        with pytest.raises(ConfigError, match="'target'"):
            load("button", {"href": "/a", "target": 5})

    def test_class_name_must_be_string(self):
        with pytest.raises(ConfigError, match="'class_name' must be str, got int"):
            load("header", {"class_name": 5})

    def test_string_is_not_a_bool(self):
        with pytest.raises(ConfigError, match="'loading' must be bool, got str") as exc_info:
            load("button", {"loading": "false"})
        assert exc_info.value.value == "false"

    def test_bool_is_not_an_int(self):
        with pytest.raises(ConfigError, match="'width' must be int \\| None, got bool"):
            load("logo", {"width": True})

    def test_null_allowed_for_optional(self):
        assert load("button", {"href": None, "external": None}) == ButtonConfig()

    def test_legacy_key_checked_under_new_name(self):
        with pytest.raises(ConfigError, match="'class_name' must be str") as exc_info:
            load("button", {"className": ["a", "b"]}, QUIET)
        assert exc_info.value.key == "class_name"

    def test_dimension_value_type(self):
        with pytest.raises(ConfigError, match="'variant' must be str \\| None, got list") as exc_info:
            load("button", {"variant": ["primary"]})
        assert exc_info.value.dimension == "variant"

    def test_nested_nav_item(self):
        with pytest.raises(ConfigError, match="nav_item: 'href' must be str, got int") as exc_info:
            load("header", {"navigation": [{"label": "a", "href": 7}]})
        assert exc_info.value.component == "nav_item"

    def test_nested_icon_dimensions(self):
        with pytest.raises(ConfigError, match="icon: 'height'"):
            load("button", {"icon": {"address": "/i.svg", "alt_text": "i", "height": "16"}})

    def test_untyped_icon_slot_accepts_anything(self):
        config = load("header", {"navigation": [{"label": "a", "href": "/a", "icon": {"name": "star"}}]})
        assert config.navigation[0].icon == {"name": "star"}
