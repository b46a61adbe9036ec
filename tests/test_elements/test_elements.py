"""Tests for element-kind polymorphism and interaction state."""

from variantkit.elements import (
    activation_handle,
    element_attributes,
    resolve_element_kind,
    resolve_interaction,
)
from variantkit.links import resolve_link
from variantkit.model.element import ElementKind, InteractionState


class TestResolveElementKind:
    def test_destination_means_navigable(self):
        assert resolve_element_kind(True) is ElementKind.NAVIGABLE

    def test_no_destination_means_actionable(self):
        assert resolve_element_kind(False) is ElementKind.ACTIONABLE


class TestInteraction:
    def test_idle(self):
        state = resolve_interaction()
        assert state == InteractionState(disabled=False, loading=False)
        assert not state.inert
        assert not state.show_indicator

    def test_disabled(self):
        state = resolve_interaction(disabled=True)
        assert state.inert
        assert not state.show_indicator

    def test_loading_implies_inert(self):
        state = resolve_interaction(loading=True)
        assert state.inert
        assert state.show_indicator
        assert state.disabled is False

    def test_loading_and_disabled_together(self):
        state = resolve_interaction(disabled=True, loading=True)
        assert state.inert and state.show_indicator


class TestElementAttributes:
    def test_navigable(self):
        attrs = element_attributes(
            ElementKind.NAVIGABLE, resolve_interaction(), href="https://a.com", link=resolve_link("https://a.com")
        )
        assert attrs == {"href": "https://a.com", "target": "_blank", "rel": "noopener noreferrer"}

    def test_navigable_inert(self):
        attrs = element_attributes(ElementKind.NAVIGABLE, resolve_interaction(disabled=True), href="/a")
        assert attrs == {"href": "/a", "aria-disabled": "true", "tabindex": "-1"}

    def test_actionable(self):
        assert element_attributes(ElementKind.ACTIONABLE, resolve_interaction()) == {"type": "button"}

    def test_actionable_loading(self):
        attrs = element_attributes(ElementKind.ACTIONABLE, resolve_interaction(loading=True))
        assert attrs == {"type": "button", "disabled": True, "aria-busy": "true"}


class TestActivationHandle:
    def test_handle_passed_through_untouched(self):
        handle = object()
        assert activation_handle(resolve_interaction(), handle) is handle

    def test_suppressed_when_inert(self):
        assert activation_handle(resolve_interaction(disabled=True), object()) is None
        assert activation_handle(resolve_interaction(loading=True), lambda: None) is None

    def test_falsy_handle_is_still_a_handle(self):
        handle = 0
        assert activation_handle(resolve_interaction(), handle) == 0
