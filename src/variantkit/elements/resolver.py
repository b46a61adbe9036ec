"""Element polymorphism: navigable element vs actionable control."""

from __future__ import annotations

from typing import Any

from variantkit.model.element import ElementKind, InteractionState
from variantkit.model.link import ResolvedLink

__all__ = ["activation_handle", "element_attributes", "resolve_element_kind", "resolve_interaction"]


def resolve_element_kind(has_destination_address: bool) -> ElementKind:
    """Presence of a destination address is the only discriminant."""
    return ElementKind.NAVIGABLE if has_destination_address else ElementKind.ACTIONABLE


def resolve_interaction(disabled: bool = False, loading: bool = False) -> InteractionState:
    return InteractionState(disabled=bool(disabled), loading=bool(loading))


def element_attributes(
    kind: ElementKind,
    state: InteractionState,
    href: str | None = None,
    link: ResolvedLink | None = None,
) -> dict[str, Any]:
    """Attributes the renderer attaches to the element, in a stable order."""
    attrs: dict[str, Any] = {}
    if kind is ElementKind.NAVIGABLE:
        attrs["href"] = href
        if link is not None:
            attrs.update(link.attributes())
        if state.inert:
            attrs["aria-disabled"] = "true"
            attrs["tabindex"] = "-1"
    else:
        attrs["type"] = "button"
        if state.inert:
            attrs["disabled"] = True
    if state.loading:
        attrs["aria-busy"] = "true"
    return attrs


def activation_handle(state: InteractionState, handle: Any) -> Any:
    """Return *handle* unless interaction is suppressed.

    The handle is opaque; only its presence matters.
    """
    if state.inert:
        return None
    return handle
