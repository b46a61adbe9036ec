"""Element kind, interaction state and the render plan handed to a Renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ElementKind(Enum):
    """Which kind of interactive element a component renders as."""

    NAVIGABLE = "navigable"
    ACTIONABLE = "actionable"


@dataclass(frozen=True)
class InteractionState:
    """Loading/disabled flags folded into their effective behavior.

    Attributes:
        disabled: Caller-supplied disabled flag.
        loading: Caller-supplied loading flag.
        inert: Activation is suppressed (disabled, or implied by loading).
        show_indicator: A spinner replaces the leading content.
    """

    disabled: bool = False
    loading: bool = False

    @property
    def inert(self) -> bool:
        return self.disabled or self.loading

    @property
    def show_indicator(self) -> bool:
        return self.loading


@dataclass(frozen=True)
class ButtonContent:
    """What goes inside a button, in order: indicator, icon, label."""

    label: str
    indicator: bool = False
    icon_left: Any = None
    icon_right: Any = None


@dataclass(frozen=True)
class RenderPlan:
    """Output consumed by a renderer: class string, element kind, attributes.

    ``handle`` is an opaque activation handle (e.g. a click callback). It is
    carried through but never inspected.
    """

    class_string: str
    element_kind: ElementKind
    attributes: dict[str, Any] = field(default_factory=dict)
    content: ButtonContent | None = None
    handle: Any = None

    def as_tuple(self) -> tuple[str, ElementKind, dict[str, Any]]:
        return (self.class_string, self.element_kind, dict(self.attributes))
