"""Page-shell layout model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutPreset:
    """Structural class triple for one named page layout."""

    container_classes: str
    main_classes: str
    footer_classes: str


@dataclass(frozen=True)
class LayoutOverrides:
    """Per-instance adjustments applied on top of a preset."""

    max_width: str | None = None
    centered: bool = False
    padding: bool = True
    fluid: bool = False
    background: str | None = None
    main_class: str = ""
    container_class: str = ""
    class_name: str = ""
    show_header: bool = False
    show_footer: bool = True


@dataclass(frozen=True)
class LayoutContext:
    """Read-only facts about one page render, exposed to nested consumers."""

    variant: str
    has_header: bool
    has_footer: bool


@dataclass(frozen=True)
class ResolvedLayout:
    container_classes: str
    main_classes: str
    footer_classes: str
    context: LayoutContext
