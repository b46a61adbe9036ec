"""Renderer protocol definition."""

from __future__ import annotations

from typing import Any, Protocol


class Renderer(Protocol):
    """Protocol for objects that turn a resolved plan into a visual element.

    The engine never touches a rendering surface; it hands plans to a
    renderer and returns whatever the renderer produces.
    """

    def render(self, kind: str, plan: Any) -> Any: ...
