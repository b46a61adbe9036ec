"""RecordingRenderer: wraps another renderer and records every plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RenderCall:
    """A recorded hand-off to the renderer."""

    kind: str
    plan: Any
    result: Any = None


class RecordingRenderer:
    """Renderer decorator that records all render calls.

    With no inner renderer, plans are recorded and returned as-is.
    """

    def __init__(self, inner: object | None = None) -> None:
        self._inner = inner
        self._records: list[RenderCall] = []

    def render(self, kind: str, plan: Any) -> Any:
        result = plan
        if self._inner is not None:
            result = self._inner.render(kind, plan)  # type: ignore[union-attr]
        self._records.append(RenderCall(kind=kind, plan=plan, result=result))
        return result

    def calls(self) -> list[RenderCall]:
        """Return the list of all recorded render calls."""
        return list(self._records)

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
