"""Convert resolution plans into JSON-compatible data."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping

# Opaque activation handles are never serialized.
_SKIPPED_FIELDS = frozenset({"handle", "on_click", "on_mobile_menu_toggle"})


def to_jsonable(obj: Any) -> Any:
    """Recursively convert dataclasses, enums, tuples and mappings."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: to_jsonable(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if f.name not in _SKIPPED_FIELDS
        }
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    return obj
