"""Style template model: VariantDimension, ConditionalRule, ComponentStyleSpec."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

Predicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class VariantDimension:
    """A named axis of style configuration with an enumerated domain.

    Every allowed value maps to exactly one class fragment. An empty
    fragment is a valid "no contribution" entry.
    """

    name: str
    fragments: Mapping[str, str]
    default: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("VariantDimension name must be a non-empty string")
        # Private read-only copy of the caller's mapping.
        object.__setattr__(self, "fragments", MappingProxyType(dict(self.fragments)))
        if self.default not in self.fragments:
            raise ValueError(
                f"Default {self.default!r} is not an allowed value of dimension {self.name!r}"
            )

    @property
    def allowed_values(self) -> frozenset[str]:
        return frozenset(self.fragments)

    def __hash__(self) -> int:
        return hash((self.name, self.default, tuple(self.fragments.items())))


@dataclass(frozen=True)
class ConditionalRule:
    """A class fragment appended only when *predicate* holds for the config."""

    name: str
    predicate: Predicate
    fragment: str

    def applies(self, config: Mapping[str, Any]) -> bool:
        return bool(self.predicate(config))


@dataclass(frozen=True, eq=False)
class ComponentStyleSpec:
    """Read-only style template for one component kind.

    Built once at import time and shared by every resolution call. Equality
    and hashing are by identity, which is what the style cache keys on.
    """

    name: str
    base_classes: tuple[str, ...] = ()
    dimensions: tuple[VariantDimension, ...] = ()
    rules: tuple[ConditionalRule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        names = [d.name for d in self.dimensions]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate dimension names in spec {self.name!r}: {names}")

    @property
    def dimension_names(self) -> tuple[str, ...]:
        return tuple(d.name for d in self.dimensions)
