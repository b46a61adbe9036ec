"""VariantRegistry: pure lookup from (dimension, value) to class fragment."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, Iterator, Mapping

from variantkit.errors import ConfigError
from variantkit.model.dimension import ComponentStyleSpec, VariantDimension

__all__ = ["VariantRegistry", "registry_for"]


class VariantRegistry:
    """Ordered, read-only table of variant dimensions.

    Declaration order is kept so that ``resolve_all`` always yields fragments
    in the same order regardless of how the caller's config was built.
    """

    def __init__(self, dimensions: Iterable[VariantDimension], component: str = "") -> None:
        self._component = component
        self._dimensions: dict[str, VariantDimension] = {}
        for dim in dimensions:
            if dim.name in self._dimensions:
                raise ValueError(f"Dimension {dim.name!r} registered twice")
            self._dimensions[dim.name] = dim

    @property
    def component(self) -> str:
        return self._component

    def dimension(self, name: str) -> VariantDimension:
        try:
            return self._dimensions[name]
        except KeyError:
            raise ConfigError(
                f"Unknown dimension {name!r}"
                + (f" for component {self._component!r}" if self._component else ""),
                component=self._component or None,
                dimension=name,
            ) from None

    def check(self, name: str, value: str | None) -> str:
        """Return the effective value for *name*, substituting the default."""
        dim = self.dimension(name)
        if value is None:
            return dim.default
        if not isinstance(value, str) or value not in dim.fragments:
            allowed = ", ".join(sorted(dim.allowed_values))
            raise ConfigError(
                f"Unknown value {value!r} for dimension {name!r} (allowed: {allowed})",
                component=self._component or None,
                dimension=name,
                value=value,
            )
        return value

    def resolve(self, name: str, value: str | None = None) -> str:
        """Return the class fragment for *value* of dimension *name*.

        Omitted values fall back to the declared default. Unknown values
        raise :class:`ConfigError`.
        """
        effective = self.check(name, value)
        return self._dimensions[name].fragments[effective]

    def effective_values(self, config: Mapping[str, Any]) -> dict[str, str]:
        """Return every dimension's effective value, in declaration order."""
        return {name: self.check(name, config.get(name)) for name in self._dimensions}

    def resolve_all(self, config: Mapping[str, Any]) -> list[tuple[str, str]]:
        """Return ``(dimension, fragment)`` pairs in declaration order."""
        return [
            (name, self.resolve(name, config.get(name))) for name in self._dimensions
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._dimensions

    def __iter__(self) -> Iterator[VariantDimension]:
        return iter(self._dimensions.values())

    def __len__(self) -> int:
        return len(self._dimensions)

    def __repr__(self) -> str:
        return f"VariantRegistry(component={self._component!r}, dimensions={list(self._dimensions)})"


@lru_cache(maxsize=None)
def registry_for(spec: ComponentStyleSpec) -> VariantRegistry:
    """Return the registry for *spec*'s dimensions, built once per spec."""
    return VariantRegistry(spec.dimensions, component=spec.name)
