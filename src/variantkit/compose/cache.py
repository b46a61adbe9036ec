"""Memoized style resolution keyed on (spec identity, configuration value)."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from variantkit.compose.composer import ClassInput, resolve_style
from variantkit.model.dimension import ComponentStyleSpec
from variantkit.model.style import ResolvedStyle


def _freeze_overrides(overrides: ClassInput) -> tuple[str, ...]:
    if not overrides:
        return ()
    if isinstance(overrides, str):
        return (overrides,)
    return tuple(overrides)


class StyleCache:
    """LRU cache in front of :func:`resolve_style`.

    Outputs are a pure function of their inputs, so size-based eviction is
    the only invalidation needed. Unhashable config values skip the cache.
    """

    def __init__(self, maxsize: int = 256) -> None:
        self.maxsize = maxsize
        if maxsize > 0:
            self._cached = lru_cache(maxsize=maxsize)(self._resolve_frozen)
        else:
            self._cached = self._resolve_frozen

    @staticmethod
    def _resolve_frozen(
        spec: ComponentStyleSpec,
        items: tuple[tuple[str, Any], ...],
        overrides: tuple[str, ...],
    ) -> ResolvedStyle:
        return resolve_style(spec, dict(items), overrides)

    def resolve(
        self,
        spec: ComponentStyleSpec,
        config: Mapping[str, Any] | None = None,
        overrides: ClassInput = None,
    ) -> ResolvedStyle:
        items = tuple(sorted((config or {}).items()))
        frozen = _freeze_overrides(overrides)
        try:
            hash((items, frozen))
        except TypeError:
            # Lists from JSON input are resolved uncached.
            return resolve_style(spec, dict(items), frozen)
        return self._cached(spec, items, frozen)

    def info(self) -> Any:
        """Return hit/miss statistics, or None when caching is disabled."""
        cache_info = getattr(self._cached, "cache_info", None)
        return cache_info() if cache_info else None

    def clear(self) -> None:
        cache_clear = getattr(self._cached, "cache_clear", None)
        if cache_clear:
            cache_clear()
