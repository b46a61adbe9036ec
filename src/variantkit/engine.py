"""Engine: memoized entry point that dispatches by component kind."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from variantkit.components import (
    resolve_action_buttons,
    resolve_button,
    resolve_footer,
    resolve_header,
    resolve_logo,
    resolve_page,
)
from variantkit.compose.cache import StyleCache
from variantkit.config.loader import load
from variantkit.config.schema import TOP_LEVEL_KINDS, schema_for
from variantkit.config.settings import EngineConfig
from variantkit.errors import ConfigError
from variantkit.renderer.base import Renderer

__all__ = ["Engine", "RESOLVERS"]

logger = logging.getLogger(__name__)

RESOLVERS: Mapping[str, Callable[..., Any]] = {
    "button": resolve_button,
    "action_buttons": resolve_action_buttons,
    "logo": resolve_logo,
    "header": resolve_header,
    "footer": resolve_footer,
    "page": resolve_page,
}


class Engine:
    """Resolve component configurations into render plans.

    Style resolutions are memoized per (style spec, config values); nothing
    else is cached, so every call returns fresh plan objects.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.styles = StyleCache(self.config.cache_size)

    @staticmethod
    def kinds() -> tuple[str, ...]:
        return TOP_LEVEL_KINDS

    def load(self, kind: str, data: Any, deprecations: list[str] | None = None) -> Any:
        """Build the config object for *kind* from a dict."""
        self._check_kind(kind)
        return load(kind, data, self.config, deprecations)

    def resolve(self, kind: str, config: Any, deprecations: list[str] | None = None) -> Any:
        """Resolve *config* (a dict or a config object) for *kind*.

        Legacy-key notices are appended to *deprecations* when it is given;
        otherwise they are issued as :class:`DeprecatedKeyWarning`.

        Raises:
            ConfigError: unknown kind, key, dimension value, preset or
                incomplete icon.
        """
        self._check_kind(kind)
        if isinstance(config, Mapping):
            config = load(kind, config, self.config, deprecations)
        elif not isinstance(config, schema_for(kind).factory):
            raise ConfigError(
                f"{kind}: expected a mapping or {schema_for(kind).factory.__name__}, "
                f"got {type(config).__name__}",
                component=kind,
            )
        logger.debug("Resolving %s", kind)
        return RESOLVERS[kind](config, self.styles.resolve)

    def render(self, kind: str, config: Any, renderer: Renderer) -> Any:
        """Resolve *config* and hand the plan to *renderer*."""
        return renderer.render(kind, self.resolve(kind, config))

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in RESOLVERS:
            raise ConfigError(
                f"Unknown component kind {kind!r} (allowed: {', '.join(TOP_LEVEL_KINDS)})",
                component=kind,
            )
