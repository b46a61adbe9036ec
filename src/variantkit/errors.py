"""Error and warning types for configuration resolution."""

from __future__ import annotations

import logging
import warnings

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value is structurally invalid.

    Unknown dimension values, unknown layout presets, unknown max-width keys
    and icons missing ``address``/``alt_text`` all end up here. Never
    silently defaulted.
    """

    def __init__(
        self,
        message: str,
        *,
        component: str | None = None,
        dimension: str | None = None,
        value: object = None,
        key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.component = component
        self.dimension = dimension
        self.value = value
        self.key = key


class DeprecatedKeyWarning(UserWarning):
    """A legacy configuration key was recognized and honored."""


def warn_deprecated_key(
    component: str,
    old: str,
    new: str,
    *,
    stacklevel: int = 3,
    collector: list[str] | None = None,
) -> None:
    """Log a legacy-key notice and report it.

    The notice goes to *collector* when one is given, otherwise it is
    emitted as a :class:`DeprecatedKeyWarning`.
    """
    message = f"{component}: '{old}' is deprecated, use '{new}'"
    logger.warning(message)
    if collector is not None:
        collector.append(message)
    else:
        warnings.warn(message, DeprecatedKeyWarning, stacklevel=stacklevel)
