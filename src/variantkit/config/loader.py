"""Build component configs from plain dicts (JSON input).

Keys are snake_case. Legacy camelCase keys are honored and reported with
:class:`DeprecatedKeyWarning`; when both spellings are present the current
one wins. Unknown keys raise :class:`ConfigError` unless
``EngineConfig.strict_keys`` is off.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from variantkit.config.schema import ComponentSchema, matches_type, schema_for
from variantkit.config.settings import EngineConfig
from variantkit.errors import ConfigError, warn_deprecated_key

__all__ = ["load", "normalize"]

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = EngineConfig()


def _deprecated(
    kind: str, old: str, new: str, settings: EngineConfig, deprecations: list[str] | None
) -> None:
    if settings.warn_deprecated:
        warn_deprecated_key(kind, old, new, stacklevel=5, collector=deprecations)


def _expand_responsive(
    kind: str,
    value: Any,
    out: dict[str, Any],
    settings: EngineConfig,
    deprecations: list[str] | None,
) -> None:
    """``responsive: {mobile, tablet}`` -> ``mobile_behavior`` / ``tablet_behavior``."""
    if not isinstance(value, Mapping):
        raise ConfigError(f"{kind}: 'responsive' must be a mapping", component=kind, key="responsive")
    unknown = set(value) - {"mobile", "tablet"}
    if unknown:
        raise ConfigError(
            f"{kind}: unknown responsive key(s) {sorted(unknown)}", component=kind, key="responsive"
        )
    _deprecated(kind, "responsive", "mobile_behavior", settings, deprecations)
    if "mobile" in value:
        out.setdefault("mobile_behavior", value["mobile"])
    if "tablet" in value:
        out.setdefault("tablet_behavior", value["tablet"])


def normalize(
    schema: ComponentSchema,
    data: Any,
    settings: EngineConfig = _DEFAULT_SETTINGS,
    deprecations: list[str] | None = None,
) -> dict[str, Any]:
    """Return *data* with legacy keys mapped and unknown keys rejected.

    Scalar values must match their field annotation. When *deprecations* is
    given, legacy-key notices are appended to it instead of being issued
    through :mod:`warnings`.
    """
    kind = schema.kind
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"{kind}: expected a mapping, got {type(data).__name__}", component=kind
        )

    allowed = schema.keys
    out: dict[str, Any] = {k: v for k, v in data.items() if k in allowed}
    icon_position = None
    for key, value in data.items():
        if key in allowed:
            continue
        new = schema.aliases.get(key)
        if new is None:
            if settings.strict_keys:
                raise ConfigError(f"{kind}: unknown key {key!r}", component=kind, key=key)
            logger.warning("%s: ignoring unknown key %r", kind, key)
            continue
        if key == "responsive":
            _expand_responsive(kind, value, out, settings, deprecations)
        elif new == "icon_position":
            _deprecated(kind, key, "icon.position", settings, deprecations)
            icon_position = value
        else:
            _deprecated(kind, key, new, settings, deprecations)
            out.setdefault(new, value)

    if icon_position is not None and isinstance(out.get("icon"), Mapping):
        icon = dict(out["icon"])
        icon.setdefault("position", icon_position)
        out["icon"] = icon

    missing = schema.required - set(out)
    if missing:
        raise ConfigError(
            f"{kind}: missing required key(s) {sorted(missing)}",
            component=kind,
            key=sorted(missing)[0],
        )
    for key, (hint, annotation) in schema.scalar_fields.items():
        if key in out and not matches_type(hint, out[key]):
            raise ConfigError(
                f"{kind}: {key!r} must be {annotation}, got {type(out[key]).__name__}",
                component=kind,
                key=key,
                dimension=key if key in schema.dimensions else None,
                value=out[key],
            )
    return out


def load(
    kind: str,
    data: Any,
    settings: EngineConfig = _DEFAULT_SETTINGS,
    deprecations: list[str] | None = None,
) -> Any:
    """Build the config dataclass for *kind* from *data*.

    Nested configs (buttons, links, sections, logos, icons) are loaded
    recursively. Dimension values are not checked here; resolution does that.
    """
    schema = schema_for(kind)
    values = normalize(schema, data, settings, deprecations)
    for key, (child_kind, many) in schema.children.items():
        child = values.get(key)
        if child is None:
            continue
        if many:
            if isinstance(child, (str, Mapping)) or not hasattr(child, "__iter__"):
                raise ConfigError(f"{kind}: {key!r} must be a list", component=kind, key=key)
            values[key] = tuple(load(child_kind, item, settings, deprecations) for item in child)
        else:
            values[key] = load(child_kind, child, settings, deprecations)
    try:
        return schema.factory(**values)
    except TypeError as exc:
        raise ConfigError(f"{kind}: {exc}", component=kind) from exc
