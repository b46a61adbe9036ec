from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Engine-wide settings."""

    cache_size: int = 256  # 0 disables memoization
    strict_keys: bool = True  # unknown config keys raise ConfigError
    warn_deprecated: bool = True
