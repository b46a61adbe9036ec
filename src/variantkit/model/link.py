"""Link configuration and resolved navigation attributes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkConfig:
    """Caller-supplied link semantics for a single destination."""

    href: str
    external: bool | None = None
    target: str | None = None
    rel: str | None = None


@dataclass(frozen=True)
class ResolvedLink:
    is_external: bool
    target: str | None = None
    rel: str | None = None

    def attributes(self) -> dict[str, str]:
        """Return only the attributes that resolved to a value."""
        attrs: dict[str, str] = {}
        if self.target:
            attrs["target"] = self.target
        if self.rel:
            attrs["rel"] = self.rel
        return attrs
