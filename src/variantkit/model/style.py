"""Resolved style output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Contribution:
    """One fragment appended during composition, tagged with where it came from.

    ``source`` is ``"base"``, ``"dimension:<name>"``, ``"rule:<name>"`` or
    ``"override"``.
    """

    source: str
    fragment: str


@dataclass(frozen=True)
class ResolvedStyle:
    """Ordered, deduplicated class tokens produced by one resolution call."""

    class_list: tuple[str, ...]
    contributions: tuple[Contribution, ...] = ()

    @property
    def class_string(self) -> str:
        return " ".join(self.class_list)

    def fragment_for(self, source: str) -> str | None:
        """Return the fragment contributed by *source*, if any."""
        for contribution in self.contributions:
            if contribution.source == source:
                return contribution.fragment
        return None

    def __str__(self) -> str:
        return self.class_string
