"""Diagnostic model: structured findings about a configuration object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a component configuration.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        component: Component kind the configuration belongs to.
        key: The configuration key involved, if applicable.
        fix: Suggested remediation, if available.
        path: Where the component sits in the checked document, e.g.
            ``header.actions[0].icon``. Filled in by the validator.
    """

    rule: str
    severity: Severity
    message: str
    component: str | None = None
    key: str | None = None
    fix: str | None = None
    path: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        """Dotted location of the finding, ending in the key when there is one."""
        where = self.path or self.component or ""
        if self.key:
            return f"{where}.{self.key}" if where else self.key
        return where

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{location}: {self.message}"
