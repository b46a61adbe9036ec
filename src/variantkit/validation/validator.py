"""Config validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Mapping

from variantkit.config.schema import schema_for
from variantkit.model.diagnostic import Diagnostic, Severity
from variantkit.validation.rules import ALL_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[str, Mapping[str, Any]], list[Diagnostic]]


def _walk(kind: str, data: Any, rules: list[RuleFunc], path: str) -> list[Diagnostic]:
    if not isinstance(data, Mapping):
        return [
            Diagnostic(
                rule="check_shape",
                severity=Severity.ERROR,
                message=f"Expected a mapping, got {type(data).__name__}.",
                component=kind,
                path=path,
            )
        ]
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(
            d if d.path is not None else replace(d, path=path) for d in rule(kind, data)
        )

    schema = schema_for(kind)
    for key, (child_kind, many) in schema.children.items():
        child = data.get(key)
        if child is None:
            continue
        if not many:
            diagnostics.extend(_walk(child_kind, child, rules, f"{path}.{key}"))
        elif isinstance(child, list):
            for index, item in enumerate(child):
                diagnostics.extend(_walk(child_kind, item, rules, f"{path}.{key}[{index}]"))
        else:
            diagnostics.append(
                Diagnostic(
                    rule="check_shape",
                    severity=Severity.ERROR,
                    message=f"'{key}' must be a list.",
                    component=kind,
                    key=key,
                    path=path,
                )
            )
    return diagnostics


def validate(
    kind: str, data: Any, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all validation rules against *data*, including nested configs.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    schema_for(kind)  # unknown kinds raise ConfigError
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    return _walk(kind, data, rules, kind)


def validate_or_raise(
    kind: str, data: Any, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(kind, data, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
