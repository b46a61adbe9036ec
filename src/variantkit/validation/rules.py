"""Validation rules for component configuration dicts.

Each rule is a function taking a component kind and its raw config dict
and returning a list of Diagnostic objects. Rules never raise; they only
report. Nested configs are visited by the validator, not by the rules.
"""

from __future__ import annotations

from typing import Any, Mapping

from variantkit.config.schema import matches_type, schema_for
from variantkit.links.resolver import opens_new_context, resolve_link
from variantkit.model.diagnostic import Diagnostic, Severity
from variantkit.registry import tables

_RESPONSIVE_DIMENSIONS = {
    "mobile": tables.MOBILE_BEHAVIOR,
    "tablet": tables.TABLET_BEHAVIOR,
}


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_unknown_keys(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Every key must be a known field or a recognized legacy alias."""
    schema = schema_for(kind)
    diagnostics: list[Diagnostic] = []
    for key in data:
        if key in schema.keys or key in schema.aliases:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_keys",
                severity=Severity.ERROR,
                message=f"Unknown key '{key}'.",
                component=kind,
                key=key,
                fix=f"Allowed keys: {', '.join(sorted(schema.keys))}.",
            )
        )
    return diagnostics


def check_required_keys(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Required keys (icon address and alt text, link label and href) must be non-empty."""
    schema = schema_for(kind)
    reverse = {new: old for old, new in schema.aliases.items()}
    diagnostics: list[Diagnostic] = []
    for key in sorted(schema.required):
        value = data.get(key)
        if value is None and key in reverse:
            value = data.get(reverse[key])
        if not value:
            diagnostics.append(
                Diagnostic(
                    rule="check_required_keys",
                    severity=Severity.ERROR,
                    message=f"Missing required key '{key}'.",
                    component=kind,
                    key=key,
                )
            )
    return diagnostics


def check_dimension_values(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Dimension values must be one of the declared allowed values."""
    schema = schema_for(kind)
    checks: list[tuple[str, Any, Any]] = []
    for key, dim in schema.dimensions.items():
        if data.get(key) is not None:
            checks.append((key, data[key], dim))
    responsive = data.get("responsive") if kind == "action_buttons" else None
    if isinstance(responsive, Mapping):
        for sub, dim in _RESPONSIVE_DIMENSIONS.items():
            if responsive.get(sub) is not None:
                checks.append((f"responsive.{sub}", responsive[sub], dim))

    diagnostics: list[Diagnostic] = []
    for key, value, dim in checks:
        if isinstance(value, str) and value in dim.fragments:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_dimension_values",
                severity=Severity.ERROR,
                message=f"Unknown value {value!r} for dimension '{dim.name}'.",
                component=kind,
                key=key,
                fix=f"Use one of: {', '.join(sorted(dim.allowed_values))}.",
            )
        )
    return diagnostics


def check_field_types(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Scalar values must match their field type; dimensions are checked separately."""
    schema = schema_for(kind)
    scalars = schema.scalar_fields
    diagnostics: list[Diagnostic] = []
    for key, value in data.items():
        name = key if key in schema.keys else schema.aliases.get(key)
        if name not in scalars or name in schema.dimensions:
            continue
        hint, annotation = scalars[name]
        if matches_type(hint, value):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_field_types",
                severity=Severity.ERROR,
                message=f"'{key}' must be {annotation}, got {type(value).__name__}.",
                component=kind,
                key=key,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_deprecated_keys(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Legacy keys still work but should be renamed."""
    schema = schema_for(kind)
    return [
        Diagnostic(
            rule="check_deprecated_keys",
            severity=Severity.WARNING,
            message=f"Key '{key}' is deprecated.",
            component=kind,
            key=key,
            fix=f"Use '{schema.aliases[key]}' instead.",
        )
        for key in data
        if key in schema.aliases and key not in schema.keys
    ]


def check_rel_safety(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """An explicit rel on a new-context link should keep 'noopener'."""
    href = data.get("href")
    rel = data.get("rel")
    if not href or not rel or not isinstance(rel, str):
        return []
    link = resolve_link(href, data.get("external"), data.get("target"), rel)
    if opens_new_context(link.target) and "noopener" not in rel.split():
        return [
            Diagnostic(
                rule="check_rel_safety",
                severity=Severity.WARNING,
                message=f"Link opens a new context (target={link.target!r}) but rel={rel!r} omits 'noopener'.",
                component=kind,
                key="rel",
                fix="Add 'noopener' to rel, or drop rel to get the safe default.",
            )
        ]
    return []


def check_loading_and_disabled(kind: str, data: Mapping[str, Any]) -> list[Diagnostic]:
    """Loading already implies disabled; setting both is redundant but legal."""
    if kind == "button" and data.get("loading") and data.get("disabled"):
        return [
            Diagnostic(
                rule="check_loading_and_disabled",
                severity=Severity.INFO,
                message="Both 'loading' and 'disabled' are set; loading already suppresses interaction.",
                component=kind,
                key="disabled",
            )
        ]
    return []


ALL_RULES = [
    check_unknown_keys,
    check_required_keys,
    check_dimension_values,
    check_field_types,
    check_deprecated_keys,
    check_rel_safety,
    check_loading_and_disabled,
]
