"""ClassComposer: merge ordered fragments into one deterministic class string.

Composition order is fixed:

    1. base classes, verbatim
    2. dimension fragments, in dimension declaration order
    3. conditional rule fragments, in rule declaration order, when the
       rule's predicate holds
    4. caller overrides

Duplicate tokens keep only their last occurrence. Empty fragments are the
"no contribution" case and are dropped silently.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

from variantkit.model.dimension import ComponentStyleSpec, ConditionalRule
from variantkit.model.style import Contribution, ResolvedStyle
from variantkit.registry.variants import registry_for

__all__ = [
    "StyleResolver",
    "compose",
    "compose_style",
    "dedupe_last",
    "merge_classes",
    "resolve_style",
]

logger = logging.getLogger(__name__)

ClassInput = str | Iterable[str] | None


def _fragments(value: ClassInput) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [v for v in value if v]


def dedupe_last(tokens: Iterable[str]) -> list[str]:
    """Drop repeated tokens, keeping each one at its last position."""
    seen: set[str] = set()
    kept: list[str] = []
    for token in reversed(list(tokens)):
        if token in seen:
            continue
        seen.add(token)
        kept.append(token)
    kept.reverse()
    return kept


def compose_style(
    base_classes: ClassInput,
    dimension_resolutions: Sequence[tuple[str, str]] = (),
    conditional_rules: Sequence[ConditionalRule] = (),
    override_classes: ClassInput = None,
    config: Mapping[str, Any] | None = None,
) -> ResolvedStyle:
    """Compose fragments into a :class:`ResolvedStyle`.

    *dimension_resolutions* are ``(dimension, fragment)`` pairs and must
    already be in declaration order. *conditional_rules* are evaluated
    against *config*.
    """
    config = config or {}
    contributions: list[Contribution] = []

    for fragment in _fragments(base_classes):
        contributions.append(Contribution("base", fragment))
    for name, fragment in dimension_resolutions:
        if fragment:
            contributions.append(Contribution(f"dimension:{name}", fragment))
    for rule in conditional_rules:
        if rule.fragment and rule.applies(config):
            contributions.append(Contribution(f"rule:{rule.name}", rule.fragment))
    for fragment in _fragments(override_classes):
        contributions.append(Contribution("override", fragment))

    tokens = [token for c in contributions for token in c.fragment.split()]
    return ResolvedStyle(class_list=tuple(dedupe_last(tokens)), contributions=tuple(contributions))


def compose(
    base_classes: ClassInput,
    dimension_resolutions: Sequence[tuple[str, str]] = (),
    conditional_rules: Sequence[ConditionalRule] = (),
    override_classes: ClassInput = None,
    config: Mapping[str, Any] | None = None,
) -> str:
    """Like :func:`compose_style` but returns the space-joined string."""
    return compose_style(
        base_classes, dimension_resolutions, conditional_rules, override_classes, config
    ).class_string


def merge_classes(*parts: ClassInput | bool) -> str:
    """Join ad-hoc class fragments, skipping falsy parts.

    Used for one-off slots that have no style spec of their own.
    """
    fragments: list[str] = []
    for part in parts:
        if part is True or part is False:
            continue
        fragments.extend(_fragments(part))  # type: ignore[arg-type]
    return " ".join(dedupe_last(t for f in fragments for t in f.split()))


def resolve_style(
    spec: ComponentStyleSpec,
    config: Mapping[str, Any] | None = None,
    overrides: ClassInput = None,
) -> ResolvedStyle:
    """Resolve *config* against *spec*.

    Dimension values missing from *config* take their declared default;
    rule predicates see the config with those defaults filled in.
    """
    config = dict(config or {})
    registry = registry_for(spec)
    effective = registry.effective_values(config)
    config.update(effective)
    resolutions = [(name, registry.resolve(name, value)) for name, value in effective.items()]
    style = compose_style(spec.base_classes, resolutions, spec.rules, overrides, config)
    logger.debug("Resolved %s: %s", spec.name, style.class_string)
    return style


StyleResolver = Callable[[ComponentStyleSpec, Mapping[str, Any], ClassInput], ResolvedStyle]
