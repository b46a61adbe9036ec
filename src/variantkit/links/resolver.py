"""Link semantics: external-link detection and safe navigation defaults.

    is_external = explicit external OR href starts with "http" or "//"
    target      = explicit target, else "_blank" for external links
    rel         = explicit rel, else "noopener noreferrer" whenever the
                  target opens a new browsing context

An explicit ``rel`` is always respected, even when it omits ``noopener``.
"""

from __future__ import annotations

from variantkit.model.link import LinkConfig, ResolvedLink

__all__ = [
    "NEW_CONTEXT_TARGET",
    "SAFE_REL",
    "is_external",
    "opens_new_context",
    "resolve_link",
    "resolve_link_config",
]

NEW_CONTEXT_TARGET = "_blank"
SAFE_REL = "noopener noreferrer"

# Keywords that navigate an existing context; anything else opens a new one.
_EXISTING_CONTEXT_TARGETS = frozenset({"_self", "_parent", "_top"})


def is_external(href: str | None, explicit: bool | None = None) -> bool:
    if explicit:
        return True
    if not href:
        return False
    return href.startswith("http") or href.startswith("//")


def opens_new_context(target: str | None) -> bool:
    """True when *target* names a browsing context other than the current one."""
    if not target:
        return False
    return target.lower() not in _EXISTING_CONTEXT_TARGETS


def resolve_link(
    href: str | None,
    external: bool | None = None,
    target: str | None = None,
    rel: str | None = None,
) -> ResolvedLink:
    """Resolve navigation attributes for *href*.

    Empty strings count as "not supplied", same as ``None``.
    """
    external_link = is_external(href, external)
    final_target = target or (NEW_CONTEXT_TARGET if external_link else None)
    if rel:
        final_rel: str | None = rel
    elif external_link or opens_new_context(final_target):
        final_rel = SAFE_REL
    else:
        final_rel = None
    return ResolvedLink(is_external=external_link, target=final_target, rel=final_rel)


def resolve_link_config(link: LinkConfig) -> ResolvedLink:
    return resolve_link(link.href, link.external, link.target, link.rel)
