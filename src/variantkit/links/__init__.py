from variantkit.links.resolver import (
    NEW_CONTEXT_TARGET,
    SAFE_REL,
    is_external,
    opens_new_context,
    resolve_link,
    resolve_link_config,
)

__all__ = [
    "NEW_CONTEXT_TARGET",
    "SAFE_REL",
    "is_external",
    "opens_new_context",
    "resolve_link",
    "resolve_link_config",
]
