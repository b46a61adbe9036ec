from variantkit.compose.composer import (
    compose,
    compose_style,
    dedupe_last,
    merge_classes,
    resolve_style,
)
from variantkit.compose.cache import StyleCache

__all__ = [
    "compose",
    "compose_style",
    "dedupe_last",
    "merge_classes",
    "resolve_style",
    "StyleCache",
]
