from variantkit.elements.resolver import (
    activation_handle,
    element_attributes,
    resolve_element_kind,
    resolve_interaction,
)

__all__ = [
    "activation_handle",
    "element_attributes",
    "resolve_element_kind",
    "resolve_interaction",
]
