from variantkit.registry.variants import VariantRegistry, registry_for
from variantkit.registry import tables

__all__ = ["VariantRegistry", "registry_for", "tables"]
