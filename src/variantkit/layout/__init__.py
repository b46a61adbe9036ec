from variantkit.layout.engine import preset, resolve_layout, responsive_fragment

__all__ = ["preset", "resolve_layout", "responsive_fragment"]
