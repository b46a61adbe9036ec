from variantkit.config.loader import load, normalize
from variantkit.config.schema import SCHEMAS, TOP_LEVEL_KINDS, ComponentSchema, schema_for
from variantkit.config.settings import EngineConfig

__all__ = [
    "ComponentSchema",
    "EngineConfig",
    "SCHEMAS",
    "TOP_LEVEL_KINDS",
    "load",
    "normalize",
    "schema_for",
]
