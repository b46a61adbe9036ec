"""variantkit: style-variant composition and element resolution for UI widgets."""

__version__ = "0.1.0"

from variantkit.compose import compose, merge_classes, resolve_style  # noqa: E402
from variantkit.config import EngineConfig  # noqa: E402
from variantkit.elements import resolve_element_kind, resolve_interaction  # noqa: E402
from variantkit.engine import Engine  # noqa: E402
from variantkit.errors import ConfigError, DeprecatedKeyWarning  # noqa: E402
from variantkit.layout import resolve_layout, responsive_fragment  # noqa: E402
from variantkit.links import resolve_link  # noqa: E402
from variantkit.model import ElementKind, RenderPlan, ResolvedStyle  # noqa: E402
from variantkit.registry import VariantRegistry  # noqa: E402

__all__ = [
    "__version__",
    "ConfigError",
    "DeprecatedKeyWarning",
    "ElementKind",
    "Engine",
    "EngineConfig",
    "RenderPlan",
    "ResolvedStyle",
    "VariantRegistry",
    "compose",
    "merge_classes",
    "resolve_element_kind",
    "resolve_interaction",
    "resolve_layout",
    "resolve_link",
    "resolve_style",
    "responsive_fragment",
]
