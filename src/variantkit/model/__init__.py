"""variantkit model layer -- public type re-exports."""

from variantkit.model.diagnostic import Diagnostic, Severity
from variantkit.model.dimension import ComponentStyleSpec, ConditionalRule, VariantDimension
from variantkit.model.element import ButtonContent, ElementKind, InteractionState, RenderPlan
from variantkit.model.icon import IconDescriptor
from variantkit.model.layout import LayoutContext, LayoutOverrides, LayoutPreset, ResolvedLayout
from variantkit.model.link import LinkConfig, ResolvedLink
from variantkit.model.style import Contribution, ResolvedStyle

__all__ = [
    # style templates
    "VariantDimension",
    "ConditionalRule",
    "ComponentStyleSpec",
    # style output
    "Contribution",
    "ResolvedStyle",
    # links
    "LinkConfig",
    "ResolvedLink",
    # elements
    "ElementKind",
    "InteractionState",
    "ButtonContent",
    "RenderPlan",
    "IconDescriptor",
    # layout
    "LayoutPreset",
    "LayoutOverrides",
    "LayoutContext",
    "ResolvedLayout",
    # diagnostic
    "Severity",
    "Diagnostic",
]
