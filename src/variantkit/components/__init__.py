"""Per-widget resolvers built on the composition engine."""

from variantkit.components.action_buttons import (
    ActionButtonsConfig,
    ActionButtonsPlan,
    resolve_action_buttons,
)
from variantkit.components.button import ButtonConfig, resolve_button
from variantkit.components.footer import (
    FooterConfig,
    FooterLink,
    FooterPlan,
    FooterSection,
    SectionPlan,
    resolve_footer,
)
from variantkit.components.header import HeaderConfig, HeaderPlan, NavItem, resolve_header
from variantkit.components.logo import (
    LogoConfig,
    LogoPlan,
    SkeletonPlan,
    logo_dimensions,
    logo_skeleton,
    resolve_logo,
)
from variantkit.components.navlink import LinkPlan
from variantkit.components.page import PageConfig, PagePlan, resolve_page

__all__ = [
    "ActionButtonsConfig",
    "ActionButtonsPlan",
    "ButtonConfig",
    "FooterConfig",
    "FooterLink",
    "FooterPlan",
    "FooterSection",
    "HeaderConfig",
    "HeaderPlan",
    "LinkPlan",
    "LogoConfig",
    "LogoPlan",
    "NavItem",
    "PageConfig",
    "PagePlan",
    "SectionPlan",
    "SkeletonPlan",
    "logo_dimensions",
    "logo_skeleton",
    "resolve_action_buttons",
    "resolve_button",
    "resolve_footer",
    "resolve_header",
    "resolve_logo",
    "resolve_page",
]
