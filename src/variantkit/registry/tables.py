"""Immutable style tables, built once at import time.

Each component kind gets one :class:`ComponentStyleSpec`. Conditional
rules are evaluated in the order listed here.
"""

from __future__ import annotations

from types import MappingProxyType

from variantkit.model.dimension import ComponentStyleSpec, ConditionalRule, VariantDimension
from variantkit.model.layout import LayoutPreset

# ---------------------------------------------------------------------------
# Button
# ---------------------------------------------------------------------------

BUTTON_VARIANT = VariantDimension(
    name="variant",
    fragments={
        "primary": "bg-foreground text-background border-transparent hover:bg-[#383838] dark:hover:bg-[#ccc]",
        "secondary": "border-black/[.08] dark:border-white/[.145] hover:bg-[#f2f2f2] dark:hover:bg-[#1a1a1a] hover:border-transparent",
        "ghost": "border-transparent hover:bg-accent hover:text-accent-foreground",
        "link": "border-transparent underline-offset-4 hover:underline text-primary",
    },
    default="primary",
)

BUTTON_SIZE = VariantDimension(
    name="size",
    fragments={
        "sm": "h-9 px-3 text-sm",
        "default": "h-10 px-4 text-sm sm:h-12 sm:px-5 sm:text-base",
        "lg": "h-11 px-8 text-base",
        "icon": "h-10 w-10",
    },
    default="default",
)

BUTTON_WIDTH = VariantDimension(
    name="width",
    fragments={
        "auto": "w-auto",
        "full": "w-full",
        "fixed": "w-full sm:w-auto md:w-[158px]",
    },
    default="auto",
)

BUTTON_SPEC = ComponentStyleSpec(
    name="button",
    base_classes=(
        "inline-flex items-center justify-center gap-2 rounded-full border border-solid "
        "transition-colors font-medium focus-visible:outline-none focus-visible:ring-2 "
        "focus-visible:ring-ring focus-visible:ring-offset-2 disabled:pointer-events-none "
        "disabled:opacity-50",
    ),
    dimensions=(BUTTON_VARIANT, BUTTON_SIZE, BUTTON_WIDTH),
    rules=(
        ConditionalRule("inert", lambda c: bool(c.get("inert")), "pointer-events-none opacity-50"),
    ),
)

# Generic defaults, independent of any preset table.
BUTTON_DEFAULTS = MappingProxyType({d.name: d.default for d in BUTTON_SPEC.dimensions})

# ---------------------------------------------------------------------------
# Action-button group
# ---------------------------------------------------------------------------

# Shared with the layout engine: ``stack`` only reorients row layouts.
RESPONSIVE_RULES = (
    ConditionalRule(
        "stack",
        lambda c: c.get("mobile_behavior") == "stack" and c.get("direction") == "horizontal",
        "flex-col sm:flex-row",
    ),
    ConditionalRule("wrap", lambda c: c.get("mobile_behavior") == "wrap", "flex-row flex-wrap"),
    ConditionalRule("scroll", lambda c: c.get("mobile_behavior") == "scroll", "flex-row overflow-x-auto"),
)

DIRECTION = VariantDimension(
    name="direction",
    fragments={"horizontal": "flex-row", "vertical": "flex-col"},
    default="horizontal",
)

MOBILE_BEHAVIOR = VariantDimension(
    name="mobile_behavior",
    fragments={"stack": "", "wrap": "", "scroll": ""},
    default="stack",
)

TABLET_BEHAVIOR = VariantDimension(
    name="tablet_behavior",
    fragments={"row": "", "column": ""},
    default="row",
)

ACTION_GROUP_SPEC = ComponentStyleSpec(
    name="action_buttons",
    base_classes=("flex",),
    dimensions=(
        VariantDimension(
            name="gap",
            fragments={"sm": "gap-2", "md": "gap-4", "lg": "gap-6"},
            default="md",
        ),
        VariantDimension(
            name="align",
            fragments={
                "start": "justify-start items-start",
                "center": "justify-center items-center",
                "end": "justify-end items-end",
                "stretch": "justify-stretch items-stretch",
            },
            default="center",
        ),
        DIRECTION,
        VariantDimension(
            name="width",
            fragments={"auto": "w-auto", "full": "w-full"},
            default="auto",
        ),
        MOBILE_BEHAVIOR,
        TABLET_BEHAVIOR,
    ),
    rules=RESPONSIVE_RULES,
)

# ---------------------------------------------------------------------------
# Logo
# ---------------------------------------------------------------------------

LOGO_SIZES = MappingProxyType({
    "sm": (100, 20),
    "md": (140, 28),
    "lg": (180, 38),
    "xl": (220, 48),
    "custom": (None, None),
})
LOGO_CUSTOM_FALLBACK = (180, 38)

LOGO_SPEC = ComponentStyleSpec(
    name="logo",
    base_classes=("transition-opacity duration-200",),
    dimensions=(
        VariantDimension(name="size", fragments={k: "" for k in LOGO_SIZES}, default="lg"),
    ),
    rules=(
        ConditionalRule("invert_on_dark", lambda c: bool(c.get("invert_on_dark")), "dark:invert"),
        ConditionalRule("loading", lambda c: bool(c.get("loading")), "opacity-50"),
        ConditionalRule("clickable", lambda c: bool(c.get("clickable")), "cursor-pointer hover:opacity-80"),
    ),
)

LOGO_LINK_CLASSES = "inline-block focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2 rounded"
LOGO_SKELETON_CLASSES = "animate-pulse bg-muted rounded"

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

HEADER_SPEC = ComponentStyleSpec(
    name="header",
    base_classes=("w-full transition-all duration-200",),
    dimensions=(
        VariantDimension(
            name="variant",
            fragments={
                "default": "bg-background/95 backdrop-blur supports-[backdrop-filter]:bg-background/60",
                "transparent": "bg-transparent",
                "blur": "bg-background/80 backdrop-blur-md",
            },
            default="default",
        ),
    ),
    rules=(
        ConditionalRule("sticky", lambda c: bool(c.get("sticky")), "sticky top-0 z-50"),
        ConditionalRule("bordered", lambda c: bool(c.get("bordered")), "border-b border-border"),
    ),
)

NAV_LINK_SPEC = ComponentStyleSpec(
    name="nav_link",
    base_classes=(
        "flex items-center space-x-1 text-sm font-medium transition-colors",
        "hover:text-foreground focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2 rounded-md px-3 py-2",
    ),
    rules=(
        ConditionalRule("active", lambda c: bool(c.get("active")), "text-foreground"),
        ConditionalRule("inactive", lambda c: not c.get("active"), "text-muted-foreground hover:text-foreground"),
    ),
)

MOBILE_MENU_ITEM_SPEC = ComponentStyleSpec(
    name="mobile_menu_item",
    base_classes=("block px-3 py-2 rounded-md text-base font-medium transition-colors",),
    rules=(
        ConditionalRule("active", lambda c: bool(c.get("active")), "text-foreground bg-muted"),
        ConditionalRule(
            "inactive",
            lambda c: not c.get("active"),
            "text-muted-foreground hover:text-foreground hover:bg-muted",
        ),
    ),
)

MENU_ICON_BAR_SPEC = ComponentStyleSpec(
    name="menu_icon_bar",
    base_classes=("w-5 h-0.5 bg-current transition-all duration-300",),
    dimensions=(
        VariantDimension(name="bar", fragments={"top": "", "middle": "", "bottom": ""}, default="top"),
    ),
    rules=(
        ConditionalRule("top_open", lambda c: c.get("bar") == "top" and c.get("open"), "rotate-45 translate-y-1"),
        ConditionalRule("middle_open", lambda c: c.get("bar") == "middle" and c.get("open"), "opacity-0"),
        ConditionalRule(
            "bottom_open", lambda c: c.get("bar") == "bottom" and c.get("open"), "-rotate-45 -translate-y-1"
        ),
        ConditionalRule("spaced", lambda c: c.get("bar") != "bottom" and not c.get("open"), "mb-1"),
    ),
)

HEADER_CONTAINER_CLASSES = "container mx-auto px-4 sm:px-6 lg:px-8"
HEADER_ROW_CLASSES = "flex items-center justify-between h-16 sm:h-20"
HEADER_NAV_CLASSES = "hidden md:flex items-center space-x-8"
HEADER_ACTIONS_CLASSES = "flex items-center space-x-4"
MOBILE_MENU_CLASSES = "px-2 pt-2 pb-3 space-y-1 border-t border-border"
MENU_ICON_CLASSES = "w-6 h-6 flex flex-col justify-center items-center"

# ---------------------------------------------------------------------------
# Footer
# ---------------------------------------------------------------------------

FOOTER_SPEC = ComponentStyleSpec(
    name="footer",
    base_classes=("w-full py-6 px-4 sm:px-6 lg:px-8 border-t border-border bg-background/50",),
)

FOOTER_CONTENT_SPEC = ComponentStyleSpec(
    name="footer_content",
    base_classes=("container mx-auto",),
    dimensions=(
        VariantDimension(
            name="variant",
            fragments={
                "simple": "flex gap-6 flex-wrap items-center justify-center",
                "detailed": "grid grid-cols-1 md:grid-cols-4 gap-8",
                "minimal": "flex items-center justify-between",
            },
            default="simple",
        ),
    ),
)

FOOTER_LINK_SPEC = ComponentStyleSpec(
    name="footer_link",
    base_classes=(
        "inline-flex items-center gap-2 text-sm transition-colors",
        "hover:text-foreground focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2 rounded-sm",
    ),
    dimensions=(
        VariantDimension(
            name="variant",
            fragments={
                "default": "text-muted-foreground hover:underline hover:underline-offset-4",
                "stacked": "text-muted-foreground hover:text-foreground",
                "minimal": "text-muted-foreground hover:text-foreground text-xs",
            },
            default="default",
        ),
    ),
)

# Footer variant -> (logo slot classes, default logo size, copyright classes)
FOOTER_SLOTS = MappingProxyType({
    "simple": ("w-full flex justify-center mb-4", "sm", "w-full text-center text-xs text-muted-foreground mt-4"),
    "detailed": (
        "md:col-span-1",
        "md",
        "md:col-span-full text-center text-xs text-muted-foreground pt-4 border-t border-border",
    ),
    "minimal": ("flex items-center space-x-4", "sm", "text-xs text-muted-foreground"),
})
# Footer variant -> style of the links it renders
FOOTER_LINK_VARIANT = MappingProxyType({"simple": "default", "detailed": "stacked", "minimal": "minimal"})
FOOTER_SECTION_CLASSES = "space-y-3"
FOOTER_SECTION_TITLE_CLASSES = "font-semibold text-sm text-foreground"
FOOTER_SECTION_LIST_CLASSES = "space-y-2"
FOOTER_LOOSE_LINKS_CLASSES = "md:col-span-full flex flex-wrap gap-6 justify-center"
EXTERNAL_MARKER_CLASSES = "w-3 h-3 opacity-50"

# ---------------------------------------------------------------------------
# Page shell
# ---------------------------------------------------------------------------

LAYOUT_PRESETS = MappingProxyType({
    "default": LayoutPreset(
        container_classes="grid grid-rows-[20px_1fr_20px] items-center justify-items-center min-h-screen p-8 pb-20 gap-16 sm:p-20",
        main_classes="flex flex-col gap-[32px] row-start-2 items-center sm:items-start",
        footer_classes="row-start-3",
    ),
    "landing": LayoutPreset(
        container_classes="min-h-screen flex flex-col",
        main_classes="flex-1 flex flex-col items-center justify-center px-4 sm:px-6 lg:px-8",
        footer_classes="mt-auto",
    ),
    "app": LayoutPreset(
        container_classes="min-h-screen grid grid-rows-[auto_1fr_auto]",
        main_classes="container mx-auto px-4 sm:px-6 lg:px-8 py-8",
        footer_classes="",
    ),
    "docs": LayoutPreset(
        container_classes="min-h-screen grid grid-rows-[auto_1fr_auto]",
        main_classes="container mx-auto px-4 sm:px-6 lg:px-8 py-8 max-w-4xl",
        footer_classes="",
    ),
    "centered": LayoutPreset(
        container_classes="min-h-screen flex flex-col items-center justify-center p-4",
        main_classes="w-full max-w-md",
        footer_classes="mt-8",
    ),
    "fullscreen": LayoutPreset(
        container_classes="min-h-screen flex flex-col",
        main_classes="flex-1",
        footer_classes="",
    ),
})

MAX_WIDTH = VariantDimension(
    name="max_width",
    fragments={
        "sm": "max-w-sm",
        "md": "max-w-md",
        "lg": "max-w-lg",
        "xl": "max-w-xl",
        "2xl": "max-w-2xl",
        "full": "max-w-full",
        "none": "",
    },
    default="none",
)

BACKGROUND = VariantDimension(
    name="background",
    fragments={
        "default": "",
        "gradient": "bg-gradient-to-br from-background via-background to-muted/20",
        "grid": "bg-grid-pattern",
        "dots": "bg-dots-pattern",
        "none": "",
    },
    default="default",
)

FONT_CLASSES = "font-[family-name:var(--font-geist-sans)]"
FULLSCREEN_PADDING_CLASSES = "p-4 sm:p-6 lg:p-8"

ALL_SPECS = (
    BUTTON_SPEC,
    ACTION_GROUP_SPEC,
    LOGO_SPEC,
    HEADER_SPEC,
    NAV_LINK_SPEC,
    MOBILE_MENU_ITEM_SPEC,
    MENU_ICON_BAR_SPEC,
    FOOTER_SPEC,
    FOOTER_CONTENT_SPEC,
    FOOTER_LINK_SPEC,
)
