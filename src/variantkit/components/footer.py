"""Footer resolution for the simple, detailed and minimal variants."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from variantkit.components.logo import LogoConfig, LogoPlan, resolve_logo
from variantkit.components.navlink import LinkPlan, resolve_text_link
from variantkit.compose.composer import StyleResolver, compose, resolve_style
from variantkit.registry import tables
from variantkit.registry.variants import registry_for

__all__ = [
    "FooterConfig",
    "FooterLink",
    "FooterPlan",
    "FooterSection",
    "SectionPlan",
    "resolve_footer",
]


@dataclass(frozen=True)
class FooterLink:
    label: str
    href: str
    icon: Any = None
    external: bool | None = None
    aria_hidden: bool = False


@dataclass(frozen=True)
class FooterSection:
    links: tuple[FooterLink, ...] = ()
    title: str | None = None


@dataclass(frozen=True)
class FooterConfig:
    links: tuple[FooterLink, ...] = ()
    sections: tuple[FooterSection, ...] = ()
    show_logo: bool = False
    logo: LogoConfig | None = None
    copyright: str | None = None
    variant: str | None = None
    class_name: str = ""
    grid_position: str = "row-start-3"


@dataclass(frozen=True)
class SectionPlan:
    class_string: str
    title: str | None
    title_classes: str | None
    list_classes: str
    links: tuple[LinkPlan, ...]


@dataclass(frozen=True)
class FooterPlan:
    class_string: str
    content_classes: str
    variant: str
    logo_slot_classes: str | None
    logo: LogoPlan | None
    links: tuple[LinkPlan, ...]
    links_classes: str | None = None
    sections: tuple[SectionPlan, ...] = ()
    copyright: str | None = None
    copyright_classes: str | None = None


def _link(link: FooterLink, variant: str, styles: StyleResolver) -> LinkPlan:
    extra = {"aria-hidden": "true"} if link.aria_hidden else None
    return resolve_text_link(
        tables.FOOTER_LINK_SPEC,
        link.label,
        link.href,
        external=link.external,
        style_config={"variant": variant},
        icon=link.icon,
        extra_attributes=extra,
        styles=styles,
    )


def resolve_footer(config: FooterConfig, styles: StyleResolver = resolve_style) -> FooterPlan:
    variant = registry_for(tables.FOOTER_CONTENT_SPEC).check("variant", config.variant)
    logo_slot, logo_size, copyright_classes = tables.FOOTER_SLOTS[variant]
    link_variant = tables.FOOTER_LINK_VARIANT[variant]

    # grid_position is free-form and goes ahead of the fixed chrome.
    class_string = compose(
        (config.grid_position, *tables.FOOTER_SPEC.base_classes),
        override_classes=config.class_name,
    )
    content = styles(tables.FOOTER_CONTENT_SPEC, {"variant": variant}, None)

    logo = None
    if config.show_logo:
        base = config.logo or LogoConfig()
        logo = resolve_logo(
            replace(
                base,
                size=base.size or logo_size,
                link_to_home=True,
                class_name=compose("mb-4", override_classes=base.class_name)
                if variant == "detailed"
                else base.class_name,
            ),
            styles,
        )

    sections: tuple[SectionPlan, ...] = ()
    links: tuple[LinkPlan, ...] = ()
    links_classes = None
    if variant == "detailed":
        sections = tuple(
            SectionPlan(
                class_string=tables.FOOTER_SECTION_CLASSES,
                title=section.title,
                title_classes=tables.FOOTER_SECTION_TITLE_CLASSES if section.title else None,
                list_classes=tables.FOOTER_SECTION_LIST_CLASSES,
                links=tuple(_link(link, link_variant, styles) for link in section.links),
            )
            for section in config.sections
        )
        # Loose links are only shown when there are no sections.
        if not config.sections and config.links:
            links = tuple(_link(link, "default", styles) for link in config.links)
            links_classes = tables.FOOTER_LOOSE_LINKS_CLASSES
    else:
        links = tuple(_link(link, link_variant, styles) for link in config.links)
        if variant == "minimal":
            links_classes = tables.FOOTER_SLOTS["minimal"][0]

    return FooterPlan(
        class_string=class_string,
        content_classes=content.class_string,
        variant=variant,
        logo_slot_classes=logo_slot if logo is not None or variant == "minimal" else None,
        logo=logo,
        links=links,
        links_classes=links_classes,
        sections=sections,
        copyright=config.copyright,
        copyright_classes=copyright_classes if config.copyright else None,
    )
