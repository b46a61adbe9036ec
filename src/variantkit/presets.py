"""Pre-built widget configurations.

These carry their own per-button defaults (``PRESET_BUTTON_DEFAULTS``),
kept apart from the generic button table in
:data:`variantkit.registry.tables.BUTTON_DEFAULTS`. The two are allowed to
disagree: the Next.js docs button is ``fixed`` width while the generic
default is ``auto``.
"""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Sequence

from variantkit.components.action_buttons import ActionButtonsConfig
from variantkit.components.button import ButtonConfig
from variantkit.components.footer import FooterConfig, FooterLink, FooterSection
from variantkit.components.header import HeaderConfig, NavItem
from variantkit.components.logo import LogoConfig
from variantkit.components.page import PageConfig
from variantkit.model.icon import IconDescriptor
from variantkit.model.layout import LayoutOverrides

_UTM = "utm_source=create-next-app&utm_medium=appdir-template-tw&utm_campaign=create-next-app"

PRESET_BUTTON_DEFAULTS = MappingProxyType({
    "next_js.deploy": MappingProxyType({"variant": "primary", "size": "default", "width": "auto"}),
    "next_js.docs": MappingProxyType({"variant": "secondary", "size": "default", "width": "fixed"}),
    "cta.primary": MappingProxyType({"variant": "primary"}),
    "cta.secondary": MappingProxyType({"variant": "secondary"}),
    "social": MappingProxyType({"variant": "ghost", "size": "icon"}),
    "auth.login": MappingProxyType({"variant": "ghost"}),
    "auth.signup": MappingProxyType({"variant": "primary"}),
})


def _button(preset: str, **kwargs) -> ButtonConfig:
    values = dict(PRESET_BUTTON_DEFAULTS[preset])
    values.update(kwargs)
    return ButtonConfig(**values)


# ---------------------------------------------------------------------------
# Button groups
# ---------------------------------------------------------------------------


def next_js_action_buttons(class_name: str = "") -> ActionButtonsConfig:
    return ActionButtonsConfig(
        buttons=(
            _button(
                "next_js.deploy",
                label="Deploy now",
                href=f"https://vercel.com/new?{_UTM}",
                external=True,
                icon=IconDescriptor(
                    address="/vercel.svg",
                    alt_text="Vercel logomark",
                    width=20,
                    height=20,
                    class_name="dark:invert",
                ),
            ),
            _button(
                "next_js.docs",
                label="Read our docs",
                href=f"https://nextjs.org/docs?{_UTM}",
                external=True,
            ),
        ),
        direction="horizontal",
        align="center",
        gap="md",
        mobile_behavior="stack",
        class_name=class_name,
    )


def cta_buttons(
    primary_label: str = "Get Started",
    primary_href: str = "/signup",
    secondary_label: str = "Learn More",
    secondary_href: str = "/docs",
    class_name: str = "",
) -> ActionButtonsConfig:
    return ActionButtonsConfig(
        buttons=(
            _button("cta.primary", label=primary_label, href=primary_href),
            _button("cta.secondary", label=secondary_label, href=secondary_href),
        ),
        direction="horizontal",
        align="center",
        gap="md",
        mobile_behavior="stack",
        class_name=class_name,
    )


def social_buttons(
    platforms: Iterable[tuple[str, str, str]], class_name: str = ""
) -> ActionButtonsConfig:
    """*platforms* is an iterable of ``(platform, href, icon_address)``."""
    return ActionButtonsConfig(
        buttons=tuple(
            _button(
                "social",
                label=f"Follow on {platform}",
                href=href,
                external=True,
                icon=IconDescriptor(address=icon, alt_text=f"{platform} icon", width=20, height=20),
            )
            for platform, href, icon in platforms
        ),
        direction="horizontal",
        align="center",
        gap="sm",
        class_name=class_name,
    )


def auth_buttons(
    show_login: bool = True,
    show_signup: bool = True,
    login_href: str = "/login",
    signup_href: str = "/signup",
    class_name: str = "",
) -> ActionButtonsConfig:
    buttons = []
    if show_login:
        buttons.append(_button("auth.login", label="Log in", href=login_href))
    if show_signup:
        buttons.append(_button("auth.signup", label="Sign up", href=signup_href))
    return ActionButtonsConfig(
        buttons=tuple(buttons),
        direction="horizontal",
        align="center",
        gap="sm",
        class_name=class_name,
    )


def loading_buttons(
    buttons: Sequence[ButtonConfig], loading_states: Sequence[bool], class_name: str = ""
) -> ActionButtonsConfig:
    """Mark buttons as loading by position; missing states mean not loading."""
    return ActionButtonsConfig(
        buttons=tuple(
            replace(b, loading=bool(loading_states[i]) if i < len(loading_states) else False)
            for i, b in enumerate(buttons)
        ),
        class_name=class_name,
    )


# ---------------------------------------------------------------------------
# Logos
# ---------------------------------------------------------------------------


def next_logo(**kwargs) -> LogoConfig:
    return LogoConfig(address="/next.svg", alt_text="Next.js logo", **kwargs)


def vercel_logo(**kwargs) -> LogoConfig:
    values = {"size": "sm", "width": 20, "height": 20}
    values.update(kwargs)
    return LogoConfig(address="/vercel.svg", alt_text="Vercel logomark", **values)


def brand_logo(**kwargs) -> LogoConfig:
    class_name = kwargs.pop("class_name", "")
    values = {"link_to_home": True, "priority": True}
    values.update(kwargs)
    return LogoConfig(class_name=" ".join(p for p in ("select-none", class_name) if p), **values)


# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------


def simple_header(
    logo_address: str | None = None, logo_alt: str | None = None, class_name: str = ""
) -> HeaderConfig:
    logo = LogoConfig()
    if logo_address:
        logo = LogoConfig(address=logo_address, alt_text=logo_alt or logo.alt_text)
    elif logo_alt:
        logo = LogoConfig(alt_text=logo_alt)
    return HeaderConfig(logo=logo, class_name=class_name)


def navigation_header(
    navigation: Sequence[NavItem],
    actions: Sequence[ButtonConfig] = (),
    sticky: bool = True,
    class_name: str = "",
) -> HeaderConfig:
    return HeaderConfig(
        navigation=tuple(navigation),
        actions=tuple(actions),
        sticky=sticky,
        bordered=True,
        show_mobile_menu=True,
        class_name=class_name,
    )


def landing_header(cta: ButtonConfig | None = None, class_name: str = "") -> HeaderConfig:
    return HeaderConfig(
        variant="transparent",
        actions=(cta,) if cta is not None else (),
        class_name=class_name,
    )


# ---------------------------------------------------------------------------
# Footers
# ---------------------------------------------------------------------------


def next_js_footer(class_name: str = "") -> FooterConfig:
    def icon(name: str, alt: str) -> IconDescriptor:
        return IconDescriptor(address=f"/{name}.svg", alt_text=alt, width=16, height=16)

    return FooterConfig(
        links=(
            FooterLink(
                label="Learn",
                href=f"https://nextjs.org/learn?{_UTM}",
                external=True,
                icon=icon("file", "File icon"),
            ),
            FooterLink(
                label="Examples",
                href=f"https://vercel.com/templates?framework=next.js&{_UTM}",
                external=True,
                icon=icon("window", "Window icon"),
            ),
            FooterLink(
                label="Go to nextjs.org →",
                href=f"https://nextjs.org?{_UTM}",
                external=True,
                icon=icon("globe", "Globe icon"),
            ),
        ),
        variant="simple",
        class_name=class_name,
    )


def company_footer(
    sections: Sequence[FooterSection] = (), copyright: str | None = None, class_name: str = ""
) -> FooterConfig:
    return FooterConfig(
        sections=tuple(sections),
        show_logo=True,
        copyright=copyright,
        variant="detailed",
        class_name=class_name,
    )


def minimal_footer(
    links: Sequence[FooterLink] = (), copyright: str | None = None, class_name: str = ""
) -> FooterConfig:
    return FooterConfig(
        links=tuple(links), copyright=copyright, variant="minimal", class_name=class_name
    )


# ---------------------------------------------------------------------------
# Page layouts
# ---------------------------------------------------------------------------


def default_layout(class_name: str = "") -> PageConfig:
    return PageConfig(variant="default", overrides=LayoutOverrides(class_name=class_name))


def landing_layout(
    show_header: bool = True, header: HeaderConfig | None = None, class_name: str = ""
) -> PageConfig:
    return PageConfig(
        variant="landing",
        overrides=LayoutOverrides(
            show_header=show_header, show_footer=True, background="gradient", class_name=class_name
        ),
        header=header,
    )


def app_layout(
    header: HeaderConfig | None = None, footer: FooterConfig | None = None, class_name: str = ""
) -> PageConfig:
    return PageConfig(
        variant="app",
        overrides=LayoutOverrides(show_header=True, show_footer=True, class_name=class_name),
        header=header,
        footer=footer,
    )


def docs_layout(header: HeaderConfig | None = None, class_name: str = "") -> PageConfig:
    return PageConfig(
        variant="docs",
        overrides=LayoutOverrides(
            show_header=True, show_footer=True, max_width="2xl", class_name=class_name
        ),
        header=header,
    )


def centered_layout(max_width: str = "md", show_footer: bool = False, class_name: str = "") -> PageConfig:
    return PageConfig(
        variant="centered",
        overrides=LayoutOverrides(max_width=max_width, show_footer=show_footer, class_name=class_name),
    )


def fullscreen_layout(
    show_header: bool = False, show_footer: bool = False, class_name: str = ""
) -> PageConfig:
    return PageConfig(
        variant="fullscreen",
        overrides=LayoutOverrides(
            show_header=show_header, show_footer=show_footer, background="none", class_name=class_name
        ),
    )


def auth_layout() -> PageConfig:
    return centered_layout(max_width="sm")


def error_layout() -> PageConfig:
    return centered_layout()


LAYOUT_SHORTCUTS = MappingProxyType({
    "default": default_layout,
    "landing": landing_layout,
    "app": app_layout,
    "docs": docs_layout,
    "centered": centered_layout,
    "fullscreen": fullscreen_layout,
    "auth": auth_layout,
    "error": error_layout,
})
