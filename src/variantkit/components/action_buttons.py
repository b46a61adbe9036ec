"""Action-button groups: a flex container of buttons with responsive rules."""

from __future__ import annotations

from dataclasses import dataclass

from variantkit.components.button import ButtonConfig, resolve_button
from variantkit.compose.composer import StyleResolver, resolve_style
from variantkit.model.element import RenderPlan
from variantkit.registry.tables import ACTION_GROUP_SPEC

__all__ = ["ActionButtonsConfig", "ActionButtonsPlan", "resolve_action_buttons"]


@dataclass(frozen=True)
class ActionButtonsConfig:
    buttons: tuple[ButtonConfig, ...] = ()
    direction: str | None = None
    align: str | None = None
    gap: str | None = None
    width: str | None = None
    mobile_behavior: str | None = None
    tablet_behavior: str | None = None
    class_name: str = ""


@dataclass(frozen=True)
class ActionButtonsPlan:
    class_string: str
    buttons: tuple[RenderPlan, ...]


def resolve_action_buttons(
    config: ActionButtonsConfig, styles: StyleResolver = resolve_style
) -> ActionButtonsPlan:
    """Resolve the container classes and every member button."""
    style = styles(
        ACTION_GROUP_SPEC,
        {
            "direction": config.direction,
            "align": config.align,
            "gap": config.gap,
            "width": config.width,
            "mobile_behavior": config.mobile_behavior,
            "tablet_behavior": config.tablet_behavior,
        },
        config.class_name,
    )
    return ActionButtonsPlan(
        class_string=style.class_string,
        buttons=tuple(resolve_button(b, styles) for b in config.buttons),
    )
