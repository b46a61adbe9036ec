"""Icon descriptor: opaque pass-through data for the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from variantkit.errors import ConfigError

ICON_POSITIONS = frozenset({"left", "right"})


@dataclass(frozen=True)
class IconDescriptor:
    """An image icon placed beside a label.

    Only presence of ``address`` and ``alt_text`` (and a known position) is
    checked; the rest is handed to the renderer untouched.
    """

    address: str
    alt_text: str
    width: int | None = None
    height: int | None = None
    position: str = "left"
    class_name: str = ""

    def __post_init__(self) -> None:
        if not self.address:
            raise ConfigError("Icon declared without an address", key="address")
        if not self.alt_text:
            raise ConfigError("Icon declared without alt text", key="alt_text")
        if self.position not in ICON_POSITIONS:
            raise ConfigError(
                f"Unknown value {self.position!r} for dimension 'icon_position'",
                dimension="icon_position",
                value=self.position,
            )
