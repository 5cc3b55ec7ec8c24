"""Dynamic icons chosen by level, with the default icon tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class DynamicIcon:
    """An icon shown for values up to ``level``, wrapped in optional colour codes."""

    level: int
    icon: str
    begin: str = ""
    end: str = ""

    def render(self) -> str:
        """Return the icon wrapped in its colour codes."""
        return f"{self.begin}{self.icon}{self.end}"


def pick_icon(icons: Sequence[DynamicIcon], value: int) -> str:
    """Render the first icon whose level is at least ``value``.

    When no level is high enough the first icon is returned bare.
    """
    if not icons:
        raise ValueError("pick_icon: no icons given")
    for icon in icons:
        if value <= icon.level:
            return icon.render()
    return icons[0].icon


_END = "^d^"

BATTERY_ICONS = (
    DynamicIcon(10, "󰁺", "^c#ff0000^", _END),
    DynamicIcon(20, "󰁻", "^c#ff3900^", _END),
    DynamicIcon(30, "󰁼", "^c#ff7100^", _END),
    DynamicIcon(40, "󰁽", "^c#ffaa00^", _END),
    DynamicIcon(50, "󰁾", "^c#ffe300^", _END),
    DynamicIcon(60, "󰁿", "^c#e3ff00^", _END),
    DynamicIcon(70, "󰂀", "^c#aaff00^", _END),
    DynamicIcon(80, "󰂁", "^c#71ff00^", _END),
    DynamicIcon(90, "󰂂", "^c#39ff00^", _END),
    DynamicIcon(100, "󰁹", "^c#00ff00^", _END),
)

CHARGING_BATTERY_ICONS = (
    DynamicIcon(10, "󰢜", "^c#ff0000^", _END),
    DynamicIcon(20, "󰂆", "^c#ff3900^", _END),
    DynamicIcon(30, "󰂇", "^c#ff7100^", _END),
    DynamicIcon(40, "󰂈", "^c#ffaa00^", _END),
    DynamicIcon(50, "󰢝", "^c#ffe300^", _END),
    DynamicIcon(60, "󰂉", "^c#e3ff00^", _END),
    DynamicIcon(70, "󰢞", "^c#aaff00^", _END),
    DynamicIcon(80, "󰂊", "^c#71ff00^", _END),
    DynamicIcon(90, "󰂋", "^c#39ff00^", _END),
    DynamicIcon(100, "󰂅", "^c#00ff00^", _END),
)

_GREEN_TO_RED = (
    "^c#00ff00^",
    "^c#39ff00^",
    "^c#71ff00^",
    "^c#aaff00^",
    "^c#e3ff00^",
    "^c#ffe300^",
    "^c#ffaa00^",
    "^c#ff7100^",
    "^c#ff3900^",
    "^c#ff0000^",
)

CPU_ICONS = tuple(
    DynamicIcon(10 * (step + 1), "󰻠", colour, _END)
    for step, colour in enumerate(_GREEN_TO_RED)
)

RAM_ICONS = tuple(
    DynamicIcon(10 * (step + 1), "󰘚", colour, _END)
    for step, colour in enumerate(_GREEN_TO_RED)
)

TEMP_ICONS = (
    DynamicIcon(50, "󱤋", "^c#00ff00^", _END),
    DynamicIcon(65, "󱤋", "^c#aaff00^", _END),
    DynamicIcon(80, "󱤋", "^c#ffaa00^", _END),
    DynamicIcon(90, "󱤋", "^c#ff0000^", _END),
)

WIFI_ICONS = (
    DynamicIcon(25, "󰤟", "^c#ff0000^", _END),
    DynamicIcon(40, "󰤢", "^c#ffaa00^", _END),
    DynamicIcon(70, "󰤥", "^c#aaff00^", _END),
    DynamicIcon(100, "󰤨", "^c#00ff00^", _END),
)

WIFI_DISCONNECTED_ICON = DynamicIcon(-1, "󰤮", "^c#ff0000^", _END)