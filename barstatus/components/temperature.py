"""Temperature read from a Linux thermal sensor file."""

from __future__ import annotations

from barstatus.icons import TEMP_ICONS, pick_icon
from barstatus.util import read_int


def _celsius(file: str) -> int | None:
    """Read a sensor file in millidegrees and return whole degrees."""
    value = read_int(file)
    if value is None:
        return None
    return value // 1000 if value >= 0 else -(-value // 1000)


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius."""
    degrees = _celsius(file)
    return None if degrees is None else str(degrees)


def temp_di(file: str) -> str | None:
    """Return an icon for the temperature."""
    degrees = _celsius(file)
    return None if degrees is None else pick_icon(TEMP_ICONS, degrees)