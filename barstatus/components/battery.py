"""Battery charge, state and remaining time from the Linux power-supply class."""

from __future__ import annotations

import os
import re

from barstatus.icons import BATTERY_ICONS, CHARGING_BATTERY_ICONS, pick_icon
from barstatus.util import read_int, read_line

POWER_SUPPLY_DIR = "/sys/class/power_supply"

_STATE = re.compile(r"[a-zA-Z ]{1,12}")

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}


def _supply_path(supply: str, attribute: str) -> str:
    return os.path.join(POWER_SUPPLY_DIR, supply, attribute)


def _pick(bat: str, first: str, second: str) -> str | None:
    """Return the path of the first readable attribute of the two."""
    for attribute in (first, second):
        path = _supply_path(bat, attribute)
        if os.access(path, os.R_OK):
            return path
    return None


def _capacity(bat: str) -> int | None:
    return read_int(_supply_path(bat, "capacity"))


def _status(bat: str) -> str | None:
    line = read_line(_supply_path(bat, "status"))
    if line is None:
        return None
    match = _STATE.match(line)
    return match.group(0) if match else None


def battery_perc(bat: str) -> str | None:
    """Return the battery charge in percent."""
    perc = _capacity(bat)
    return None if perc is None else str(perc)


def battery_perc_di(bat: str) -> str | None:
    """Return an icon for the battery charge, a charging one while on AC power."""
    perc = _capacity(bat)
    if perc is None:
        return None
    ac_online = read_int(_supply_path("AC", "online"))
    if ac_online is None:
        return None
    icons = CHARGING_BATTERY_ICONS if ac_online else BATTERY_ICONS
    return pick_icon(icons, perc)


def battery_state(bat: str) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _status(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the time left while discharging as hours and minutes, else ''."""
    state = _status(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"