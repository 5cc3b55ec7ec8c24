"""Memory and swap usage from the Linux meminfo file."""

from __future__ import annotations

import re

from barstatus.icons import RAM_ICONS, pick_icon
from barstatus.util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_RAM_LAYOUT = re.compile(
    r"\s*MemTotal:\s*(\d+)\s*kB"
    r"\s*MemFree:\s*(\d+)\s*kB"
    r"\s*MemAvailable:\s*(\d+)\s*kB"
    r"\s*Buffers:\s*(\d+)\s*kB"
    r"\s*Cached:\s*(\d+)"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _read_meminfo() -> str | None:
    try:
        with open(MEMINFO, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{MEMINFO}': {exc.strerror}")
        return None


def _ram_info() -> tuple[int, int, int, int] | None:
    """Return total, free and used memory in kB and the used share in percent."""
    text = _read_meminfo()
    if text is None:
        return None
    match = _RAM_LAYOUT.match(text)
    if match is None:
        return None
    total, free, _available, buffers, cached = (int(v) for v in match.groups())
    if total == 0:
        return None
    used = total - free - buffers - cached
    return total, free, used, _cdiv(100 * used, total)


def ram_free(unused=None) -> str | None:
    """Return the free memory."""
    info = _ram_info()
    return None if info is None else fmt_human(info[1] * 1024, 1024)


def ram_perc(unused=None) -> str | None:
    """Return the memory usage in percent."""
    info = _ram_info()
    return None if info is None else str(info[3])


def ram_perc_di(unused=None) -> str | None:
    """Return an icon for the memory usage."""
    info = _ram_info()
    return None if info is None else pick_icon(RAM_ICONS, info[3])


def ram_total(unused=None) -> str | None:
    """Return the total memory."""
    info = _ram_info()
    return None if info is None else fmt_human(info[0] * 1024, 1024)


def ram_used(unused=None) -> str | None:
    """Return the memory in use, without buffers and cache."""
    info = _ram_info()
    return None if info is None else fmt_human(info[2] * 1024, 1024)


def _swap_info(*wanted: str) -> dict[str, int] | None:
    """Return the requested swap fields of meminfo in kB."""
    text = _read_meminfo()
    if text is None:
        return None
    found: dict[str, int] = {}
    for line in text.splitlines():
        if len(found) == len(wanted):
            break
        for name in wanted:
            if name not in found and line.startswith(name):
                match = _LEADING_INT.match(line[len(name) + 1 :])
                if match:
                    found[name] = int(match.group(1))
                break
    if len(found) != len(wanted):
        return None
    return found


def swap_free(unused=None) -> str | None:
    """Return the free swap space."""
    info = _swap_info("SwapFree")
    return None if info is None else fmt_human(info["SwapFree"] * 1024, 1024)


def _swap_used_kb(info: dict[str, int]) -> int:
    return info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]


def swap_perc(unused=None) -> str | None:
    """Return the swap usage in percent."""
    info = _swap_info(*_SWAP_FIELDS)
    if info is None or info["SwapTotal"] == 0:
        return None
    return str(_cdiv(100 * _swap_used_kb(info), info["SwapTotal"]))


def swap_total(unused=None) -> str | None:
    """Return the total swap space."""
    info = _swap_info("SwapTotal")
    return None if info is None else fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused=None) -> str | None:
    """Return the swap space in use, without the swap cache."""
    info = _swap_info(*_SWAP_FIELDS)
    return None if info is None else fmt_human(_swap_used_kb(info) * 1024, 1024)