"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def warn(message: str) -> None:
    """Write a diagnostic line to standard error."""
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and format it with one decimal and a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f}{prefixes[index]}"


def read_int(path: str) -> int | None:
    """Read the leading integer of a file, or None if it is missing or unparsable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def read_line(path: str) -> str | None:
    """Return the first line of a file without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    return line.rstrip("\n")