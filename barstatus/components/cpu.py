"""CPU frequency and usage from the Linux proc and sys file systems."""

from __future__ import annotations

from barstatus.icons import CPU_ICONS, pick_icon
from barstatus.util import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def _read_stat() -> list[float] | None:
    """Read user, nice, system, idle, iowait, irq and softirq of the first line."""
    try:
        with open(PROC_STAT, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError as exc:
        warn(f"fopen '{PROC_STAT}': {exc.strerror}")
        return None
    values = line.split()[1 : 1 + _FIELDS]
    if len(values) != _FIELDS:
        return None
    try:
        return [float(value) for value in values]
    except ValueError:
        return None


class _CpuUsage:
    """Usage between two samples, shared by a pair of consecutive readers."""

    def __init__(self) -> None:
        self.previous = [0.0] * _FIELDS
        self.shared: int = -1
        self.calls = 0

    def percent(self) -> int | None:
        if self.shared < 0:
            before = self.previous
            current = _read_stat()
            if current is None:
                return None
            self.previous = current
            if before[0] == 0:
                return None
            total = sum(before) - sum(current)
            if total == 0:
                return None
            busy = sum(before[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
            self.shared = int(100 * busy / total)

        perc = self.shared
        self.calls += 1
        if self.calls == 2:
            self.shared = -1
            self.calls = 0
        return perc


_usage = _CpuUsage()


def cpu_freq(unused=None) -> str | None:
    """Return the current frequency of the first CPU."""
    khz = read_int(CPU_FREQ)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused=None) -> str | None:
    """Return the CPU usage in percent since the previous sample."""
    perc = _usage.percent()
    return None if perc is None else str(perc)


def cpu_perc_di(unused=None) -> str | None:
    """Return an icon for the CPU usage."""
    perc = _usage.percent()
    return None if perc is None else pick_icon(CPU_ICONS, perc)