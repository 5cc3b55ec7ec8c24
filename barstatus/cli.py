"""Command line entry point: render the status line repeatedly and publish it."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from barstatus.components.battery import battery_perc, battery_perc_di
from barstatus.components.cpu import cpu_perc, cpu_perc_di
from barstatus.components.memory import ram_perc_di, ram_used
from barstatus.components.system import datetime
from barstatus.components.temperature import temp, temp_di
from barstatus.components.wifi import wifi_essid, wifi_perc_di
from barstatus.util import warn

PROG = "barstatus"
VERSION = "1.1"

INTERVAL_MS = 500
UNKNOWN = "n/a"
MAXLEN = 2048


@dataclass(frozen=True)
class StatusItem:
    """One piece of the status line: a component, its printf format and argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    arg: str | None = None


_THERMAL_ZONE = "/sys/class/thermal/thermal_zone8/temp"

DEFAULT_ITEMS: tuple[StatusItem, ...] = (
    StatusItem(cpu_perc_di, " %s"),
    StatusItem(cpu_perc, " %2s%% |"),
    StatusItem(temp_di, " %s", _THERMAL_ZONE),
    StatusItem(temp, " %2s°C |", _THERMAL_ZONE),
    StatusItem(ram_perc_di, " %s"),
    StatusItem(ram_used, " %6s |"),
    StatusItem(wifi_perc_di, " %s", "wlan0"),
    StatusItem(wifi_essid, " %.3s |", "wlan0"),
    StatusItem(battery_perc_di, " %s", "BAT0"),
    StatusItem(battery_perc, " %2s%% |", "BAT0"),
    StatusItem(datetime, " %s |", "%A %d %B %Y | %T"),
)


def render_status(items: Iterable[StatusItem], unknown: str, maxlen: int) -> str:
    """Build the status line from the items.

    A component that yields None is shown as ``unknown``.  The line holds at
    most ``maxlen - 1`` bytes; the item that would overflow it is cut short and
    the remaining items are dropped.
    """
    parts: list[str] = []
    used = 0
    for item in items:
        value = item.func(item.arg)
        if value is None:
            value = unknown
        try:
            piece = item.fmt % value
        except (TypeError, ValueError) as exc:
            warn(f"vsnprintf: {exc}")
            break
        encoded = piece.encode("utf-8")
        if used + len(encoded) >= maxlen:
            warn("vsnprintf: Output truncated")
            room = max(maxlen - 1 - used, 0)
            parts.append(encoded[:room].decode("utf-8", errors="ignore"))
            break
        parts.append(piece)
        used += len(encoded)
    return "".join(parts)


def _die(message: str) -> None:
    warn(message)
    raise SystemExit(1)


def _usage() -> None:
    _die(f"usage: {PROG} [-v] [-s] [-1]")


@dataclass
class _Options:
    to_stdout: bool = False
    once: bool = False


def _parse_args(argv: Sequence[str]) -> _Options:
    options = _Options()
    args = list(argv)
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                _die(f"{PROG}-{VERSION}")
            elif flag == "1":
                options.once = True
                options.to_stdout = True
            elif flag == "s":
                options.to_stdout = True
            else:
                _usage()
    if args:
        _usage()
    return options


class _Wakeup(Exception):
    """Raised by a signal handler to cut the sleep between updates short."""


class _LoopState:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.sleeping = False

    def handle(self, signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        if self.sleeping:
            raise _Wakeup

    def sleep(self, seconds: float) -> None:
        self.sleeping = True
        try:
            time.sleep(seconds)
        except _Wakeup:
            pass
        finally:
            self.sleeping = False


def _set_root_name(name: str, failure: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", name], check=True)
    except (OSError, subprocess.CalledProcessError):
        _die(failure)


def _publish(status: str, to_stdout: bool) -> None:
    if to_stdout:
        try:
            print(status, flush=True)
        except OSError as exc:
            _die(f"puts: {exc.strerror}")
    else:
        _set_root_name(status, "XStoreName: Allocation failed")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status loop; ``-s`` prints to stdout, ``-1`` prints once."""
    if argv is None:
        argv = sys.argv[1:]
    options = _parse_args(argv)

    if not options.to_stdout and (
        not os.environ.get("DISPLAY") or shutil.which("xsetroot") is None
    ):
        _die("XOpenDisplay: Failed to open display")

    state = _LoopState(done=options.once)
    watched = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signo: signal.signal(signo, state.handle) for signo in watched}
    signal.siginterrupt(signal.SIGUSR1, False)
    try:
        while True:
            start = time.monotonic()
            status = render_status(DEFAULT_ITEMS, UNKNOWN, MAXLEN)
            _publish(status, options.to_stdout)
            if state.done:
                break
            wait = INTERVAL_MS / 1000 - (time.monotonic() - start)
            if wait >= 0:
                state.sleep(wait)
            if state.done:
                break
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)

    if not options.to_stdout:
        _set_root_name("", "XCloseDisplay: Failed to close display")
    return 0


if __name__ == "__main__":
    sys.exit(main())