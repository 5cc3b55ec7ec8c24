"""Simple system facts: files, time, host, users, load and shell commands."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time

from barstatus.util import read_int, warn

BUFFER_SIZE = 1024
ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_LINE_LIMIT = BUFFER_SIZE - 2


def _first_line(text: str) -> str | None:
    newline = text.rfind("\n")
    if newline >= 0:
        text = text[:newline]
    return text or None


def cat(path: str) -> str | None:
    """Return the first line of a file, or None if it is unreadable or empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    return _first_line(line)


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused=None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror}")
        return None


def kernel_release(unused=None) -> str | None:
    """Return the kernel release, as ``uname -r`` shows it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror}")
        return None


def load_avg(unused=None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime(unused=None) -> str | None:
    """Return the system uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused=None) -> str:
    """Return the real group ID of the process."""
    return str(os.getgid())


def uid(unused=None) -> str:
    """Return the effective user ID of the process."""
    return str(os.geteuid())


def username(unused=None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def entropy(unused=None) -> str | None:
    """Return the available kernel entropy, or infinity on the BSDs."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    value = read_int(ENTROPY_AVAIL)
    return None if value is None else str(value)


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror}")
        return None
    with proc:
        assert proc.stdout is not None
        raw = proc.stdout.readline(_LINE_LIMIT)
        proc.stdout.close()
        proc.wait()
    return _first_line(raw.decode("utf-8", errors="replace"))