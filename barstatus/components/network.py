"""Interface addresses, link state and transfer speeds."""

from __future__ import annotations

import os
import socket

import psutil

from barstatus.util import fmt_human, read_int

NET_CLASS_DIR = "/sys/class/net"
INTERVAL_MS = 500


def _address(interface: str, family: int) -> str | None:
    for entry in psutil.net_if_addrs().get(interface, ()):
        if entry.family == family:
            return entry.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the IPv4 address of an interface."""
    return _address(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the IPv6 address of an interface."""
    return _address(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """Return 'up' or 'down' for an interface that has an address."""
    if not psutil.net_if_addrs().get(interface):
        return None
    stats = psutil.net_if_stats().get(interface)
    if stats is None:
        return None
    return "up" if stats.isup else "down"


class _ByteCounter:
    """Byte count of the previous sample, for one direction of traffic."""

    def __init__(self, statistic: str) -> None:
        self.statistic = statistic
        self.count = 0

    def speed(self, interface: str) -> str | None:
        previous = self.count
        path = os.path.join(NET_CLASS_DIR, interface, "statistics", self.statistic)
        value = read_int(path)
        if value is None:
            return None
        self.count = value
        if previous == 0:
            return None
        return fmt_human((value - previous) * 1000 // INTERVAL_MS, 1024)


_rx = _ByteCounter("rx_bytes")
_tx = _ByteCounter("tx_bytes")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive speed per second since the previous sample."""
    return _rx.speed(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit speed per second since the previous sample."""
    return _tx.speed(interface)