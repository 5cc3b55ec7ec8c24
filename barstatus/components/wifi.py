"""WiFi signal strength and ESSID through the nl80211 generic netlink family."""

from __future__ import annotations

import socket
import struct

from barstatus.icons import WIFI_DISCONNECTED_ICON, WIFI_ICONS, pick_icon
from barstatus.util import warn

NETLINK_GENERIC = 16
NLMSG_HDRLEN = 16
GENL_HDRLEN = 4
NLA_HDRLEN = 4
NLA_TYPE_MASK = 0x3FFF

NLMSG_ERROR = 2
NLMSG_DONE = 3
NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300

GENL_ID_CTRL = 0x10
CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

_FAMILY_NAME = b"nl80211\0"
_RECV_SIZE = 4096
_TIMEOUT = 2.0

_NLMSGHDR = struct.Struct("=IHHII")
_GENLMSGHDR = struct.Struct("=BBH")
_NLATTR = struct.Struct("=HH")


class _NetlinkError(Exception):
    """A netlink reply that cannot be used."""


def _align(length: int) -> int:
    return (length + 3) & ~3


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0 to 100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of the given type."""
    offset = 0
    while len(data) - offset >= NLA_HDRLEN:
        length, kind = _NLATTR.unpack_from(data, offset)
        if length < NLA_HDRLEN:
            return None
        if kind & NLA_TYPE_MASK == attr:
            return bytes(data[offset + NLA_HDRLEN : offset + length])
        offset += _align(length)
    return None


def _scan_station_messages(
    data: bytes, strength: int | None
) -> tuple[bool, int | None]:
    """Scan one received chunk of a station dump.

    Returns whether the dump is finished and the signal percentage found so far.
    """
    offset = 0
    while len(data) - offset >= NLMSG_HDRLEN:
        length, msg_type = struct.unpack_from("=IH", data, offset)
        if length < NLMSG_HDRLEN:
            raise _NetlinkError("malformed netlink message")
        end = min(offset + length, len(data))
        if strength is None and length > NLMSG_HDRLEN + GENL_HDRLEN:
            info = find_attr(
                NL80211_ATTR_STA_INFO, data[offset + NLMSG_HDRLEN + GENL_HDRLEN : end]
            )
            signal = find_attr(NL80211_STA_INFO_SIGNAL_AVG, info) if info else None
            if signal is not None and len(signal) == 1:
                strength = rssi_to_perc(struct.unpack("b", signal)[0])
        if msg_type == NLMSG_DONE:
            return True, strength
        if msg_type == NLMSG_ERROR:
            raise _NetlinkError("netlink error reply")
        offset = end
    return False, strength


class _Netlink:
    """A generic netlink socket with the cached nl80211 family id."""

    def __init__(self) -> None:
        self.sock: socket.socket | None = None
        self.seq = 1
        self.family = 0

    def _socket(self) -> socket.socket | None:
        if self.sock is None:
            family = getattr(socket, "AF_NETLINK", None)
            if family is None:
                warn("socket 'AF_NETLINK': not supported")
                return None
            try:
                self.sock = socket.socket(family, socket.SOCK_RAW, NETLINK_GENERIC)
            except OSError as exc:
                warn(f"socket 'AF_NETLINK': {exc.strerror}")
                return None
            self.sock.settimeout(_TIMEOUT)
        return self.sock

    def message(
        self, msg_type: int, flags: int, cmd: int, attr_type: int, value: bytes
    ) -> bytes:
        attr_len = NLA_HDRLEN + len(value)
        padded = value + b"\0" * (_align(attr_len) - attr_len)
        total = NLMSG_HDRLEN + GENL_HDRLEN + NLA_HDRLEN + len(padded)
        header = _NLMSGHDR.pack(total, msg_type, flags, self.seq, 0)
        self.seq += 1
        return (
            header
            + _GENLMSGHDR.pack(cmd, 1, 0)
            + _NLATTR.pack(attr_len, attr_type)
            + padded
        )

    def send(self, request: bytes) -> bool:
        sock = self._socket()
        if sock is None:
            return False
        try:
            sent = sock.send(request)
        except OSError as exc:
            warn(f"send 'AF_NETLINK': {exc}")
            return False
        if sent != len(request):
            warn("send 'AF_NETLINK': short write")
            return False
        return True

    def recv(self) -> bytes | None:
        sock = self._socket()
        if sock is None:
            return None
        try:
            return sock.recv(_RECV_SIZE)
        except OSError as exc:
            warn(f"recv 'AF_NETLINK': {exc}")
            return None

    def family_id(self) -> int:
        if self.family:
            return self.family
        request = self.message(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            CTRL_CMD_GETFAMILY,
            CTRL_ATTR_FAMILY_NAME,
            _FAMILY_NAME,
        )
        if not self.send(request):
            return 0
        reply = self.recv()
        if reply is None or len(reply) <= len(request):
            return 0
        value = find_attr(CTRL_ATTR_FAMILY_ID, reply[len(request) :])
        if value is not None and len(value) == 2:
            self.family = struct.unpack("=H", value)[0]
        return self.family


_netlink = _Netlink()


def _ifindex(interface: str) -> int | None:
    try:
        return socket.if_nametoindex(interface)
    except OSError:
        warn(f"interface {interface} not found")
        return None


def _station_percent(interface: str) -> int | None:
    """Return the signal percentage, -1 when not associated, None on failure."""
    index = _ifindex(interface)
    if index is None:
        return None
    family = _netlink.family_id()
    if not family:
        warn("nl80211 family not found")
        return None
    request = _netlink.message(
        family,
        NLM_F_REQUEST | NLM_F_DUMP,
        NL80211_CMD_GET_STATION,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _netlink.send(request):
        return None
    strength: int | None = None
    while True:
        data = _netlink.recv()
        if data is None or len(data) < NLMSG_HDRLEN:
            return None
        try:
            done, strength = _scan_station_messages(data, strength)
        except _NetlinkError:
            return None
        if done:
            return -1 if strength is None else strength


def wifi_perc(interface: str) -> str | None:
    """Return the averaged signal strength in percent, -1 when not associated."""
    perc = _station_percent(interface)
    return None if perc is None else str(perc)


def wifi_perc_di(interface: str) -> str:
    """Return an icon for the signal strength, or the disconnected icon."""
    perc = _station_percent(interface)
    if perc is None or perc < 0:
        return WIFI_DISCONNECTED_ICON.render()
    return pick_icon(WIFI_ICONS, perc)


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the interface is connected to."""
    index = _ifindex(interface)
    if index is None:
        return None
    family = _netlink.family_id()
    if not family:
        warn("nl80211 family not found")
        return None
    request = _netlink.message(
        family,
        NLM_F_REQUEST,
        NL80211_CMD_GET_INTERFACE,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _netlink.send(request):
        return None
    reply = _netlink.recv()
    if reply is None or len(reply) <= NLMSG_HDRLEN + GENL_HDRLEN:
        return None
    ssid = find_attr(NL80211_ATTR_SSID, reply[NLMSG_HDRLEN + GENL_HDRLEN :])
    if ssid is None:
        return None
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")