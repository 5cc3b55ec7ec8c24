"""Master volume read from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
from array import array

from barstatus.util import warn

_IOC_READ = 2
SOUND_MIXER_VOLUME = 0


def _ior(kind: str, number: int, size: int) -> int:
    """Encode a read ioctl request number."""
    return (_IOC_READ << 30) | (size << 16) | (ord(kind) << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE, 4)


def _mixer_read(device: int) -> int:
    return _ior("M", device, 4)


def _ioctl_int(fd: int, request: int) -> int:
    value = array("i", [0])
    fcntl.ioctl(fd, request, value, True)
    return value[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror}")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror}")
            return None
        if not devmask & (1 << SOUND_MIXER_VOLUME):
            warn(f"'{card}': no volume control")
            return None
        try:
            level = _ioctl_int(fd, _mixer_read(SOUND_MIXER_VOLUME))
        except OSError as exc:
            warn(f"ioctl 'MIXER_READ({SOUND_MIXER_VOLUME})': {exc.strerror}")
            return None
    finally:
        os.close(fd)
    return str(level & 0xFF)