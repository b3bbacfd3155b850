"""Volume status component using the OSS mixer interface."""

import fcntl
import os
import struct

from .util import warn

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(dev):
    """The MIXER_READ(dev) ioctl request number."""
    return 0x80000000 | (4 << 16) | (ord("M") << 8) | dev


def _ioctl_int(fd, request):
    result = fcntl.ioctl(fd, request, bytes(4))
    return struct.unpack("i", result[:4])[0]


def vol_perc(card):
    """Master volume of mixer device ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, _mixer_read(_SOUND_MIXER_DEVMASK))
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None
        value = None
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _ioctl_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)
    if value is None:
        return None
    return str(value & 0xFF)