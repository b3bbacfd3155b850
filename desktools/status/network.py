"""Network status components: addresses, transfer speeds and Wi-Fi."""

import array
import fcntl
import os
import re
import socket
import struct
import sys

import psutil

from .util import fmt_human, read_int, read_text, warn

_NET_ROOT = "/sys/class/net"
_WIRELESS = "/proc/net/wireless"
_DEFAULT_INTERVAL = 1000

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def _ip(interface, family):
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc}")
        return None
    for addr in interfaces.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface):
    """First IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface):
    """First IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


class NetSpeedMeter:
    """Computes transfer speed from successive byte counters in sysfs."""

    def __init__(self, direction, interval=_DEFAULT_INTERVAL, root=_NET_ROOT):
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def read(self, interface):
        """Bytes per second since the last read; None on the first read."""
        path = os.path.join(self.root, interface, "statistics", f"{self.direction}_bytes")
        previous = self._bytes
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % (1 << 64)
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx_meter = NetSpeedMeter("rx")
_tx_meter = NetSpeedMeter("tx")


def netspeed_rx(interface):
    """Receive speed of ``interface``."""
    return _rx_meter.read(interface)


def netspeed_tx(interface):
    """Transmit speed of ``interface``."""
    return _tx_meter.read(interface)


def rssi_to_perc(rssi):
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(interface, root=_NET_ROOT, wireless_path=_WIRELESS):
    """Link quality of ``interface`` in percent of the maximum of 70."""
    operstate = read_text(os.path.join(root, interface, "operstate"))
    if operstate is None or operstate[:4] != "up\n":
        return None
    text = read_text(wireless_path)
    if text is None:
        return None
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    found = _QUALITY_RE.match(line[start + len(interface) + 2:])
    if not found:
        return None
    return str(int(int(found.group(1)) / 70 * 100))


def wifi_essid(interface):
    """ESSID the wireless ``interface`` is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None
    if not sys.platform.startswith("linux"):
        return None
    essid = array.array("b", bytes(_IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = struct.pack(f"{_IFNAMSIZ}sPHH", name, address, _IW_ESSID_MAX_SIZE + 1, 0)
    request = request.ljust(_IWREQ_SIZE, b"\0")
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None
    raw = essid.tobytes().split(b"\0", 1)[0]
    if not raw:
        return None
    return raw.decode("utf-8", errors="replace")