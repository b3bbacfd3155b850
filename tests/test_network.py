import socket
from types import SimpleNamespace
from unittest import mock

import pytest

from desktools.status import network
from desktools.status.util import fmt_human


def _write_counter(root, iface, direction, value):
    stats = root / iface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


def test_netspeed_first_read_is_none(tmp_path):
    _write_counter(tmp_path, "eth0", "rx", 5000)
    meter = network.NetSpeedMeter("rx", 1000, str(tmp_path))
    assert meter.read("eth0") is None


def test_netspeed_second_read(tmp_path):
    meter = network.NetSpeedMeter("tx", 1000, str(tmp_path))
    _write_counter(tmp_path, "eth0", "tx", 5000)
    meter.read("eth0")
    _write_counter(tmp_path, "eth0", "tx", 5000 + 2048)
    assert meter.read("eth0") == "2.0 Ki"


def test_netspeed_scales_by_interval(tmp_path):
    meter = network.NetSpeedMeter("rx", 500, str(tmp_path))
    _write_counter(tmp_path, "eth0", "rx", 100)
    meter.read("eth0")
    _write_counter(tmp_path, "eth0", "rx", 1100)
    assert meter.read("eth0") == fmt_human(1000 * 1000 // 500, 1024)


def test_netspeed_missing_interface(tmp_path):
    meter = network.NetSpeedMeter("rx", 1000, str(tmp_path))
    assert meter.read("nothere") is None


def test_netspeed_bad_direction():
    with pytest.raises(ValueError):
        network.NetSpeedMeter("up", 1000, "/tmp")


def test_rssi_to_perc_limits():
    assert network.rssi_to_perc(-50) == 100
    assert network.rssi_to_perc(-30) == 100
    assert network.rssi_to_perc(-100) == 0
    assert network.rssi_to_perc(-120) == 0


def test_rssi_to_perc_monotonic():
    values = [network.rssi_to_perc(r) for r in range(-110, -40)]
    assert values == sorted(values)


WIRELESS = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
    " wlan0: 0000   54.  -56.  -256        0      0      0      0      0        0\n"
)


def _wifi_setup(tmp_path, state):
    (tmp_path / "wlan0").mkdir()
    (tmp_path / "wlan0" / "operstate").write_text(state)
    wireless = tmp_path / "wireless"
    wireless.write_text(WIRELESS)
    return str(wireless)


def test_wifi_perc(tmp_path):
    wireless = _wifi_setup(tmp_path, "up\n")
    assert network.wifi_perc("wlan0", str(tmp_path), wireless) == "77"


def test_wifi_perc_down(tmp_path):
    wireless = _wifi_setup(tmp_path, "down\n")
    assert network.wifi_perc("wlan0", str(tmp_path), wireless) is None


def test_wifi_perc_short_file(tmp_path):
    (tmp_path / "wlan0").mkdir()
    (tmp_path / "wlan0" / "operstate").write_text("up\n")
    wireless = tmp_path / "wireless"
    wireless.write_text(WIRELESS.splitlines(keepends=True)[0])
    assert network.wifi_perc("wlan0", str(tmp_path), str(wireless)) is None


def test_wifi_essid_name_too_long():
    assert network.wifi_essid("x" * 20) is None


def test_ip_addresses():
    addrs = {
        "eth0": [
            SimpleNamespace(family=socket.AF_INET6, address="2001:db8::1"),
            SimpleNamespace(family=socket.AF_INET, address="192.0.2.1"),
        ]
    }
    with mock.patch("psutil.net_if_addrs", return_value=addrs):
        assert network.ipv4("eth0") == "192.0.2.1"
        assert network.ipv6("eth0") == "2001:db8::1"
        assert network.ipv4("eth1") is None