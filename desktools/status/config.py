"""Status bar configuration: the component table and the default argument list."""

from dataclasses import dataclass
from typing import Callable, Optional

from . import memory, network, power, system, volume

INTERVAL = 1000
"""Interval between updates, in milliseconds."""

UNKNOWN_STR = "n/a"
"""Text shown when a component yields no value."""

MAXLEN = 2048
"""Maximum length of the status line, in bytes."""

_COMPONENTS = {
    "battery_perc": power.battery_perc,
    "battery_state": power.battery_state,
    "battery_remaining": power.battery_remaining,
    "cpu_freq": power.cpu_freq,
    "cpu_perc": power.cpu_perc,
    "datetime": system.datetime,
    "disk_free": system.disk_free,
    "disk_perc": system.disk_perc,
    "disk_total": system.disk_total,
    "disk_used": system.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": system.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": system.run_command,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": power.temp,
    "uid": system.uid,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_perc": network.wifi_perc,
    "wifi_essid": network.wifi_essid,
}


@dataclass(frozen=True)
class StatusArg:
    """One entry of the status line: a component, its format and its argument."""

    func: Callable
    fmt: str
    args: Optional[str] = None

    def value(self):
        """Call the component, passing the argument when there is one."""
        if self.args is None:
            return self.func()
        return self.func(self.args)


def component(name):
    """Return the component function called ``name``."""
    try:
        return _COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component {name!r}") from None


def default_args():
    """The default status line: the local date and time."""
    return [StatusArg(system.datetime, "%s", "%F %T")]