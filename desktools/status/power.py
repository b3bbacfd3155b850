"""CPU, battery and temperature status components."""

import os

from .util import fmt_human, read_int, read_text

_POWER_SUPPLY = "/sys/class/power_supply"
_CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

_BATTERY_SYMBOLS = {"Charging": "+", "Discharging": "-"}


class CpuMeter:
    """Tracks successive /proc/stat samples to compute CPU usage."""

    def __init__(self, stat_path="/proc/stat"):
        self.stat_path = stat_path
        self._last = [0.0] * 7

    def _sample(self):
        text = read_text(self.stat_path)
        if text is None:
            return None
        tokens = text.split()[1:8]
        if len(tokens) != 7:
            return None
        try:
            return [float(token) for token in tokens]
        except ValueError:
            return None

    def perc(self):
        """CPU usage since the previous call, in percent; None on the first call."""
        sample = self._sample()
        if sample is None:
            return None
        previous, self._last = self._last, sample
        if previous[0] == 0:
            return None
        total = sum(previous) - sum(sample)
        if total == 0:
            return None
        busy_indices = (0, 1, 2, 5, 6)
        busy = sum(previous[i] for i in busy_indices) - sum(sample[i] for i in busy_indices)
        return str(int(100 * busy / total))


_default_meter = CpuMeter()


def cpu_perc():
    """CPU usage in percent, using a process-wide meter."""
    return _default_meter.perc()


def cpu_freq(path=_CPU_FREQ):
    """Current CPU frequency in Hz, human formatted."""
    khz = read_int(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def _battery_file(root, bat, name):
    return os.path.join(root, bat, name)


def _read_status(bat, root):
    text = read_text(_battery_file(root, bat, "status"))
    if text is None:
        return None
    words = text.split()
    return words[0][:12] if words else None


def _pick(bat, root, first, second):
    for name in (first, second):
        path = _battery_file(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat, root=_POWER_SUPPLY):
    """Battery capacity in percent."""
    perc = read_int(_battery_file(root, bat, "capacity"))
    return None if perc is None else str(perc)


def battery_state(bat, root=_POWER_SUPPLY):
    """``+`` when charging, ``-`` when discharging, ``?`` otherwise."""
    state = _read_status(bat, root)
    if state is None:
        return None
    return _BATTERY_SYMBOLS.get(state, "?")


def battery_remaining(bat, root=_POWER_SUPPLY):
    """Remaining time while discharging as ``<h>h <m>m``; empty string otherwise."""
    state = _read_status(bat, root)
    if state is None:
        return None
    path = _pick(bat, root, "charge_now", "energy_now")
    charge_now = read_int(path) if path else None
    if charge_now is None:
        return None
    if state != "Discharging":
        return ""
    path = _pick(bat, root, "current_now", "power_now")
    current_now = read_int(path) if path else None
    if not current_now:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"


def temp(file):
    """Temperature in degrees Celsius from a millidegree sensor file."""
    millideg = read_int(file)
    if millideg is None:
        return None
    return str(int(millideg / 1000) if millideg < 0 else millideg // 1000)