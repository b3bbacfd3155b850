"""General system status components: time, disks, host, users, commands."""

import os
import pwd
import socket
import subprocess
import time

from .util import fmt_human, read_int, warn

_BUFSIZE = 1024


def datetime(fmt):
    """Current local time formatted with ``fmt``; None if the result is empty or too long."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path):
    try:
        return os.statvfs(path)
    except OSError as exc:
        warn(f"statvfs '{path}': {exc.strerror or exc}")
        return None


def disk_free(path):
    """Space available to unprivileged users on the filesystem of ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path):
    """Percentage of the filesystem of ``path`` in use."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path):
    """Total size of the filesystem of ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path):
    """Used space on the filesystem of ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(path="/proc/sys/kernel/random/entropy_avail"):
    """Available kernel entropy."""
    num = read_int(path)
    return None if num is None else str(num)


def hostname():
    """Host name of this machine."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror or exc}")
        return None


def kernel_release():
    """Kernel release, as ``uname -r`` shows it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg():
    """The 1, 5 and 15 minute load averages."""
    try:
        avgs = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return "{:.2f} {:.2f} {:.2f}".format(*avgs)


def num_files(path):
    """Number of entries in directory ``path``."""
    try:
        with os.scandir(path) as entries:
            return str(sum(1 for _ in entries))
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None


def run_command(cmd):
    """First line of output of shell command ``cmd``, or None if it is empty."""
    try:
        proc = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    out = proc.stdout
    end = out.find(b"\n")
    line = out[: end + 1] if end >= 0 else out
    line = line[: _BUFSIZE - 2]
    newline = line.rfind(b"\n")
    if newline >= 0:
        line = line[:newline]
    text = line.decode("utf-8", errors="replace")
    return text or None


def _uptime_clock():
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return None


def uptime():
    """System uptime as ``<hours>h <minutes>m``."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock)) if clock is not None else int(time.monotonic())
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def gid():
    """Real group id of the current process."""
    return str(os.getgid())


def uid():
    """Effective user id of the current process."""
    return str(os.geteuid())


def username():
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None