"""Command line entry point: render the status line periodically."""

import os
import re
import signal
import sys
import threading
import time

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, default_args
from .util import warn

_CONV_RE = re.compile(
    r"%(?P<flags>[-0 +#]*)(?P<width>\d*)(?:\.(?P<prec>\d*))?(?P<conv>[s%])|%"
)


class UsageError(Exception):
    """The command line could not be understood."""


def parse_args(argv):
    """Parse options; return True when ``-s`` (write to stdout) is given."""
    args = list(argv)
    single = False
    index = 0
    while index < len(args) and args[index].startswith("-") and len(args[index]) > 1:
        arg = args[index]
        index += 1
        if arg == "--":
            break
        for ch in arg[1:]:
            if ch == "s":
                single = True
            else:
                raise UsageError(f"unknown option -{ch}")
    if index < len(args):
        raise UsageError(f"unexpected argument {args[index]!r}")
    return single


def _printf(fmt, value):
    """Expand a printf-style format holding one ``%s`` conversion."""
    used = False

    def replace(found):
        nonlocal used
        conv = found.group("conv")
        if conv is None:
            raise ValueError(f"unsupported conversion in format {fmt!r}")
        if conv == "%":
            return "%"
        if used:
            raise ValueError(f"format {fmt!r} has more than one conversion")
        used = True
        text = value
        prec = found.group("prec")
        if prec is not None:
            text = text[: int(prec or 0)]
        pad = max(0, int(found.group("width") or 0) - len(text.encode()))
        if "-" in found.group("flags"):
            return text + " " * pad
        return " " * pad + text

    return _CONV_RE.sub(replace, fmt)


def render_status(args, unknown_str=UNKNOWN_STR, maxlen=MAXLEN):
    """Build the status line from ``args``, stopping when ``maxlen`` bytes are reached."""
    parts = []
    used = 0
    for arg in args:
        res = arg.value()
        if res is None:
            res = unknown_str
        try:
            piece = _printf(arg.fmt, res).encode()
        except ValueError as exc:
            warn(f"vsnprintf: {exc}")
            break
        room = maxlen - used
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            parts.append(piece[: max(room - 1, 0)])
            break
        parts.append(piece)
        used += len(piece)
    return b"".join(parts).decode("utf-8", errors="ignore")


def _print_status(status):
    sys.stdout.write(status + "\n")
    sys.stdout.flush()


def run(args, interval=INTERVAL, sink=None, should_stop=None):
    """Render the status every ``interval`` ms and hand it to ``sink`` until stopped."""
    sink = sink or _print_status
    if should_stop is None:
        def should_stop():
            return False
    period = interval / 1000
    while not should_stop():
        start = time.monotonic()
        sink(render_status(args, UNKNOWN_STR, MAXLEN))
        if not should_stop():
            wait = period - (time.monotonic() - start)
            if wait >= 0:
                time.sleep(wait)


def _prog():
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "slstatus"


def main(argv=None):
    """Run the status monitor; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        single = parse_args(argv)
    except UsageError:
        warn(f"usage: {_prog()} [-s]")
        return 1
    if not single:
        warn("XOpenDisplay: Failed to open display; only -s (stdout) output is supported")
        return 1

    done = threading.Event()

    def terminate(signo, frame):
        done.set()

    previous = {sig: signal.signal(sig, terminate) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        run(default_args(), INTERVAL, None, done.is_set)
    except OSError as exc:
        warn(f"puts: {exc.strerror or exc}")
        return 1
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    return 0