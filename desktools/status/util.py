"""Shared helpers for status components: warnings, number formatting, file reads."""

import os
import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _program_name():
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return None


def warn(message):
    """Write a warning line to stderr, prefixed with the program name."""
    prog = _program_name()
    if prog and not message.startswith("usage"):
        message = f"{prog}: {message}"
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def fmt_human(num, base):
    """Format ``num`` with one decimal and an SI (1000) or IEC (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path):
    """Return the contents of ``path``, or None (with a warning) if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def read_int(path):
    """Return the leading integer in the file at ``path``, or None."""
    text = read_text(path)
    if text is None:
        return None
    found = _INT_RE.match(text)
    if not found:
        return None
    return int(found.group(1))