"""RAM and swap status components read from /proc/meminfo."""

import re

from .util import fmt_human, read_text

_MEMINFO = "/proc/meminfo"
_LINE_RE = re.compile(r"^([^:\s]+):\s*([+-]?\d+)", re.MULTILINE)

_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def _read_fields(meminfo, names):
    """Return the requested meminfo values in kB, or None if any is missing."""
    text = read_text(meminfo)
    if text is None:
        return None
    values = {key: int(value) for key, value in _LINE_RE.findall(text)}
    try:
        return tuple(values[name] for name in names)
    except KeyError:
        return None


def _trunc_div(num, den):
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den >= 0) else -quotient


def ram_free(meminfo=_MEMINFO):
    """Memory available for new allocations."""
    fields = _read_fields(meminfo, _RAM_FIELDS[:3])
    if fields is None:
        return None
    return fmt_human(fields[2] * 1024, 1024)


def ram_perc(meminfo=_MEMINFO):
    """Memory in use (excluding buffers and cache), in percent."""
    fields = _read_fields(meminfo, _RAM_FIELDS)
    if fields is None:
        return None
    total, free, _available, buffers, cached = fields
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(meminfo=_MEMINFO):
    """Total installed memory."""
    fields = _read_fields(meminfo, _RAM_FIELDS[:1])
    if fields is None:
        return None
    return fmt_human(fields[0] * 1024, 1024)


def ram_used(meminfo=_MEMINFO):
    """Memory in use, excluding buffers and cache."""
    fields = _read_fields(meminfo, _RAM_FIELDS)
    if fields is None:
        return None
    total, free, _available, buffers, cached = fields
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(meminfo=_MEMINFO):
    """Unused swap space."""
    fields = _read_fields(meminfo, ("SwapFree",))
    if fields is None:
        return None
    return fmt_human(fields[0] * 1024, 1024)


def swap_perc(meminfo=_MEMINFO):
    """Swap in use (excluding swap cache), in percent."""
    fields = _read_fields(meminfo, _SWAP_FIELDS)
    if fields is None:
        return None
    total, free, cached = fields
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(meminfo=_MEMINFO):
    """Total swap space."""
    fields = _read_fields(meminfo, ("SwapTotal",))
    if fields is None:
        return None
    return fmt_human(fields[0] * 1024, 1024)


def swap_used(meminfo=_MEMINFO):
    """Swap in use, excluding swap cache."""
    fields = _read_fields(meminfo, _SWAP_FIELDS)
    if fields is None:
        return None
    total, free, cached = fields
    return fmt_human((total - free - cached) * 1024, 1024)