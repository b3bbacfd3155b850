"""Filter a list of files by properties, like test(1) applied to many paths."""

import os
import stat
import sys
from dataclasses import dataclass
from typing import Optional

_FLAGS = "abcdefghlpqrsuvwx"
_PATH_MAX = 4096


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass
class TestOptions:
    """Which file properties to test for."""

    __test__ = False

    flags: frozenset = frozenset()
    newer_than: Optional[int] = None
    older_than: Optional[int] = None


def _mtime_seconds(st):
    return st.st_mtime_ns // 1_000_000_000


def _reference_mtime(path):
    try:
        return _mtime_seconds(os.stat(path))
    except OSError as exc:
        sys.stderr.write(f"{path}: {exc.strerror or exc}\n")
        return None


def parse_args(argv):
    """Parse options; return the options and the remaining file arguments."""
    args = list(argv)
    flags = set()
    newer = older = None
    index = 0
    while index < len(args) and args[index].startswith("-") and len(args[index]) > 1:
        arg = args[index]
        index += 1
        if arg == "--":
            break
        pos = 1
        while pos < len(arg):
            ch = arg[pos]
            pos += 1
            if ch in "no":
                rest = arg[pos:]
                if rest:
                    value = rest
                elif index < len(args):
                    value = args[index]
                    index += 1
                else:
                    raise UsageError(f"option -{ch} needs a file")
                if ch == "n":
                    newer = _reference_mtime(value)
                else:
                    older = _reference_mtime(value)
                break
            if ch in _FLAGS:
                flags.add(ch)
            else:
                raise UsageError(f"unknown option -{ch}")
    return TestOptions(frozenset(flags), newer, older), args[index:]


def _passes(path, name, options):
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    flags = options.flags
    mode = st.st_mode
    if "a" not in flags and name.startswith("."):
        return False
    if "b" in flags and not stat.S_ISBLK(mode):
        return False
    if "c" in flags and not stat.S_ISCHR(mode):
        return False
    if "d" in flags and not stat.S_ISDIR(mode):
        return False
    if "e" in flags and not os.access(path, os.F_OK):
        return False
    if "f" in flags and not stat.S_ISREG(mode):
        return False
    if "g" in flags and not mode & stat.S_ISGID:
        return False
    if "h" in flags:
        try:
            if not stat.S_ISLNK(os.lstat(path).st_mode):
                return False
        except OSError:
            return False
    if options.newer_than is not None and not _mtime_seconds(st) > options.newer_than:
        return False
    if options.older_than is not None and not _mtime_seconds(st) < options.older_than:
        return False
    if "p" in flags and not stat.S_ISFIFO(mode):
        return False
    if "r" in flags and not os.access(path, os.R_OK):
        return False
    if "s" in flags and not st.st_size > 0:
        return False
    if "u" in flags and not mode & stat.S_ISUID:
        return False
    if "w" in flags and not os.access(path, os.W_OK):
        return False
    if "x" in flags and not os.access(path, os.X_OK):
        return False
    return True


def path_matches(path, name, options):
    """Whether ``path`` has every requested property (inverted by ``-v``)."""
    return _passes(path, name, options) != ("v" in options.flags)


def _directory_entries(path):
    try:
        names = os.listdir(path)
    except OSError:
        return None
    return [".", ".."] + names


def _candidates(options, paths, stdin):
    if not paths:
        for line in stdin:
            if line.endswith("\n"):
                line = line[:-1]
            yield line, line
        return
    for path in paths:
        entries = _directory_entries(path) if "l" in options.flags else None
        if entries is None:
            yield path, path
            continue
        for name in entries:
            full = f"{path}/{name}"
            if len(full.encode()) < _PATH_MAX:
                yield full, name


def run(options, paths, stdin=None, stdout=None):
    """Print each matching name; return 0 if anything matched, else 1."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    matched = False
    for path, name in _candidates(options, paths, stdin):
        if path_matches(path, name, options):
            if "q" in options.flags:
                return 0
            matched = True
            stdout.write(name + "\n")
    return 0 if matched else 1


def main(argv=None):
    """Command entry point; returns the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        options, paths = parse_args(argv)
    except UsageError:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "stest"
        sys.stderr.write(f"usage: {prog} [-{_FLAGS}] [-n file] [-o file] [file...]\n")
        return 2
    return run(options, paths)