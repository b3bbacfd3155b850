# desktools

A handful of small desktop utilities:

- **a status-line generator** (`desktools.status`) that periodically
  assembles system information (date and time, CPU and memory usage, disk
  space, network speed, battery state and more) into one line of text;
- **a file-test filter** (`desktools.stest`) that prints the names of files
  matching a set of tests, useful for building lists of executables for a
  launcher;
- **a menu engine** (`desktools.menu`) that does the item matching,
  input-line editing and key handling of a dynamic menu, independent of any
  windowing system.

## Installation

```
pip install desktools
```

Python 3.10 or later is required. The only dependency is `psutil`. System
figures are read from `/proc` and `/sys`, so most components assume Linux.

## Status line

```
desktools-status -s
```

Prints the status line to standard output once per second until interrupted
with `SIGINT` or `SIGTERM`. Any other argument is a usage error (exit
status 1). The command prints the built-in configuration, `default_args()`,
which is the local date and time in `%F %T` format.

### Building your own line

A status line is a list of `StatusArg(func, fmt, args=None)` entries: a
component function, a printf-style format holding one `%s` (with optional
flags, width and precision; `%%` for a literal percent sign) and an
optional argument passed to the component. When a component returns
`None`, the placeholder `n/a` is shown in its place.

```python
from desktools.status.config import StatusArg, component
from desktools.status.cli import render_status, run

line = [
    StatusArg(component("cpu_perc"), "[CPU %s%%] "),
    StatusArg(component("ram_perc"), "[RAM %s%%] "),
    StatusArg(component("datetime"), "%s", "%a %b %d %T"),
]
print(render_status(line))          # one rendering, at most 2048 bytes
run(line, interval=1000)            # print every 1000 ms, forever
```

`run(args, interval, sink, should_stop)` hands each rendered line to `sink`
(printing it by default) and stops once `should_stop()` returns true.
`component(name)` raises `ValueError` for an unknown name.

### Components

Each component returns a string, or `None` when no value is available
(a warning is written to standard error where something failed):

| module | components |
|--------|-----------|
| `desktools.status.system` | `datetime(fmt)`, `disk_free(path)`, `disk_perc(path)`, `disk_total(path)`, `disk_used(path)`, `entropy()`, `hostname()`, `kernel_release()`, `load_avg()`, `num_files(path)`, `run_command(cmd)`, `uptime()`, `gid()`, `uid()`, `username()` |
| `desktools.status.power` | `cpu_perc()`, `cpu_freq()`, `battery_perc(bat)`, `battery_state(bat)`, `battery_remaining(bat)`, `temp(file)` |
| `desktools.status.memory` | `ram_free()`, `ram_perc()`, `ram_total()`, `ram_used()`, `swap_free()`, `swap_perc()`, `swap_total()`, `swap_used()` |
| `desktools.status.network` | `ipv4(interface)`, `ipv6(interface)`, `netspeed_rx(interface)`, `netspeed_tx(interface)`, `wifi_perc(interface)`, `wifi_essid(interface)` |
| `desktools.status.volume` | `vol_perc(card)` (OSS mixer device, e.g. `/dev/mixer`) |

Components that read a system file take its path as an optional argument
(for example `entropy(path)`, `cpu_freq(path)`, `ram_perc(meminfo)`,
`battery_perc(bat, root)`), which is handy for testing. `cpu_perc` and the
network speeds compare against the previous call, so their first call
returns `None`; `CpuMeter` and `NetSpeedMeter` keep that state for your own
instances.

`desktools.status.util.fmt_human(num, base)` formats a number with one
decimal and an SI (base 1000) or IEC (base 1024) prefix:

```python
from desktools.status.util import fmt_human
fmt_human(1536, 1024)   # "1.5 Ki"
```

### What it does not do

The status line is only ever written to standard output. The command does
not set the name of a window system's root window, so running it without
`-s` reports an error and exits with status 1. Keyboard indicators and
keymap components are not provided.

## File tests

```
desktools-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

Prints every given file that passes all of the selected tests; with no
files, names are read one per line from standard input.

| flag | test |
|------|------|
| `-a` | include hidden files (names starting with `.`) |
| `-b` | block special |
| `-c` | character special |
| `-d` | directory |
| `-e` | exists |
| `-f` | regular file |
| `-g` | set-group-id |
| `-h` | symbolic link |
| `-l` | test the entries of each directory argument instead |
| `-n file` | modified later than *file* |
| `-o file` | modified earlier than *file* |
| `-p` | named pipe |
| `-q` | quiet: exit 0 on the first match without printing |
| `-r` | readable |
| `-s` | not empty |
| `-u` | set-user-id |
| `-v` | invert the sense of the tests |
| `-w` | writable |
| `-x` | executable |

The exit status is 0 if something matched, 1 if nothing did and 2 on a
usage error. For example, to list the executables on your `PATH`:

```
echo "$PATH" | tr ':' '\n' | desktools-stest -flx
```

From Python, `parse_args(argv)` returns a `TestOptions` and the remaining
paths, `path_matches(path, name, options)` tests one file and
`run(options, paths, stdin, stdout)` does the whole job.

## Menu engine

- `desktools.menu.matching.match_items(text, items, case_insensitive)`
  keeps the items containing every space-separated token of `text` and
  orders them: exact matches first, then those starting with the first
  token, then the rest. `cistrstr(haystack, needle)` is the ASCII
  case-insensitive search used with `case_insensitive=True`.
- `desktools.menu.editor.InputLine` is the editable input field: insert,
  backspace, delete, kill to end or start, kill word, cursor and word
  movement.
- `desktools.menu.menu.Menu(items, options, measure, width)` combines them
  with selection and paging. `Menu.handle_key(key, ctrl, alt, shift, text)`
  takes key names such as `"Return"`, `"Tab"`, `"Up"` or a letter with
  `ctrl=True`; it returns the printed line for Ctrl+Return and raises
  `MenuExit(status, output)` when the menu should close (Return selects,
  Escape cancels). `visible_items()` gives the current page and
  `paste(text)` inserts text up to its first newline.
- `parse_args(argv)` reads the usual menu options (`-b -f -i -v -l -m -p
  -fn -nb -nf -sb -sf -w`) into `MenuOptions`, raising `ValueError` with the
  usage text on error; `read_items(stream)` reads one item per line.

The menu engine does not open a window, draw anything or read the
keyboard: there is no menu command. It is meant to be driven by a front end
of your own.