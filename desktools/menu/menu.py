"""Menu state machine: items, selection, paging and keyboard handling."""

import sys
from dataclasses import dataclass
from typing import Optional

from .editor import InputLine
from .matching import _match_order

VERSION = "5.3"

_USAGE = (
    "usage: dmenu [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)

_CTRL_MAP = {
    "a": "Home", "b": "Left", "c": "Escape", "d": "Delete", "e": "End",
    "f": "Right", "g": "Escape", "h": "BackSpace", "i": "Tab",
    "n": "Down", "p": "Up",
}
_ALT_MAP = {"g": "Home", "G": "End", "h": "Up", "j": "Next", "k": "Prior", "l": "Down"}


@dataclass
class MenuOptions:
    """Settings of the menu, from defaults and the command line."""

    topbar: bool = True
    fast: bool = False
    case_insensitive: bool = False
    lines: int = 0
    monitor: int = -1
    prompt: Optional[str] = None
    font: str = "monospace:size=10"
    norm_fg: str = "#bbbbbb"
    norm_bg: str = "#222222"
    sel_fg: str = "#eeeeee"
    sel_bg: str = "#005577"
    out_fg: str = "#000000"
    out_bg: str = "#00ffff"
    embed: Optional[str] = None
    word_delimiters: str = " "
    show_version: bool = False


class MenuExit(Exception):
    """The menu closes with ``status``; ``output`` is the line it printed, if any."""

    def __init__(self, status, output=None):
        super().__init__(status)
        self.status = status
        self.output = output


@dataclass(eq=False)
class Item:
    """One menu entry; ``out`` marks entries already printed."""

    text: str
    out: bool = False


class Menu:
    """Input line, filtered items, selection and page layout of the menu."""

    def __init__(self, items, options=None, measure=None, width=80):
        self.options = options or MenuOptions()
        self.items = [Item(text) for text in items]
        self.measure = measure or len
        self.width = width
        self.lines = max(0, min(self.options.lines, len(self.items)))
        self.input = InputLine(word_delimiters=self.options.word_delimiters)
        self.paste_request = None
        prompt = self.options.prompt
        self._promptw = self.measure(prompt) if prompt else 0
        self._inputw = width // 3
        self.matches = []
        self._curr = self._sel = self._next = self._prev = None
        self._match()

    @property
    def selected(self):
        """The selected item, or None when nothing matches."""
        return None if self._sel is None else self.matches[self._sel]

    @property
    def has_previous_page(self):
        return self._curr is not None and self._curr > 0

    @property
    def has_next_page(self):
        return self._next is not None

    def visible_items(self):
        """Items on the current page."""
        if self._curr is None:
            return []
        end = len(self.matches) if self._next is None else self._next
        return self.matches[self._curr:end]

    def _match(self):
        order = _match_order(
            self.input.text, [item.text for item in self.items], self.options.case_insensitive
        )
        self.matches = [self.items[index] for index in order]
        self._curr = self._sel = 0 if self.matches else None
        self._calcoffsets()

    def _page_size(self):
        if self.lines > 0:
            return self.lines
        return self.width - (
            self._promptw + self._inputw + self.measure("<") + self.measure(">")
        )

    def _item_width(self, text, limit):
        if self.lines > 0:
            return 1
        width = self.measure(text)
        return min(width, limit) if limit >= 0 else width

    def _calcoffsets(self):
        if self._curr is None:
            self._next = self._prev = None
            return
        limit = self._page_size()
        total = 0
        position = self._curr
        while position < len(self.matches):
            total += self._item_width(self.matches[position].text, limit)
            if total > limit:
                break
            position += 1
        self._next = position if position < len(self.matches) else None
        total = 0
        position = self._curr
        while position > 0:
            total += self._item_width(self.matches[position - 1].text, limit)
            if total > limit:
                break
            position -= 1
        self._prev = position

    def _insert_text(self, text):
        if text and not (ord(text[0]) < 32 or ord(text[0]) == 127):
            if self.input.insert(text):
                self._match()

    def _end(self):
        line = self.input
        if line.cursor < len(line.text):
            line.end()
            return
        last = len(self.matches) - 1
        if self._next is not None:
            self._curr = last
            self._calcoffsets()
            self._curr = self._prev
            self._calcoffsets()
            while self._next is not None and self._curr + 1 < len(self.matches):
                self._curr += 1
                self._calcoffsets()
        self._sel = last if self.matches else None

    def _up(self):
        if self._sel is not None and self._sel > 0:
            self._sel -= 1
            if self._sel + 1 == self._curr:
                self._curr = self._prev
                self._calcoffsets()

    def _down(self):
        if self._sel is not None and self._sel + 1 < len(self.matches):
            self._sel += 1
            if self._sel == self._next:
                self._curr = self._next
                self._calcoffsets()

    def handle_key(self, key, ctrl=False, alt=False, shift=False, text=""):
        """Apply a key press; return the printed line, if any. Raises MenuExit to close."""
        line = self.input
        if key is not None and ctrl:
            if key in _CTRL_MAP:
                key = _CTRL_MAP[key]
            elif key in ("j", "J", "m", "M"):
                key, ctrl = "Return", False
            elif key == "k":
                line.kill_to_end()
                self._match()
                key = None
            elif key == "u":
                line.kill_to_start()
                self._match()
                key = None
            elif key == "w":
                if line.kill_word():
                    self._match()
                key = None
            elif key in ("y", "Y"):
                self.paste_request = "clipboard" if shift else "primary"
                return None
            elif key in ("Left", "KP_Left"):
                line.move_word(-1)
                return None
            elif key in ("Right", "KP_Right"):
                line.move_word(+1)
                return None
            elif key in ("Return", "KP_Enter"):
                pass
            elif key == "bracketleft":
                raise MenuExit(1)
            else:
                return None
        elif key is not None and alt:
            if key == "b":
                line.move_word(-1)
                return None
            if key == "f":
                line.move_word(+1)
                return None
            if key not in _ALT_MAP:
                return None
            key = _ALT_MAP[key]

        if key in ("Delete", "KP_Delete"):
            if line.delete():
                self._match()
        elif key == "BackSpace":
            if line.backspace():
                self._match()
        elif key in ("End", "KP_End"):
            self._end()
        elif key == "Escape":
            raise MenuExit(1)
        elif key in ("Home", "KP_Home"):
            if self._sel == (0 if self.matches else None):
                line.home()
            else:
                self._sel = self._curr = 0
                self._calcoffsets()
        elif key in ("Left", "KP_Left"):
            if line.cursor > 0 and (self._sel is None or self._sel == 0 or self.lines > 0):
                line.move_left()
            elif self.lines == 0:
                self._up()
        elif key in ("Up", "KP_Up"):
            self._up()
        elif key in ("Next", "KP_Next"):
            if self._next is not None:
                self._sel = self._curr = self._next
                self._calcoffsets()
        elif key in ("Prior", "KP_Prior"):
            if self._prev is not None:
                self._sel = self._curr = self._prev
                self._calcoffsets()
        elif key in ("Return", "KP_Enter"):
            selected = self.selected
            output = selected.text if selected is not None and not shift else line.text
            if not ctrl:
                raise MenuExit(0, output)
            if selected is not None:
                selected.out = True
            return output
        elif key in ("Right", "KP_Right"):
            if line.cursor < len(line.text):
                line.move_right()
            elif self.lines == 0:
                self._down()
        elif key in ("Down", "KP_Down"):
            self._down()
        elif key == "Tab":
            selected = self.selected
            if selected is not None:
                raw = selected.text.encode()[: line.max_size - 1]
                line.text = raw.decode("utf-8", errors="ignore")
                line.end()
                self._match()
        else:
            self._insert_text(text)
        return None

    def paste(self, text):
        """Insert pasted text up to its first newline."""
        self.paste_request = None
        if self.input.insert(text.split("\n", 1)[0]):
            self._match()


def _atoi(text):
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def parse_args(argv):
    """Parse command line options; raise ValueError with the usage text on error."""
    args = list(argv)
    options = MenuOptions()
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "-v":
            options.show_version = True
            return options
        if arg == "-b":
            options.topbar = False
        elif arg == "-f":
            options.fast = True
        elif arg == "-i":
            options.case_insensitive = True
        elif index + 1 == len(args):
            raise ValueError(_USAGE)
        else:
            index += 1
            value = args[index]
            if arg == "-l":
                options.lines = _atoi(value) % (1 << 32)
            elif arg == "-m":
                options.monitor = _atoi(value)
            elif arg == "-p":
                options.prompt = value
            elif arg == "-fn":
                options.font = value
            elif arg == "-nb":
                options.norm_bg = value
            elif arg == "-nf":
                options.norm_fg = value
            elif arg == "-sb":
                options.sel_bg = value
            elif arg == "-sf":
                options.sel_fg = value
            elif arg == "-w":
                options.embed = value
            else:
                raise ValueError(_USAGE)
        index += 1
    return options


def read_items(stream=None):
    """Read one item per line, dropping the trailing newline."""
    stream = sys.stdin if stream is None else stream
    return [line[:-1] if line.endswith("\n") else line for line in stream]