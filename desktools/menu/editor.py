"""The editable input line of the menu."""

BUFSIZ = 8192


class InputLine:
    """A line of text with a cursor, edited the way the menu's prompt is."""

    def __init__(self, text="", word_delimiters=" ", max_size=BUFSIZ):
        self.word_delimiters = word_delimiters
        self.max_size = max_size
        self.text = text
        self.cursor = len(text)

    def _is_delimiter(self, ch):
        return ch in self.word_delimiters

    def _remove_before(self, count):
        start = self.cursor - count
        self.text = self.text[:start] + self.text[self.cursor:]
        self.cursor = start

    def insert(self, s):
        """Insert ``s`` at the cursor; False if it would not fit."""
        if len(self.text.encode()) + len(s.encode()) > self.max_size - 1:
            return False
        self.text = self.text[:self.cursor] + s + self.text[self.cursor:]
        self.cursor += len(s)
        return True

    def backspace(self):
        """Delete the character before the cursor; False at the start."""
        if self.cursor == 0:
            return False
        self._remove_before(1)
        return True

    def delete(self):
        """Delete the character under the cursor; False at the end."""
        if self.cursor >= len(self.text):
            return False
        self.cursor += 1
        return self.backspace()

    def kill_to_end(self):
        """Delete everything from the cursor on."""
        self.text = self.text[:self.cursor]

    def kill_to_start(self):
        """Delete everything before the cursor."""
        self._remove_before(self.cursor)

    def kill_word(self):
        """Delete the word before the cursor; False if nothing was deleted."""
        changed = False
        while self.cursor > 0 and self._is_delimiter(self.text[self.cursor - 1]):
            self._remove_before(1)
            changed = True
        while self.cursor > 0 and not self._is_delimiter(self.text[self.cursor - 1]):
            self._remove_before(1)
            changed = True
        return changed

    def move_left(self):
        """Move one character left; False at the start."""
        if self.cursor == 0:
            return False
        self.cursor -= 1
        return True

    def move_right(self):
        """Move one character right; False at the end."""
        if self.cursor >= len(self.text):
            return False
        self.cursor += 1
        return True

    def move_word(self, direction):
        """Move to the start of the previous word (direction < 0) or end of the next."""
        text = self.text
        if direction < 0:
            while self.cursor > 0 and self._is_delimiter(text[self.cursor - 1]):
                self.cursor -= 1
            while self.cursor > 0 and not self._is_delimiter(text[self.cursor - 1]):
                self.cursor -= 1
        else:
            while self.cursor < len(text) and self._is_delimiter(text[self.cursor]):
                self.cursor += 1
            while self.cursor < len(text) and not self._is_delimiter(text[self.cursor]):
                self.cursor += 1

    def home(self):
        """Move the cursor to the start."""
        self.cursor = 0

    def end(self):
        """Move the cursor to the end."""
        self.cursor = len(self.text)