"""
linecompleter/prompt.py - Prompt implementation
"""

import sys

from linecompleter.ansi import ansi
from linecompleter.grid import display_width


class Prompt:
    """
    Represents the contents of a prompt, tracking position and providing the
    editing operations the completer needs
    """
    def __init__(
            self,
            stdout=sys.stdout,
            input: str = "",
            prefix: str = "> ",
            width: int = 80,
        ):
        self.stdout = stdout
        self.input = input
        self.prefix = prefix
        self.width = width

        self.position = len(self.input)

        self.display_prompt()

    def display(self, s, flush=True):
        """
        Display contents of ``s`` to the output

        If ``flush`` is True, the output will be flushed.
        """
        self.stdout.write(s)
        if flush:
            self.flush()

    def flush(self):
        self.stdout.flush()

    def display_prompt(self):
        self.display(self.prefix + self.input, False)
        if len(self.input) > self.position:
            self.display(ansi.left(display_width(self.input[self.position:])), False)
        self.flush()

    def insert(self, text: str):
        if not text:
            return
        self.input = self.input[:self.position] + text + self.input[self.position:]
        self.position += len(text)
        self.display(text, False)
        if self.position < len(self.input):
            self.display(ansi.save_cursor + self.input[self.position:] + ansi.restore_cursor, False)
        self.flush()

    def delete_left(self, count: int = 1):
        count = min(count, self.position)
        if count > 0:
            deleted = self.input[self.position - count:self.position]
            remaining = self.input[self.position:]
            self.input = self.input[:self.position - count] + remaining
            self.position -= count
            self.display(ansi.left(display_width(deleted)) + ansi.clear_right, False)
            if remaining:
                self.display(remaining + ansi.left(display_width(remaining)), False)
            self.flush()

    def cursor_home(self):
        if self.position > 0:
            self.display(ansi.left(display_width(self.input[:self.position])))
            self.position = 0

    def cursor_end(self):
        distance = display_width(self.input[self.position:])
        self.position = len(self.input)
        if distance:
            self.display(ansi.right(distance))

    def cursor_width(self) -> int:
        """
        Return the number of cells taken by the prefix and the input before
        the cursor
        """
        return display_width(self.prefix + self.input[:self.position])

    def cursor_column(self) -> int:
        """
        Return the screen column of the cursor, accounting for wrapped lines
        """
        if self.width <= 0:
            return self.cursor_width()
        return self.cursor_width() % self.width

    def cursor_line_count(self) -> int:
        """
        Return the number of screen lines from the cursor line to the last
        line of the input, inclusive
        """
        if self.width <= 0:
            return 1
        total = display_width(self.prefix + self.input)
        return total // self.width - self.cursor_width() // self.width + 1
