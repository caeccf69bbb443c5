"""
linecompleter/ansi.py - ANSI codes
"""


class ANSI:
    reset = "\x1b[0m"
    reverse = "\x1b[7m"
    black = "\x1b[30m"
    background_white = "\x1b[47m"
    clear_right = "\x1b[0K"
    clear_down = "\x1b[0J"
    save_cursor = "\x1b[s"
    restore_cursor = "\x1b[u"
    carriage_return = "\r"
    newline = "\r\n"

    def up(self, n=1):
        return f"\x1b[{n}A"

    def down(self, n=1):
        return f"\x1b[{n}B"

    def right(self, n=1):
        return f"\x1b[{n}C"

    def left(self, n=1):
        return f"\x1b[{n}D"

    def column(self, x):
        """
        Return to the start of the line and move right ``x`` cells

        No right movement is emitted for column 0; terminals treat a zero
        count as 1.
        """
        if x > 0:
            return self.carriage_return + self.right(x)
        return self.carriage_return


ansi = ANSI()
