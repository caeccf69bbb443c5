"""
linecompleter/renderer.py - Candidate grid renderer
"""

from linecompleter.ansi import ansi
from linecompleter.completion import Candidate
from linecompleter.grid import GridLayout, display_width, row_count


class Renderer:
    """
    Draws the candidate grid below the input and returns the cursor to its
    original position.

    ``line_count`` is the number of screen lines from the cursor line to the
    last line of the input, inclusive. ``column`` is the screen column of the
    cursor.
    """
    def __init__(self, stdout, highlight: str = ansi.reverse):
        self.stdout = stdout
        self.highlight = highlight

    def view(
        self,
        candidates: list[Candidate],
        layout: GridLayout,
        choice_index: int,
        line_count: int,
        column: int,
    ) -> str:
        """
        Get grid view to be displayed

        Returns a string with the necessary ANSI codes to display the grid
        under the input and return the cursor to the original position. The
        candidate at ``choice_index`` is highlighted. Nothing is displayed if
        no column fits.
        """
        if not candidates or layout.column_count == 0:
            return ""

        s = ansi.newline * line_count + ansi.clear_down
        for i, candidate in enumerate(candidates):
            if i and i % layout.column_count == 0:
                s += ansi.newline
            selected = i == choice_index
            if selected:
                s += self.highlight
            s += candidate.display
            s += " " * (layout.column_width - display_width(candidate.display))
            if selected:
                s += ansi.reset

        rows = row_count(len(candidates), layout.column_count)
        s += ansi.up(line_count - 1 + rows) + ansi.column(column)

        return s

    def clear_view(self, line_count: int) -> str:
        """
        Get the codes to erase a displayed grid, leaving the cursor in place
        """
        return (
            ansi.save_cursor
            + ansi.down(line_count)
            + ansi.carriage_return
            + ansi.clear_down
            + ansi.restore_cursor
        )

    def display(self, s: str):
        if s:
            self.stdout.write(s)
            self.stdout.flush()

    def draw(
        self,
        candidates: list[Candidate],
        layout: GridLayout,
        choice_index: int,
        line_count: int,
        column: int,
    ):
        self.display(self.view(candidates, layout, choice_index, line_count, column))

    def clear(self, line_count: int):
        self.display(self.clear_view(line_count))
