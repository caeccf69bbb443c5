"""
linecompleter/grid.py - Candidate grid layout and navigation
"""
from dataclasses import dataclass
from enum import Enum

from wcwidth import wcwidth


class Direction(Enum):
    """
    Represents a movement of the selection within the grid
    """
    ADVANCE = 1
    RETREAT = 2
    ROW_START = 3
    ROW_END = 4
    UP = 5
    DOWN = 6


@dataclass(frozen=True)
class GridLayout:
    column_count: int
    column_width: int


def display_width(text: str) -> int:
    """
    Return the number of terminal cells ``text`` occupies

    Wide characters count as two cells. Control and other non-printable
    characters count as none.
    """
    width = 0
    for char in text:
        char_width = wcwidth(char)
        if char_width > 0:
            width += char_width
    return width


def compute_layout(width: int, labels: list[str]) -> GridLayout:
    """
    Compute the number and width of columns for ``labels`` on a terminal
    ``width`` cells wide.

    The last cell of each line is left free so the cursor never reaches the
    right margin. Space left over after packing the columns is shared
    between them.
    """
    column_width = 1 + max((display_width(label) for label in labels), default=0)
    usable = width - 1
    if usable <= 0:
        return GridLayout(0, column_width)
    column_count = usable // column_width
    if column_count:
        column_width += (usable - column_width * column_count) // column_count
    return GridLayout(column_count, column_width)


def row_count(count: int, column_count: int) -> int:
    return -(-count // column_count)


def matrix_size(count: int, column_count: int) -> int:
    """
    Return the number of cells in the grid including the missing cells of a
    short last row.
    """
    return row_count(count, column_count) * column_count


def navigate(index: int, column_count: int, count: int, direction: Direction) -> int:
    """
    Return the index selected after moving from ``index`` in ``direction``

    Candidates are laid out row-major, ``column_count`` to a row. Every
    movement wraps around, skipping the missing cells of a short last row,
    so the result is always in ``[0, count)``.
    """
    if count <= 0:
        return -1
    index %= count

    if direction == Direction.ADVANCE:
        return (index + 1) % count
    if direction == Direction.RETREAT:
        return (index - 1) % count

    if column_count < 1:
        return index

    size = matrix_size(count, column_count)

    if direction == Direction.ROW_START:
        return index - index % column_count
    if direction == Direction.ROW_END:
        return min(index + column_count - index % column_count - 1, count - 1)
    if direction == Direction.DOWN:
        new_index = index + column_count
        if new_index >= size:
            new_index -= size
        elif new_index >= count:
            # Skip the missing cell in the short last row
            new_index += column_count - size
        return new_index
    if direction == Direction.UP:
        new_index = index - column_count
        if new_index < 0:
            new_index += size
            if new_index >= count:
                new_index -= column_count
        return new_index

    raise ValueError(f"Unknown direction {direction}")
