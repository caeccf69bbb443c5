"""
linecompleter/completer.py - Completion state machine
"""

from dataclasses import dataclass
from enum import Enum
import logging
import shutil
import sys

from linecompleter.aggregate import aggregate
from linecompleter.ansi import ansi
from linecompleter.completion import Candidate, TabCompleter, get_candidate_source
from linecompleter.grid import Direction, GridLayout, compute_layout, navigate
from linecompleter.renderer import Renderer


logger = logging.getLogger("completion")


class State(Enum):
    IDLE = 0
    LISTING = 1
    SELECTING = 2


class CompletionKey(Enum):
    """
    Represents a keypress as seen by the completer
    """
    TRIGGER = 1
    ACCEPT = 2
    CANCEL = 3
    ADVANCE = 4
    RETREAT = 5
    ROW_START = 6
    ROW_END = 7
    UP = 8
    DOWN = 9
    DESELECT = 10
    UNRECOGNIZED = 11


NAVIGATION_KEYS = {
    CompletionKey.ADVANCE: Direction.ADVANCE,
    CompletionKey.RETREAT: Direction.RETREAT,
    CompletionKey.ROW_START: Direction.ROW_START,
    CompletionKey.ROW_END: Direction.ROW_END,
    CompletionKey.UP: Direction.UP,
    CompletionKey.DOWN: Direction.DOWN,
}


@dataclass(frozen=True)
class Snapshot:
    """
    The input line and cursor position when completion was requested
    """
    line: str
    position: int


class Completer:
    """
    Drives completion for a line buffer.

    The ``buffer`` must provide ``input``, ``position``, ``insert(text)``,
    ``delete_left(count)``, ``cursor_line_count()`` and ``cursor_column()``.
    See ``linecompleter.prompt.Prompt``.

    The ``source`` may provide either ``complete(line, pos)`` returning
    candidates or ``do(line, pos)`` returning suffixes and the shared prefix
    length. Without a source, the completion key inserts a tab.

    The first completion key press completes as far as the candidates agree,
    or lists them below the input. Pressing it again on an unchanged line
    starts selecting from the list.
    """
    def __init__(
        self,
        buffer,
        source=None,
        stdout=sys.stdout,
        width: int | None = None,
        highlight: str = ansi.reverse,
    ):
        self.buffer = buffer
        if source is None:
            source = TabCompleter()
        self.completer = get_candidate_source(source)
        self.renderer = Renderer(stdout, highlight=highlight)
        if width is None:
            width = shutil.get_terminal_size().columns
        self._width = width

        self._state = State.IDLE
        self._candidates: list[Candidate] = []
        self._choice_index = -1
        self._source: Snapshot | None = None
        self._column_count = 0
        self.displayed = False

    @property
    def state(self) -> State:
        return self._state

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    @property
    def choice_index(self) -> int:
        return self._choice_index

    @property
    def source(self) -> Snapshot | None:
        return self._source

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def width(self) -> int:
        return self._width

    def layout(self) -> GridLayout:
        return compute_layout(
            self._width, [candidate.display for candidate in self._candidates]
        )

    def on_width_change(self, width: int):
        """
        Record a new terminal width. It is used from the next redraw.
        """
        self._width = width

    def on_complete(self) -> bool:
        """
        Call on completion key

        Returns whether the key was handled. It is only left unhandled when
        the terminal width is unknown.
        """
        if self._width == 0:
            return False

        if self._state == State.SELECTING:
            self.select()
            return True

        snapshot = Snapshot(self.buffer.input, self.buffer.position)

        if self._state == State.LISTING and snapshot == self._source:
            self.enter_select_mode()
            self.select()
            return True

        candidates = list(self.completer.complete(snapshot.line, snapshot.position))
        logger.debug("Got %d candidates for %r" % (len(candidates), snapshot.line))

        if not candidates:
            self.exit_complete_mode()
            return True

        if len(candidates) == 1:
            self.write_candidate(candidates[0], snapshot)
            self.exit_complete_mode()
            return True

        common = aggregate(snapshot.line, candidates)
        if common is not None:
            logger.debug("Completing common prefix %r" % common.new_line)
            self.write_candidate(common, snapshot)
            self.exit_complete_mode()
            return True

        self.enter_complete_mode(snapshot, candidates)
        return True

    def handle_select_key(self, key: CompletionKey) -> bool:
        """
        Handle a key while selecting a candidate

        Returns whether the key was consumed. If not, the caller should
        process the key as usual.
        """
        if self._state != State.SELECTING or self._width == 0:
            return False

        if key == CompletionKey.ACCEPT:
            self.write_candidate(self._candidates[self._choice_index], self._source)
            self.exit_complete_mode()
            return True
        if key == CompletionKey.CANCEL:
            self.exit_complete_mode()
            return True
        if key == CompletionKey.TRIGGER:
            self.select()
            return True
        if key in NAVIGATION_KEYS:
            self._choice_index = navigate(
                self._choice_index,
                self._column_count,
                len(self._candidates),
                NAVIGATION_KEYS[key],
            )
            self.refresh()
            return True
        if key == CompletionKey.DESELECT:
            self.exit_select_mode()
            self.refresh()
            return False

        self.exit_complete_mode()
        return False

    def handle_key(self, key: CompletionKey) -> bool:
        """
        Handle a key and return whether it was consumed
        """
        if key == CompletionKey.TRIGGER:
            return self.on_complete()
        if key == CompletionKey.CANCEL and self._state == State.LISTING:
            self.exit_complete_mode()
            return True
        return self.handle_select_key(key)

    def select(self):
        """
        Select the next candidate, or complete if there is only one
        """
        if len(self._candidates) == 1:
            self.write_candidate(self._candidates[0], self._source)
            self.exit_complete_mode()
            return
        self._choice_index = navigate(
            self._choice_index,
            self._column_count,
            len(self._candidates),
            Direction.ADVANCE,
        )
        self.refresh()

    def write_candidate(self, candidate: Candidate, snapshot: Snapshot):
        """
        Make the buffer read as ``candidate.new_line``, starting from the line
        in ``snapshot``

        The grid is erased first, while the input still has the height it
        was drawn under.
        """
        self.erase()
        line, position = snapshot.line, snapshot.position
        head, tail = line[:position], line[position:]
        new_line = candidate.new_line
        if (
            len(new_line) >= len(line)
            and new_line.startswith(head)
            and new_line.endswith(tail)
        ):
            self.buffer.insert(new_line[position:len(new_line) - len(tail)])
        else:
            # Not an extension of the line, eg. a change of case
            self.buffer.delete_left(position)
            if tail and new_line.endswith(tail):
                new_line = new_line[:-len(tail)]
            self.buffer.insert(new_line)

    def refresh(self):
        """
        Redraw the candidate grid
        """
        if self._state == State.IDLE:
            return
        layout = self.layout()
        self._column_count = layout.column_count
        if not layout.column_count:
            self.erase()
            return
        self.renderer.draw(
            self._candidates,
            layout,
            self._choice_index,
            self.buffer.cursor_line_count(),
            self.buffer.cursor_column(),
        )
        self.displayed = True

    def enter_complete_mode(self, snapshot: Snapshot, candidates: list[Candidate]):
        logger.debug("Listing %d candidates" % len(candidates))
        self._state = State.LISTING
        self._source = snapshot
        self._candidates = candidates
        self._choice_index = -1
        self.refresh()

    def enter_select_mode(self):
        logger.debug("Selecting from %d candidates" % len(self._candidates))
        self._state = State.SELECTING
        self._choice_index = -1

    def exit_select_mode(self):
        logger.debug("Leaving selection")
        self._state = State.LISTING
        self._choice_index = -1

    def exit_complete_mode(self):
        if self._state != State.IDLE:
            logger.debug("Leaving completion")
        self._state = State.IDLE
        self._candidates = []
        self._choice_index = -1
        self._source = None
        self.erase()

    def erase(self):
        """
        Erase the grid if one is displayed
        """
        if self.displayed:
            self.renderer.clear(self.buffer.cursor_line_count())
            self.displayed = False
