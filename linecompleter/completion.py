"""
linecompleter/completion.py - Completion candidates and sources
"""
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from linecompleter.exceptions import InvalidCompleter


@dataclass(frozen=True)
class Candidate:
    """
    A possible completion. When listing, the ``display`` will be shown in the
    grid. When accepted, the input line will become ``new_line``.
    """
    new_line: str
    display: str


@runtime_checkable
class AutoCompleter(Protocol):
    """
    Completer returning the suffixes to insert at the cursor and how many
    characters before the cursor they share with the line.

    For the words ``go``, ``git``, ``git-shell`` and ``grep``::

        do("g", 1)   => ["o", "it", "it-shell", "rep"], 1
        do("gi", 2)  => ["t", "t-shell"], 2
        do("git", 3) => ["", "-shell"], 3
    """
    def do(self, line: str, pos: int) -> tuple[list[str], int]:
        ...


@runtime_checkable
class CandidateCompleter(Protocol):
    """
    Completer returning full candidates: the updated line and how to display
    the option to the user.

    For the words ``go``, ``git`` and ``git-shell``::

        complete("run g", 5)  => [
            Candidate("run go", "go"),
            Candidate("run git", "git"),
            Candidate("run git-shell", "git-shell"),
        ]
        complete("run gi", 6) => [
            Candidate("run git", "git"),
            Candidate("run git-shell", "git-shell"),
        ]
    """
    def complete(self, line: str, pos: int) -> list[Candidate]:
        ...


class SharedPrefixAdapter:
    """
    Presents an ``AutoCompleter`` as a ``CandidateCompleter``
    """
    def __init__(self, completer: AutoCompleter):
        self.completer = completer

    def complete(self, line: str, pos: int) -> list[Candidate]:
        suffixes, length = self.completer.do(line, pos)
        start = max(pos - length, 0)
        candidates = []
        for suffix in suffixes:
            candidates.append(
                Candidate(
                    new_line=line[:pos] + suffix + line[pos:],
                    display=line[start:pos] + suffix,
                )
            )
        return candidates


class TabCompleter:
    """
    Completes to a literal tab, so the completion key behaves as a plain tab
    when no completer is configured.
    """
    def do(self, line: str, pos: int) -> tuple[list[str], int]:
        return ["\t"], 0


def get_candidate_source(source) -> CandidateCompleter:
    """
    Return a ``CandidateCompleter`` for ``source``.

    Sources already providing ``complete()`` are used as-is. Sources that only
    provide ``do()`` are wrapped in a ``SharedPrefixAdapter``.
    """
    if isinstance(source, CandidateCompleter):
        return source
    if isinstance(source, AutoCompleter):
        return SharedPrefixAdapter(source)
    raise InvalidCompleter(
        f"{type(source).__name__} provides neither complete() nor do()"
    )
