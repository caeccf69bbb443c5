"""
linecompleter/aggregate.py - Common prefix aggregation
"""
from linecompleter.completion import Candidate


def common_prefix_length(lines: list[str]) -> int:
    """
    Return the length of the prefix shared by all ``lines``

    Scanning stops at the first position that is out of bounds for any line
    or where any two lines disagree.
    """
    if not lines:
        return 0
    length = 0
    first = lines[0]
    while length < len(first):
        char = first[length]
        for line in lines[1:]:
            if length >= len(line) or line[length] != char:
                return length
        length += 1
    return length


def aggregate(source_line: str, candidates: list[Candidate]) -> Candidate | None:
    """
    Return a candidate for the text all ``candidates`` agree on, or None if
    that text is no longer than ``source_line``.

    The returned candidate has no display label since it is never listed.
    """
    if not candidates:
        return None
    lines = [candidate.new_line for candidate in candidates]
    length = common_prefix_length(lines)
    if length > len(source_line):
        return Candidate(new_line=lines[0][:length], display="")
    return None
