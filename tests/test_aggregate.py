import pytest

from linecompleter.aggregate import aggregate, common_prefix_length
from linecompleter.completion import Candidate


@pytest.mark.parametrize(
    "lines,length",
    [
        ([], 0),
        (["git"], 3),
        (["git", "git-shell"], 3),
        (["git-shell", "git"], 3),
        (["good", "going"], 2),
        (["go", "git", "grep"], 1),
        (["abc", "xbc"], 0),
        (["", "abc"], 0),
    ],
)
def test_common_prefix_length(lines, length):
    assert common_prefix_length(lines) == length


def test_aggregate_divergent():
    candidates = [Candidate("good", "od"), Candidate("going", "ing")]
    assert aggregate("go", candidates) is None


def test_aggregate_extension():
    candidates = [Candidate("git", "git"), Candidate("git-shell", "git-shell")]
    assert aggregate("gi", candidates) == Candidate("git", "")


def test_aggregate_no_extension_beyond_source():
    candidates = [
        Candidate("go", "go"),
        Candidate("git", "git"),
        Candidate("git-shell", "git-shell"),
        Candidate("grep", "grep"),
    ]
    assert aggregate("g", candidates) is None


def test_aggregate_same_as_source():
    candidates = [Candidate("git", "git"), Candidate("git-shell", "git-shell")]
    assert aggregate("git", candidates) is None


def test_aggregate_empty():
    assert aggregate("g", []) is None
