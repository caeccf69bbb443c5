import pytest

from linecompleter.ansi import ansi
from linecompleter.prompt import Prompt


def test_prompt_init(stdout):
    prompt = Prompt(stdout=stdout)
    assert prompt.input == ""
    assert prompt.position == 0
    assert stdout.value == "> "
    assert stdout.dirty is False


def test_prompt_init_value(stdout):
    prompt = Prompt(stdout=stdout, input="foo", prefix="$ ")
    assert prompt.position == 3
    assert stdout.value == "$ foo"


def test_prompt_insert_append(stdout):
    prompt = Prompt(stdout=stdout, input="foo")
    stdout.clear()

    prompt.insert(" bar")
    assert prompt.input == "foo bar"
    assert prompt.position == 7
    assert stdout.value == " bar"
    assert stdout.dirty is False


def test_prompt_insert_prepend(stdout):
    prompt = Prompt(stdout=stdout, input="bar")
    prompt.cursor_home()
    stdout.clear()

    prompt.insert("foo ")
    assert prompt.input == "foo bar"
    assert prompt.position == 4
    assert stdout.value == "foo " + ansi.save_cursor + "bar" + ansi.restore_cursor
    assert stdout.dirty is False


def test_prompt_insert_empty(stdout):
    prompt = Prompt(stdout=stdout, input="foo")
    stdout.clear()

    prompt.insert("")
    assert prompt.input == "foo"
    assert stdout.value == ""


def test_prompt_delete_left(stdout):
    prompt = Prompt(stdout=stdout, input="abc")
    stdout.clear()

    prompt.delete_left()
    assert prompt.input == "ab"
    assert prompt.position == 2

    prompt.delete_left(2)
    assert prompt.input == ""
    assert prompt.position == 0

    prompt.delete_left()
    assert prompt.input == ""

    assert stdout.value == \
        ansi.left(1) + ansi.clear_right + \
        ansi.left(2) + ansi.clear_right
    assert stdout.dirty is False


def test_prompt_delete_left_more_than_available(stdout):
    prompt = Prompt(stdout=stdout, input="ab")
    stdout.clear()

    prompt.delete_left(5)
    assert prompt.input == ""
    assert stdout.value == ansi.left(2) + ansi.clear_right


def test_prompt_delete_left_text_to_right(stdout):
    prompt = Prompt(stdout=stdout, input="bc")
    prompt.cursor_home()
    prompt.insert("a")
    stdout.clear()

    prompt.delete_left()
    assert prompt.input == "bc"
    assert prompt.position == 0
    assert stdout.value == ansi.left(1) + ansi.clear_right + "bc" + ansi.left(2)


def test_prompt_cursor_home_end(stdout):
    prompt = Prompt(stdout=stdout, input="abc")
    stdout.clear()

    prompt.cursor_home()
    assert prompt.position == 0
    prompt.cursor_home()

    prompt.cursor_end()
    assert prompt.position == 3
    prompt.cursor_end()

    assert stdout.value == ansi.left(3) + ansi.right(3)


@pytest.mark.parametrize(
    "input,home,line_count,column",
    [
        ("", False, 1, 2),
        ("abc", False, 1, 5),
        ("abcdefghijkl", False, 1, 4),
        ("abcdefghijkl", True, 2, 2),
        ("abcdefghijklmnopqrstuvw", True, 3, 2),
        ("日本語", False, 1, 8),
    ],
)
def test_prompt_cursor_geometry(stdout, input, home, line_count, column):
    prompt = Prompt(stdout=stdout, input=input, width=10)
    if home:
        prompt.cursor_home()
    assert prompt.cursor_line_count() == line_count
    assert prompt.cursor_column() == column


def test_prompt_cursor_geometry_no_width(stdout):
    prompt = Prompt(stdout=stdout, input="abc", width=0)
    assert prompt.cursor_line_count() == 1
    assert prompt.cursor_column() == 5
