"""
Pytest config
"""

import pytest

from linecompleter.prompt import Prompt


def pytest_configure(config):
    if config.option.logdebug:
        config.option.log_cli_level = "DEBUG"


def pytest_addoption(parser):
    parser.addoption("--logdebug", action="store_true", help="Enable debug logging")


class Stdout:
    def __init__(self):
        self.value = ""
        self.dirty = False

    def write(self, data):
        self.value += data
        self.dirty = True

    def clear(self):
        self.value = ""
        self.dirty = False

    def flush(self):
        self.dirty = False


@pytest.fixture
def stdout():
    return Stdout()


class WordCompleter:
    """
    Completes the word before the cursor from a fixed list of words
    """
    def __init__(self, words):
        self.words = words

    def do(self, line, pos):
        word = line[:pos].rsplit(" ", 1)[-1]
        suffixes = [w[len(word):] for w in self.words if w.startswith(word)]
        return suffixes, len(word)


@pytest.fixture
def words():
    return WordCompleter(["go", "git", "git-shell", "grep"])


@pytest.fixture
def prompt(stdout):
    prompt = Prompt(stdout=stdout, input="g")
    stdout.clear()
    return prompt
