"""
Completion exceptions
"""

class CompletionException(Exception):
    pass


class InvalidCompleter(CompletionException):
    pass
