"""
Exception types raised by the engine and the game harness.

Hierarchy:
  WordGameError
    ├─ InvalidWordError (also a ValueError)
    │    ├─ LengthMismatchError
    │    └─ MaxAttemptsError
    ├─ PatternOverflowError (also a ValueError)
    └─ EmptyPoolError

EmptyPoolError is the only one a caller is expected to recover from: it
means the accumulated feedback eliminated every word (contradictory input,
or a solver that ran out of fresh guesses).
"""

from __future__ import annotations


class WordGameError(Exception):
    """Base class for all wordgame errors."""


class InvalidWordError(WordGameError, ValueError):
    """A word is malformed or not part of the dictionary."""


class LengthMismatchError(InvalidWordError):
    """Two words (or a word and a word set) have different lengths."""

    def __init__(self, expected: int, actual: int, word: str = ""):
        self.expected = expected
        self.actual = actual
        self.word = word
        where = f" ({word!r})" if word else ""
        super().__init__(f"expected word length {expected}, got {actual}{where}")


class MaxAttemptsError(InvalidWordError):
    """The game has no attempts left."""


class PatternOverflowError(WordGameError, ValueError):
    """A status sequence is empty or longer than the pattern codec can pack."""


class EmptyPoolError(WordGameError):
    """No candidate guess is available."""

    def __init__(self, message: str = "no candidate guesses available", *,
                 remaining: int | None = None, pool: int | None = None):
        self.remaining = remaining
        self.pool = pool
        super().__init__(message)
