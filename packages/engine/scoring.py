"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

Conventions (see pattern.Status):
  - 'G' : correct letter in the correct position
  - 'A' : letter is in the secret but at another position
  - 'R' : letter does not occur in the secret at all
  - 'X' : letter occurs in the secret, but this occurrence is one too many

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the secret)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks all greens and consumes one unit of availability for
     each of them.
  2) Second pass, left to right over the remaining positions, marks 'A'
     while availability lasts. Once a letter's availability is exhausted,
     further occurrences are 'X' if the secret contains the letter at all,
     otherwise 'R'.
Earlier positions claim availability before later ones.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import LengthMismatchError
from .pattern import ResponsePattern, Status, encode


@dataclass(frozen=True)
class Response:
    """A scored guess: the word plus one Status per position."""
    word: str
    statuses: Tuple[Status, ...]

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "word", self.word.strip().lower())
        object.__setattr__(self, "statuses", tuple(Status(s) for s in self.statuses))
        if len(self.word) != len(self.statuses):
            raise LengthMismatchError(len(self.word), len(self.statuses), self.word)

    @classmethod
    def parse(cls, word: str, symbols: str) -> "Response":
        """
        Build a Response from externally supplied feedback, e.g.
        Response.parse("raise", "AARGG").
        """
        word = word.strip().lower()
        symbols = symbols.strip()
        if len(word) != len(symbols):
            raise LengthMismatchError(len(word), len(symbols), word)
        return cls(word, tuple(Status.from_symbol(ch) for ch in symbols))

    @property
    def is_winner(self) -> bool:
        return all(s is Status.CORRECT for s in self.statuses)

    @property
    def pattern(self) -> ResponsePattern:
        return encode(self.statuses)

    def entries(self) -> Iterator[Tuple[str, Status]]:
        return zip(self.word, self.statuses)

    def __str__(self) -> str:
        return "".join(s.symbol for s in self.statuses)


def evaluate(secret: str, guess: str) -> Response:
    """
    Score `guess` against `secret`.

    Raises:
      LengthMismatchError if the words differ in length.

    Examples:
      str(evaluate("arose", "raise")) -> "AARGG"
      str(evaluate("beach", "beech")) -> "GGXGG"
      str(evaluate("study", "mucus")) -> "RARXA"
    """
    secret = secret.strip().lower()
    guess = guess.strip().lower()
    if len(secret) != len(guess):
        raise LengthMismatchError(len(secret), len(guess), guess)

    n = len(guess)
    statuses = [Status.ABSENT] * n

    counts = Counter(secret)
    available = Counter(counts)

    # Pass 1: greens consume availability first.
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            statuses[i] = Status.CORRECT
            available[g] -= 1

    # Pass 2: left to right over what is left.
    for i, g in enumerate(guess):
        if statuses[i] is Status.CORRECT:
            continue
        if available[g] > 0:
            statuses[i] = Status.PRESENT
            available[g] -= 1
        elif counts[g] > 0:
            statuses[i] = Status.EXCESS
        # else: stays ABSENT, the secret has none of this letter

    return Response(guess, tuple(statuses))
