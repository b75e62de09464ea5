"""
Feedback statuses and their compact integer encoding.

Statuses use the traffic-light notation:
  - 'G' : CORRECT  = right letter, right position
  - 'A' : PRESENT  = letter is in the secret, elsewhere
  - 'R' : ABSENT   = letter does not occur in the secret at all
  - 'X' : EXCESS   = letter occurs in the secret, but every instance is
                     already explained by a G or an earlier A in the guess

A ResponsePattern packs a status sequence into an int with 2 bits per
position (position 0 = least-significant pair). CORRECT is 0, so the
winning pattern is always the integer 0. Patterns are hashable and are the
keys used when bucketing words by feedback.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

from .errors import PatternOverflowError

BITS_PER_POSITION = 2
POSITION_MASK = 0b11
MAX_PATTERN_LENGTH = 8


class Status(IntEnum):
    CORRECT = 0
    PRESENT = 1
    ABSENT = 2
    EXCESS = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, ch: str) -> "Status":
        try:
            return _BY_SYMBOL[ch.upper()]
        except KeyError:
            raise ValueError(f"unknown status symbol {ch!r}; expected one of G, A, R, X") from None


_SYMBOLS = {
    Status.CORRECT: "G",
    Status.PRESENT: "A",
    Status.ABSENT: "R",
    Status.EXCESS: "X",
}
_BY_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


def _check_length(n: int) -> None:
    if n == 0:
        raise PatternOverflowError("status sequence must not be empty")
    if n > MAX_PATTERN_LENGTH:
        raise PatternOverflowError(
            f"status sequence length {n} exceeds maximum of {MAX_PATTERN_LENGTH}")


@dataclass(frozen=True)
class ResponsePattern:
    encoded: int
    word_length: int

    @classmethod
    def from_symbols(cls, symbols: str) -> "ResponsePattern":
        return encode(Status.from_symbol(ch) for ch in symbols)

    @property
    def is_winner(self) -> bool:
        return self.encoded == 0

    def status_at(self, position: int) -> Status:
        if not 0 <= position < self.word_length:
            raise IndexError(position)
        return Status((self.encoded >> (position * BITS_PER_POSITION)) & POSITION_MASK)

    def decode(self) -> Tuple[Status, ...]:
        return tuple(self.status_at(i) for i in range(self.word_length))

    def __str__(self) -> str:
        return "".join(s.symbol for s in self.decode())


def encode(statuses: Iterable[Status]) -> ResponsePattern:
    """Pack `statuses` into a ResponsePattern (2 bits each, position 0 lowest)."""
    statuses = [Status(s) for s in statuses]
    _check_length(len(statuses))
    encoded = 0
    for i, s in enumerate(statuses):
        encoded |= int(s) << (i * BITS_PER_POSITION)
    return ResponsePattern(encoded, len(statuses))


def decode(pattern: ResponsePattern) -> Tuple[Status, ...]:
    return pattern.decode()


def is_winning(pattern: ResponsePattern) -> bool:
    return pattern.is_winner
