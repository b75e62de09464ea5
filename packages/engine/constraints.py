"""
Constraint accumulation from game feedback.

A ConstraintFilter is owned by one game. Each scored guess is folded in with
`update`, and `apply` returns the part of a WordSet still consistent with
everything seen so far:

  - per position: the set of letters that may still sit there
    (starts as a–z, shrinks as feedback arrives)
  - per letter: the minimum number of occurrences the secret must have
    (raised, never lowered, across responses)

This is the step that turns feedback into a shrinking candidate set.
"""

from __future__ import annotations

import copy
import string
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Set

from .errors import LengthMismatchError
from .pattern import Status
from .scoring import Response
from .words import WordSet

ALPHABET = string.ascii_lowercase


@dataclass
class FilterState:
    allowed: List[Set[str]]
    must_contain: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def initial(cls, word_length: int) -> "FilterState":
        return cls([set(ALPHABET) for _ in range(word_length)], {})


class ConstraintFilter:
    def __init__(self, word_length: int):
        if word_length <= 0:
            raise ValueError("word_length must be positive")
        self.word_length = word_length
        self._state = FilterState.initial(word_length)

    @property
    def state(self) -> FilterState:
        """Deep copy of the accumulated constraints."""
        return copy.deepcopy(self._state)

    def allowed_letters(self, position: int) -> Set[str]:
        return set(self._state.allowed[position])

    def required_counts(self) -> Dict[str, int]:
        return dict(self._state.must_contain)

    def reset(self) -> None:
        self._state = FilterState.initial(self.word_length)

    # ---- primitives ----
    def lock(self, letter: str, position: int) -> None:
        self._state.allowed[position] = {letter}

    def remove_letter(self, letter: str, position: int | None = None) -> None:
        """
        Remove `letter` at one position, or at every position when `position`
        is None. The global form never touches a position that is down to a
        single letter (locked by a green).
        """
        if position is not None:
            self._state.allowed[position].discard(letter)
            return
        for letters in self._state.allowed:
            if len(letters) > 1:
                letters.discard(letter)

    # ---- feedback ----
    def update(self, response: Response) -> None:
        if len(response.statuses) != self.word_length:
            raise LengthMismatchError(self.word_length, len(response.statuses), response.word)

        entries = list(response.entries())

        # Letters confirmed in the secret by THIS response (G or A).
        confirmed = Counter(ch for ch, s in entries
                            if s is Status.CORRECT or s is Status.PRESENT)
        must = self._state.must_contain
        for ch, n in confirmed.items():
            must[ch] = max(must.get(ch, 0), n)

        # Greens first, so the global removals below see the locks.
        for i, (ch, s) in enumerate(entries):
            if s is Status.CORRECT:
                self.lock(ch, i)

        for i, (ch, s) in enumerate(entries):
            if s is Status.PRESENT or s is Status.EXCESS:
                self.remove_letter(ch, i)
            elif s is Status.ABSENT:
                if ch in confirmed:
                    # only possible with hand-entered feedback; the letter
                    # exists, just not here
                    self.remove_letter(ch, i)
                else:
                    self.remove_letter(ch)

    def apply(self, words: WordSet) -> WordSet:
        """Return the words consistent with all constraints; `words` is untouched."""
        if words.word_length != self.word_length:
            raise LengthMismatchError(self.word_length, words.word_length)

        allowed = self._state.allowed
        must = self._state.must_contain
        kept: List[str] = []
        for w in words:
            if not all(ch in allowed[i] for i, ch in enumerate(w)):
                continue
            if must:
                counts = Counter(w)
                if any(counts[ch] < n for ch, n in must.items()):
                    continue
            kept.append(w)
        return words.subset(kept)
