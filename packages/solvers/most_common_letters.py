"""
Most-Common-Letters solver.

Idea:
  - Count, over the CURRENT word set, how many words contain each letter.
  - Narrow the set to words containing all of the top-3 letters; if nothing
    survives, try the top-2, then give up narrowing.
  - Pick randomly (seeded RNG) among what is left.

Cheap and letter-driven; ignores positions and never looks outside the
current word set, so every guess can still win.
"""

from __future__ import annotations
from collections import Counter
from typing import List

from packages.engine import WordSet
from .base import BaseSolver, register


@register
class MostCommonLettersSolver(BaseSolver):
    id = "most_common_letters"
    name = "Most Common Letters"
    version = "1.0.0"

    TOP_LETTERS = 3

    def _letter_counts(self, words: WordSet) -> Counter:
        """Words containing each letter (duplicates inside a word count once)."""
        counts: Counter = Counter()
        for w in words:
            counts.update(set(w))
        return counts

    def next_guess(self, state: dict) -> str:
        words: WordSet = state["words"]
        counts = self._letter_counts(words)
        # most_common breaks count ties by first-seen order; sort letters first
        ranked: List[str] = [ch for ch, _ in sorted(counts.items(), key=lambda t: (-t[1], t[0]))]

        for k in range(min(self.TOP_LETTERS, len(ranked)), 1, -1):
            subset = words
            for ch in ranked[:k]:
                subset = subset.containing(ch)
            if len(subset):
                return subset.random_word(self.rng)

        return words.random_word(self.rng)
