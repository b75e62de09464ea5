"""
Entropy Solver (expected information gain).

Main idea:
  - For each candidate guess g, partition the CURRENT word set by feedback pattern.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - lexicographically smallest word (see solvers.select).

Acceleration:
  - When the word set is large, don't evaluate the ENTIRE dictionary.
  - Pre-rank dictionary words by DISTINCT letter-frequency score w.r.t. the CURRENT
    words, keep only the top-K (POOL_CAP), and always include top current words too.
  - Small word sets are searched among themselves only (precise & cheap).
"""

from __future__ import annotations
from collections import Counter
from typing import List

from packages.engine import WordSet
from .base import BaseSolver, register
from .selection import Strategy, select


def distinct_score(w: str, counts: Counter) -> int:
    """Sum of per-letter counts with duplicates in the word counted once."""
    s, seen = 0, set()
    for ch in w:
        if ch not in seen:
            s += counts[ch]
            seen.add(ch)
    return s


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Maximum Entropy"
    version = "2.0.0"

    # If the word set is ≤ this, search only among its own words
    CANDIDATE_ONLY_LIMIT = 200

    # When it is larger, cap the dictionary part of the pool after prefiltering
    POOL_CAP = 400

    # Also include up to this many top current words in the pool (so we don't
    # miss an obvious answer late in the game)
    INCLUDE_TOP_CANDIDATES = 100

    def _select_pool(self, words: WordSet, dictionary: WordSet) -> List[str]:
        """
        Choose which words to evaluate with entropy:
          - Small word set: just the word set.
          - Large set: rank the dictionary by distinct-letter score (w.r.t. words)
                       and keep the top-K; also merge in the top current words.
        """
        if len(words) <= self.CANDIDATE_ONLY_LIMIT:
            return list(words)

        counts = Counter("".join(words))
        # sorted() is stable over the lexicographic WordSet order
        key = lambda w: distinct_score(w, counts)  # noqa: E731
        pool = sorted(dictionary, key=key, reverse=True)[: self.POOL_CAP]
        top = sorted(words, key=key, reverse=True)[: self.INCLUDE_TOP_CANDIDATES]
        return list(dict.fromkeys(top + pool))

    def next_guess(self, state: dict) -> str:
        words: WordSet = state["words"]
        dictionary: WordSet = state["dictionary"]
        pool = self._select_pool(words, dictionary)
        return select(words, pool, Strategy.MAX_ENTROPY, workers=self.workers)
