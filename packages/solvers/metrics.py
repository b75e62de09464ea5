"""
Per-candidate scores computed from the bucket partition of the remaining words.

All three are module-level functions of (guess, words) so a process pool can
pickle them by reference. `words` is a WordSet or a plain sequence of words of
the right length (workers are handed a tuple).

  entropy_of_guess        -sum p*log2(p), p = bucket_size / n        (maximize)
  expected_remaining      sum c^2 / n                               (minimize)
  expected_column_length  sum p * (distinct letters per position,
                          summed over positions, inside the bucket) (minimize)
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

import numpy as np

from packages.engine import evaluate
from packages.engine.buckets import bucket_sizes
from packages.engine.pattern import ResponsePattern


def entropy_of_guess(guess: str, words: Iterable[str]) -> float:
    # sizes come back sorted, so equal partitions give bit-identical sums
    sizes = np.asarray(bucket_sizes(guess, words), dtype=np.float64)
    n = sizes.sum()
    if n <= 1:
        return 0.0
    p = sizes / n
    return float(-(p * np.log2(p)).sum())


def expected_remaining(guess: str, words: Iterable[str]) -> float:
    sizes = bucket_sizes(guess, words)
    n = sum(sizes)
    if n == 0:
        return 0.0
    return sum(c * c for c in sizes) / n


def _column_length(bucket: List[str]) -> int:
    return sum(len(set(letters)) for letters in zip(*bucket))


def expected_column_length(guess: str, words: Iterable[str]) -> float:
    groups: Dict[ResponsePattern, List[str]] = defaultdict(list)
    guess = guess.strip().lower()
    for w in words:
        groups[evaluate(w, guess).pattern].append(w)
    n = sum(len(g) for g in groups.values())
    if n == 0:
        return 0.0
    total = sum(len(g) * _column_length(g) for g in sorted(groups.values()))
    return total / n
