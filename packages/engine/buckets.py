"""
Partition a word set by the feedback each word would produce for a guess.

For a fixed guess g and word set W, bucket[p] holds every w in W such that
evaluate(w, g) has pattern p, i.e. the words that would remain if p were
the feedback. Every word lands in exactly one bucket, and the all-green
bucket can only ever contain g itself.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Set

from .errors import LengthMismatchError
from .pattern import ResponsePattern
from .scoring import evaluate
from .words import WordSet

BucketMap = Dict[ResponsePattern, Set[str]]


def _check(guess: str, words: WordSet) -> str:
    guess = guess.strip().lower()
    if len(guess) != words.word_length:
        raise LengthMismatchError(words.word_length, len(guess), guess)
    return guess


def buckets(guess: str, words: WordSet) -> BucketMap:
    guess = _check(guess, words)
    out: BucketMap = defaultdict(set)
    _evaluate = evaluate
    for w in words:
        out[_evaluate(w, guess).pattern].add(w)
    return dict(out)


def bucket_sizes(guess: str, words: Iterable[str] | WordSet) -> List[int]:
    """
    Bucket sizes only (no word sets), sorted ascending.

    Accepts a plain iterable so process-pool workers can be handed a tuple.
    """
    if isinstance(words, WordSet):
        guess = _check(guess, words)
    counts: Dict[ResponsePattern, int] = defaultdict(int)
    _evaluate = evaluate
    for w in words:
        counts[_evaluate(w, guess).pattern] += 1
    return sorted(counts.values())
