"""
Choose the next guess from the bucket statistics of every candidate.

The strategy set is closed, so it is an enum dispatched here rather than a
plugin mechanism. `select` is pure: the stateful solvers in this package
decide which words go into `words` (the targets still possible) and `pool`
(the guesses worth trying, possibly the whole dictionary) and then call it.

Tie-break:
  candidates are scored in lexicographic order and the first best one wins,
  i.e. the lexicographically smallest of the equally good guesses. Parallel
  scoring returns scores in that same order, so the answer does not depend on
  `workers`.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from enum import Enum
from functools import partial
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from packages.engine import EmptyPoolError, LengthMismatchError, WordSet
from packages.engine.words import normalize
from .metrics import entropy_of_guess, expected_column_length, expected_remaining

log = logging.getLogger(__name__)

Metric = Callable[[str, Sequence[str]], float]

# Below this many candidates a process pool costs more than it saves.
PARALLEL_MIN_CANDIDATES = 64
CHUNKS_PER_WORKER = 4


class Strategy(Enum):
    MAX_ENTROPY = "entropy"
    EXPECTED_LEFT = "expected_left"
    COLUMN_LENGTHS = "column_lengths"


# strategy -> (metric, higher_is_better)
_METRICS: Dict[Strategy, Tuple[Metric, bool]] = {
    Strategy.MAX_ENTROPY: (entropy_of_guess, True),
    Strategy.EXPECTED_LEFT: (expected_remaining, False),
    Strategy.COLUMN_LENGTHS: (expected_column_length, False),
}


def default_workers() -> int:
    return max(1, (os.cpu_count() or 1) - 1)


def score_candidates(candidates: Sequence[str], words: Sequence[str], metric: Metric,
                     workers: int = 1) -> List[float]:
    """Score every candidate against `words`; result order matches `candidates`."""
    if workers <= 1 or len(candidates) < PARALLEL_MIN_CANDIDATES:
        return [metric(g, words) for g in candidates]

    chunksize = max(1, len(candidates) // (workers * CHUNKS_PER_WORKER))
    log.debug("scoring %d candidates on %d workers (chunksize=%d)",
              len(candidates), workers, chunksize)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(partial(metric, words=words), candidates, chunksize=chunksize))


def _candidate_list(words: WordSet, pool: Iterable[str] | None, exclude: Iterable[str]) -> List[str]:
    source = words if pool is None else pool
    skip = {normalize(w) for w in exclude}
    out = set()
    for raw in source:
        w = normalize(raw)
        if len(w) != words.word_length:
            raise LengthMismatchError(words.word_length, len(w), w)
        if w not in skip:
            out.add(w)
    return sorted(out)


def rank(words: WordSet, pool: Iterable[str] | None = None,
         strategy: Strategy | str = Strategy.MAX_ENTROPY, *,
         exclude: Iterable[str] = (), workers: int = 1) -> List[Tuple[str, float]]:
    """
    All candidates with their scores, best first (ties in lexicographic order).

    With a single word left that word is the only entry, scored 0.0, as
    `select` would return it.
    """
    strategy = Strategy(strategy)
    if len(words) == 1:
        return [(words.as_tuple()[0], 0.0)]
    if len(words) == 0:
        raise EmptyPoolError("no words remain to score against", remaining=0)
    candidates = _candidate_list(words, pool, exclude)
    if not candidates:
        raise EmptyPoolError("candidate pool is empty", remaining=len(words), pool=0)

    metric, maximize = _METRICS[strategy]
    scores = score_candidates(candidates, words.as_tuple(), metric, workers)
    ranked = list(zip(candidates, scores))
    # stable sort keeps lexicographic order among equal scores
    ranked.sort(key=lambda t: t[1], reverse=maximize)
    return ranked


def select(words: WordSet, pool: Iterable[str] | None = None,
           strategy: Strategy | str = Strategy.MAX_ENTROPY, *,
           exclude: Iterable[str] = (), workers: int = 1) -> str:
    """
    Pick the best next guess.

    Args:
      words    : WordSet of words that could still be the secret
      pool     : words to consider as guesses (defaults to `words`); may be
                 wider, e.g. the full dictionary
      strategy : Strategy (or its value string)
      exclude  : words never to return (e.g. already guessed)
      workers  : >1 scores candidates in a process pool

    Raises:
      EmptyPoolError if nothing remains to guess.
    """
    strategy = Strategy(strategy)
    if len(words) == 1:
        # nothing to learn; no buckets needed
        return words.as_tuple()[0]
    if len(words) == 0:
        raise EmptyPoolError("no words remain; feedback is contradictory", remaining=0)

    candidates = _candidate_list(words, pool, exclude)
    if not candidates:
        raise EmptyPoolError("candidate pool is empty", remaining=len(words), pool=0)

    metric, maximize = _METRICS[strategy]
    scores = score_candidates(candidates, words.as_tuple(), metric, workers)

    best_word, best_score = candidates[0], scores[0]
    for w, s in zip(candidates[1:], scores[1:]):
        if (s > best_score) if maximize else (s < best_score):
            best_word, best_score = w, s

    log.debug("%s picked %r (score=%.4f) from %d candidates over %d words",
              strategy.value, best_word, best_score, len(candidates), len(words))
    return best_word
