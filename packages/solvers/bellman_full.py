"""
Bellman over the full dictionary.

Same objective as bellman_optimal (minimize expected remaining words), but the
guess pool is the whole dictionary:
  - words already guessed this game are never offered again;
  - while more than one word remains, the remaining words themselves are left
    out of the pool, so every guess is a pure probe (unless the dictionary
    has nothing else to offer);
  - once a single word remains it is played.

Keeps per-game state (the guessed words), cleared by reset().
"""

from __future__ import annotations

import logging
from typing import Set

from packages.engine import EmptyPoolError, WordSet
from .base import BaseSolver, register
from .selection import Strategy, select

log = logging.getLogger(__name__)


@register
class BellmanFullDictionarySolver(BaseSolver):
    id = "bellman_full"
    name = "Bellman Full Dictionary"
    version = "1.0.0"

    def __init__(self, workers: int = 1):
        super().__init__(workers)
        self.guessed: Set[str] = set()

    def reset(self, *, dictionary: WordSet, seed: int | None = None) -> None:
        super().reset(dictionary=dictionary, seed=seed)
        if self.guessed:
            log.info("reset: cleared %d guessed words", len(self.guessed))
        self.guessed.clear()

    def next_guess(self, state: dict) -> str:
        words: WordSet = state["words"]
        dictionary: WordSet = state["dictionary"]

        if len(words) == 1:
            final = words.as_tuple()[0]
            if final in self.guessed:
                log.warning("final word %r was already guessed", final)
            self.guessed.add(final)
            return final

        # probe outside the remaining words while more than one is left;
        # when the dictionary has no such word, fall back to the remaining ones
        probes = [w for w in dictionary if w not in words and w not in self.guessed]
        pool = probes or [w for w in words if w not in self.guessed]
        if not probes:
            log.debug("no probe words left, choosing among %d remaining", len(words))

        try:
            guess = select(words, pool, Strategy.EXPECTED_LEFT, workers=self.workers)
        except EmptyPoolError as e:
            raise EmptyPoolError(
                f"no candidate guesses left: dictionary={len(dictionary)}, "
                f"remaining={len(words)}, guessed={len(self.guessed)}",
                remaining=len(words), pool=0) from e

        self.guessed.add(guess)
        return guess
