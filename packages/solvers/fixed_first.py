"""
Fixed first word, then random.

Opens every game with the same word (a strong opener saves the most work on
the biggest word set), then plays a random consistent word. If the opener is
not in the dictionary the first guess is random as well.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class FixedFirstSolver(BaseSolver):
    id = "fixed_first"
    name = "Fixed First Word"
    version = "1.0.0"

    FIRST_WORD = "arose"

    def __init__(self, workers: int = 1, first_word: str | None = None):
        super().__init__(workers)
        self.first_word = (first_word or self.FIRST_WORD).lower()

    def next_guess(self, state: dict) -> str:
        if state["turn"] == 1 and self.first_word in state["dictionary"]:
            return self.first_word
        return state["words"].random_word(self.rng)
