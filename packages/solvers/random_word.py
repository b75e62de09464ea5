"""
Random solver.

Strategy:
  - Choose uniformly at random from the CURRENT word set (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Baseline to verify the pipeline; it makes no attempt to gain information.
  - An empty word set raises EmptyPoolError (via WordSet.random_word).
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class RandomSolver(BaseSolver):
    id = "random"
    name = "Random"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        return state["words"].random_word(self.rng)
