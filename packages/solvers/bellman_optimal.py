"""
Bellman one-step optimal (Expected Remaining Words).

Idea:
  For guess g, if the CURRENT words partition into buckets of sizes {c_i},
  the expected number of words left after seeing the pattern is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Pick the g minimizing it. Only current words are tried as guesses, so
  every guess can still be the answer.

Tracks entropy closely but simpler to compute/compare.
"""

from __future__ import annotations

from .base import BaseSolver, register
from .selection import Strategy, select


@register
class BellmanOptimalSolver(BaseSolver):
    id = "bellman_optimal"
    name = "Bellman Optimal (Expected Remaining)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        return select(state["words"], None, Strategy.EXPECTED_LEFT, workers=self.workers)
