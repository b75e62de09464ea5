"""
Minimise Column Lengths.

For each guess g among the CURRENT words, bucket the words by feedback and
measure each bucket by its "column length": the number of distinct letters at
each position, summed over positions. Pick g minimizing the expected column
length after the feedback. Fewer distinct letters per position means fewer
guesses to pin each position down.
"""

from __future__ import annotations

from .base import BaseSolver, register
from .selection import Strategy, select


@register
class ColumnLengthsSolver(BaseSolver):
    id = "column_lengths"
    name = "Minimise Column Lengths"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        return select(state["words"], None, Strategy.COLUMN_LENGTHS, workers=self.workers)
