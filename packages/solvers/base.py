from __future__ import annotations
import random
from typing import Dict, Type

from packages.engine import WordSet

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A guessing policy for one game at a time.

    The harness calls reset() before every game and then next_guess(state)
    once per turn, where `state` holds:
      - "turn":       1-based turn number
      - "words":      WordSet still consistent with all feedback
      - "dictionary": the full WordSet of valid guesses
      - "history":    list of Responses so far
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, workers: int = 1):
        self.workers = workers
        self.dictionary: WordSet | None = None
        self.rng = random.Random()

    def reset(self, *, dictionary: WordSet, seed: int | None = None) -> None:
        self.dictionary = dictionary
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
