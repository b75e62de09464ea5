"""
Experiment harness core primitives.

- play_game: drive one solver through one WordGame until it wins or runs out
             of attempts.
- run_case:  set up a game for one hidden answer and play it.
- run_batch: run many answers in sequence with an optional progress bar.
- summarize: aggregate a batch into win rate and guess-count statistics.

Each game owns its own ConstraintFilter; nothing is shared between games
except the (immutable) dictionary. These functions are UI-agnostic so they
can be reused by a CLI app, a notebook, or a service without changes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import numpy as np
from tqdm import tqdm

from packages.engine import ConstraintFilter, EmptyPoolError, Response, WordSet
from .game import GameConfig, WordGame

log = logging.getLogger(__name__)


@dataclass
class GameResult:
    answer: str
    solver_id: str
    success: bool
    guesses: int
    time_ms: float
    history: List[Response] = field(default_factory=list)
    remaining: List[int] = field(default_factory=list)  # word-set size after each turn

    def to_dict(self) -> Dict:
        return {
            "answer": self.answer,
            "solver_id": self.solver_id,
            "success": self.success,
            "guesses": self.guesses,
            "time_ms": round(self.time_ms, 3),
            "history": [(r.word, str(r)) for r in self.history],
            "remaining": list(self.remaining),
        }


def play_game(solver, game: WordGame, *, seed: int | None = None) -> GameResult:
    """
    Play `game` (target already set) with `solver`.

    The filter is re-applied to the FULL dictionary after every response; it
    accumulates all constraints, so the result equals filtering step by step.
    An EmptyPoolError from the solver ends the game as a loss.
    """
    dictionary = game.dictionary
    solver.reset(dictionary=dictionary, seed=seed)
    constraints = ConstraintFilter(dictionary.word_length)
    words = dictionary
    remaining: List[int] = []

    t0 = time.perf_counter()
    for turn in range(1, game.config.max_attempts + 1):
        state = {
            "turn": turn,
            "words": words,
            "dictionary": dictionary,
            "history": list(game.history),
        }
        try:
            guess = solver.next_guess(state)
        except EmptyPoolError as e:
            log.warning("%s gave up on %r at turn %d: %s", solver.id, game.target, turn, e)
            break

        response = game.guess(guess)
        constraints.update(response)
        words = constraints.apply(dictionary)
        remaining.append(len(words))
        log.debug("turn %d: %s %s -> %d words left", turn, response.word, response, len(words))

        if response.is_winner:
            break

    return GameResult(
        answer=game.target or "",
        solver_id=solver.id,
        success=game.solved,
        guesses=game.attempts,
        time_ms=(time.perf_counter() - t0) * 1000.0,
        history=list(game.history),
        remaining=remaining,
    )


def run_case(solver, answer: str, *, dictionary: WordSet, config: GameConfig | None = None,
             seed: int | None = None) -> GameResult:
    game = WordGame(dictionary, config)
    game.set_target(answer)
    return play_game(solver, game, seed=seed)


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        dictionary: WordSet,
        config: GameConfig | None = None,
        seed: int | None = None,
        sample: int | None = None,
        progress: bool = False,
) -> List[GameResult]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc=solver.id, unit="game") if progress else pool
    out: List[GameResult] = []
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, dictionary=dictionary, config=config, seed=case_seed))
    return out


def summarize(results: List[GameResult]) -> Dict:
    """
    Aggregate statistics for a batch:
      games, wins, win_rate, mean_guesses / max_guesses (over wins),
      mean_time_ms, histogram (index k = number of wins in k guesses).
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": None,
                "max_guesses": None, "mean_time_ms": 0.0, "histogram": []}

    success = np.array([r.success for r in results], dtype=bool)
    guesses = np.array([r.guesses for r in results], dtype=np.int64)
    times = np.array([r.time_ms for r in results], dtype=np.float64)
    won = guesses[success]

    return {
        "games": int(len(results)),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else None,
        "max_guesses": int(won.max()) if won.size else None,
        "mean_time_ms": float(times.mean()),
        "histogram": np.bincount(won).tolist() if won.size else [],
    }
