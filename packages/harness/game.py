"""
Game configuration and the game itself.

A WordGame holds one secret word and scores guesses against it, enforcing the
rules of the game:
  - a guess must have the secret's length
  - a guess must be in the dictionary
  - at most `max_attempts` guesses

It knows nothing about solvers; see core.play_game for the loop that drives
a solver through a game.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List

from packages.engine import (
    InvalidWordError,
    LengthMismatchError,
    MaxAttemptsError,
    Response,
    WordSet,
    evaluate,
)
from packages.engine.pattern import MAX_PATTERN_LENGTH
from packages.engine.words import normalize

log = logging.getLogger(__name__)


@dataclass
class GameConfig:
    word_length: int = 5
    max_attempts: int = 6
    min_word_length: int = 4
    max_word_length: int = 7
    workers: int = 1

    def validate(self) -> "GameConfig":
        if self.max_word_length > MAX_PATTERN_LENGTH:
            raise ValueError(f"max_word_length must be <= {MAX_PATTERN_LENGTH}")
        if not 1 <= self.min_word_length <= self.max_word_length:
            raise ValueError("need 1 <= min_word_length <= max_word_length")
        if not self.min_word_length <= self.word_length <= self.max_word_length:
            raise ValueError(
                f"word_length {self.word_length} outside "
                f"{self.min_word_length}..{self.max_word_length}")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        if self.workers < 1:
            raise ValueError("workers must be positive")
        return self


class WordGame:
    def __init__(self, dictionary: WordSet, config: GameConfig | None = None,
                 targets: WordSet | None = None):
        self.dictionary = dictionary
        self.targets = targets if targets is not None else dictionary
        self.config = config or GameConfig(word_length=dictionary.word_length)
        if self.config.word_length != dictionary.word_length:
            raise LengthMismatchError(self.config.word_length, dictionary.word_length)
        if self.targets.word_length != dictionary.word_length:
            raise LengthMismatchError(dictionary.word_length, self.targets.word_length)
        self._target: str | None = None
        self.history: List[Response] = []

    @property
    def target(self) -> str | None:
        return self._target

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1].is_winner

    def set_target(self, word: str) -> None:
        word = normalize(word)
        if word not in self.dictionary:
            raise InvalidWordError(f"invalid target word {word!r}: not in the dictionary")
        self._target = word
        self.history = []

    def set_random_target(self, rng: random.Random | None = None) -> str:
        word = self.targets.random_word(rng)
        log.info("the target word is %r", word)
        self.set_target(word)
        return word

    def guess(self, word: str) -> Response:
        if self._target is None:
            raise RuntimeError("no target word set")
        word = normalize(word)
        if len(word) != len(self._target):
            raise LengthMismatchError(len(self._target), len(word), word)
        if word not in self.dictionary:
            raise InvalidWordError(f"invalid word {word!r}: not in the dictionary")
        if self.attempts >= self.config.max_attempts:
            raise MaxAttemptsError(f"maximum number of attempts ({self.config.max_attempts}) reached")

        response = evaluate(self._target, word)
        self.history.append(response)
        return response

    def __str__(self) -> str:
        return f"The target word of {self._target} was guessed after {self.attempts} attempts"
