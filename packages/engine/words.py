"""
WordSet: the dictionary abstraction the engine works on.

A WordSet is an immutable set of distinct lowercase a–z words that all share
one length. Besides membership it keeps a per-position index ("columns"):
for each position, which words carry a given letter there. Filtering never
mutates a WordSet; it builds a new one via `subset`.

Word lengths above the pattern codec's capacity are rejected here, at
construction time, so a search loop never meets them.
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple

from .errors import EmptyPoolError, InvalidWordError, LengthMismatchError, PatternOverflowError
from .pattern import MAX_PATTERN_LENGTH


def normalize(word: str) -> str:
    return word.strip().lower()


def is_valid_token(word: str) -> bool:
    return bool(word) and word.isascii() and word.isalpha()


class WordSet:
    __slots__ = ("_words", "_sorted", "_columns", "word_length")

    def __init__(self, words: Iterable[str], word_length: int | None = None):
        cleaned: Set[str] = set()
        for raw in words:
            w = normalize(raw)
            if not is_valid_token(w):
                raise InvalidWordError(f"invalid word {raw!r}: letters a-z only")
            if word_length is None:
                word_length = len(w)
            elif len(w) != word_length:
                raise LengthMismatchError(word_length, len(w), w)
            cleaned.add(w)

        if word_length is None:
            raise ValueError("word_length is required for an empty WordSet")
        if not 1 <= word_length <= MAX_PATTERN_LENGTH:
            raise PatternOverflowError(
                f"word length {word_length} outside supported range 1..{MAX_PATTERN_LENGTH}")

        self.word_length: int = word_length
        self._words: FrozenSet[str] = frozenset(cleaned)
        self._sorted: Tuple[str, ...] = tuple(sorted(cleaned))
        self._columns: List[Dict[str, FrozenSet[str]]] | None = None

    # ---- set protocol ----
    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize(word) in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordSet):
            return NotImplemented
        return self.word_length == other.word_length and self._words == other._words

    def __hash__(self) -> int:
        return hash((self.word_length, self._words))

    def __repr__(self) -> str:
        return f"WordSet(size={len(self)}, word_length={self.word_length})"

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def as_tuple(self) -> Tuple[str, ...]:
        """Words in lexicographic order."""
        return self._sorted

    def subset(self, words: Iterable[str]) -> "WordSet":
        return WordSet(words, self.word_length)

    # ---- column index ----
    def _index(self) -> List[Dict[str, FrozenSet[str]]]:
        if self._columns is None:
            cols: List[Dict[str, Set[str]]] = [defaultdict(set) for _ in range(self.word_length)]
            for w in self._sorted:
                for i, ch in enumerate(w):
                    cols[i][ch].add(w)
            self._columns = [{ch: frozenset(ws) for ch, ws in c.items()} for c in cols]
        return self._columns

    def words_with(self, letter: str, position: int) -> FrozenSet[str]:
        """Words that have `letter` at `position`."""
        return self._index()[position].get(letter.lower(), frozenset())

    def containing(self, letter: str) -> "WordSet":
        """Words that have `letter` at any position."""
        letter = letter.lower()
        hits: Set[str] = set()
        for col in self._index():
            hits |= col.get(letter, frozenset())
        return self.subset(hits)

    def letters(self) -> Set[str]:
        out: Set[str] = set()
        for col in self._index():
            out.update(col)
        return out

    def column_lengths(self) -> List[int]:
        """Number of distinct letters seen at each position."""
        return [len(col) for col in self._index()]

    # ---- random selection ----
    def random_word(self, rng: random.Random | None = None) -> str:
        if not self._sorted:
            raise EmptyPoolError("cannot pick a word from an empty WordSet", remaining=0)
        rng = rng or random
        return self._sorted[rng.randrange(len(self._sorted))]
