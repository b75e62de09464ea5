"""
Lightweight guess validation.

Answers "is this guess acceptable against this dictionary?":
  - it is a string
  - it is alphabetic a–z only (case-insensitive)
  - it has the dictionary's word length
  - it is a member of the dictionary

WordGame.guess raises a specific error for each failed check; this is the
boolean form used where a caller only needs yes/no (e.g. the feedback words
given to apps.cli.suggest).
"""

from __future__ import annotations

from .words import WordSet, is_valid_token, normalize


def validate_guess(word: object, dictionary: WordSet) -> bool:
    if not isinstance(word, str):
        return False

    w = normalize(word)

    # Shape/characters check
    if len(w) != dictionary.word_length or not is_valid_token(w):
        return False

    return w in dictionary
