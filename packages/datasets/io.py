from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from packages.engine import WordSet
from packages.engine.words import is_valid_token, normalize

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_wordset(p: Path | str, N: int) -> WordSet:
    """
    Load a newline-separated word list as a WordSet of length-N words.

    Lines are normalized to lowercase; blanks, non a–z tokens and words of
    other lengths are dropped (use validate_wordlists to see them).
    """
    kept, dropped = [], 0
    for ln in read_lines(p):
        w = normalize(ln)
        if not w:
            continue
        if len(w) == N and is_valid_token(w):
            kept.append(w)
        else:
            dropped += 1
    if dropped:
        log.info("%s: dropped %d line(s) that are not %d-letter words", p, dropped, N)
    return WordSet(kept, N)
