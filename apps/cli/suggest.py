# apps/cli/suggest.py
"""
Suggest the next guess for a game in progress.

Feedback is given as word=SYMBOLS pairs using G (right place), A (elsewhere),
R (absent) and X (excess occurrence), e.g.

    python -m apps.cli.suggest --dictionary data/dictionary_5.txt raise=AARGG

The pairs are folded into one ConstraintFilter, the dictionary is pruned, and
the best candidates under the chosen strategy are printed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import load_wordset
from packages.engine import ConstraintFilter, EmptyPoolError, Response, validate_guess
from packages.solvers import Strategy, default_workers, rank, select

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordgame-ai — suggest the next guess")
    ap.add_argument("feedback", nargs="*", help="guess=SYMBOLS pairs, e.g. raise=AARGG")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dictionary", default="data/dictionary_5.txt")
    ap.add_argument("--strategy", choices=[s.value for s in Strategy],
                    default=Strategy.MAX_ENTROPY.value)
    ap.add_argument("--full-pool", action="store_true",
                    help="consider every dictionary word as a guess, not only remaining ones")
    ap.add_argument("--top", type=int, default=5, help="how many ranked candidates to show")
    ap.add_argument("--workers", type=int, default=default_workers())
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def parse_feedback(item: str) -> Response:
    word, sep, symbols = item.partition("=")
    if not sep:
        raise ValueError(f"expected guess=SYMBOLS, got {item!r}")
    return Response.parse(word, symbols)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    dictionary = load_wordset(args.dictionary, args.N)
    responses = [parse_feedback(item) for item in args.feedback]
    constraints = ConstraintFilter(args.N)
    for r in responses:
        if not validate_guess(r.word, dictionary):
            log.warning("%r is not in the dictionary; using its feedback anyway", r.word)
        constraints.update(r)
    words = constraints.apply(dictionary)
    guessed = [r.word for r in responses]

    print(f"{len(words)} of {len(dictionary)} words remain")
    if len(words) <= 10:
        print("  " + " ".join(words))

    pool = dictionary if args.full_pool else None
    try:
        if len(words) > 1:
            ranked = rank(words, pool, args.strategy, exclude=guessed, workers=args.workers)
            best = ranked[0][0]
            for w, s in ranked[: args.top]:
                print(f"  {w}  {s:.4f}")
        else:
            best = select(words, pool, args.strategy, exclude=guessed)
    except EmptyPoolError as e:
        log.warning("%s", e)
        print("No candidates left: the feedback is contradictory.", file=sys.stderr)
        return 1

    print(f"suggestion: {best}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
