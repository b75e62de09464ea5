# apps/cli/run.py
"""
CLI entry point for running solver experiments.

This script:
  1) Validates the word lists (prints counts + SHA, checks targets ⊆ dictionary).
  2) Loads them as WordSets and instantiates the requested solver.
  3) Plays a batch of games with a progress bar and prints a summary
     (win rate, mean guesses, guess-count histogram).
"""

from __future__ import annotations

import argparse
import json
import logging
import random

from packages.datasets import load_wordset, pretty_summary, validate_wordlists
from packages.harness import GameConfig, run_batch, summarize
from packages.solvers import create_solver, default_workers, get_solver_ids

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())
    ap = argparse.ArgumentParser(description="wordgame-ai — run solver experiments")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length (4..7 by default)")
    ap.add_argument("--dictionary", default="data/dictionary_5.txt",
                    help="path to the dictionary (all valid guesses)")
    ap.add_argument("--targets",
                    help="path to the target words (defaults to the dictionary)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-attempts", type=int, default=6, help="guesses allowed per game")
    ap.add_argument("--workers", type=int, default=default_workers(),
                    help="processes used to score candidate guesses (default: CPUs - 1)")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("--json", action="store_true", help="print the summary as JSON")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = GameConfig(word_length=args.N, max_attempts=args.max_attempts,
                        workers=args.workers).validate()

    # 1) Validate lists and print a one-liner summary
    rep = validate_wordlists(args.N, args.dictionary, args.targets)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    # 2) Load lists
    dictionary = load_wordset(args.dictionary, args.N)
    targets = load_wordset(args.targets, args.N) if args.targets else dictionary
    answers = [w for w in targets if w in dictionary]
    if not answers:
        raise SystemExit("No playable target words.")

    # 3) Deterministic sample of cases
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        rng.shuffle(answers)
        answers = answers[: args.sample]

    solver = create_solver(args.solver, workers=config.workers)
    results = run_batch(solver, answers, dictionary=dictionary, config=config,
                        seed=args.seed, progress=args.progress == "bar")

    summary = summarize(results)
    summary["solver_id"] = solver.id
    if args.json:
        print(json.dumps(summary, indent=2))
        return

    print(f"solver={solver.id} games={summary['games']} wins={summary['wins']} "
          f"win_rate={summary['win_rate']:.3f}")
    if summary["mean_guesses"] is not None:
        print(f"mean_guesses={summary['mean_guesses']:.3f} max_guesses={summary['max_guesses']} "
              f"mean_time_ms={summary['mean_time_ms']:.1f}")
        for k, n in enumerate(summary["histogram"]):
            if n:
                print(f"  {k}: {n}")
    for r in results:
        if not r.success:
            log.info("lost %r: %s", r.answer, " ".join(f"{x.word}:{x}" for x in r.history))


if __name__ == "__main__":
    main()
