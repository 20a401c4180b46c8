# apps/cli/run.py
"""
CLI entry point for the match-count colour game solver.

Modes (exactly one):
  --all     solve every secret of the problem space and report the average
            and worst-case number of guesses; optionally write a CSV and a
            JSON manifest under --outdir.
  --once    draw one random secret and solve it, printing every round.
  --assist  reserved for a human-in-the-loop mode; not implemented.

Candidates are printed in abbreviated form, one letter per position
(r=Red, g=Green, b=Blue, y=Yellow), e.g. "Worst Case: rbbyr | 7 tries".
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from codebreaker import config
from codebreaker.engine import Candidate, ProblemSpace, random_candidate
from codebreaker.harness import (
    AssistNotImplemented, run_batch, run_case, run_interactive, summarize,
)
from codebreaker.harness.io import (
    build_manifest, new_run_id, write_csv, write_manifest,
)
from codebreaker.solvers import Choice, create_solver, get_solver_ids

EXIT_UNAVAILABLE = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="codebreaker — entropy solver for the match-count colour game")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--all", action="store_true", help="evaluate every possible secret")
    mode.add_argument("--once", action="store_true", help="solve one random secret, verbosely")
    mode.add_argument("--assist", action="store_true", help="human-assist mode (not implemented)")

    ap.add_argument("--length", type=int, default=config.DEFAULT_LENGTH,
                    help=f"sequence length N ({config.MIN_LENGTH}..{config.MAX_LENGTH})")
    ap.add_argument("--solver", default=config.DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, default=None,
                    help="RNG seed for the --once secret (default: unseeded)")
    ap.add_argument("--workers", type=int, default=1, help="processes for --all")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="--all progress (auto=bar on a terminal, else one line per secret)."
    )
    ap.add_argument("--outdir", help="write run CSV + manifest here (--all only)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def _solve_all(args, space: ProblemSpace) -> None:
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    bar = tqdm(total=len(space), ncols=80, desc="Solving", unit="secret") if mode == "bar" else None

    def on_result(idx: int, r: dict) -> None:
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            print(f"Solving problem #{idx}")

    start = time.time()
    try:
        results = run_batch(args.solver, space, workers=args.workers, on_result=on_result)
    finally:
        if bar is not None:
            bar.close()
    elapsed = time.time() - start

    summary = summarize(results)
    print(f"Average: {summary.average}")
    print(f"Worst Case: {summary.worst_secret} | {summary.worst_guesses} tries")
    logging.getLogger(__name__).info("batch of %d finished in %.1fs", summary.num_cases, elapsed)

    if args.outdir:
        run_id = new_run_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_csv(results, str(csv_path), length=space.length)
        settings = {k: v for k, v in vars(args).items() if k not in ("all", "once", "assist")}
        write_manifest(build_manifest(run_id, summary, settings=settings, elapsed_s=elapsed),
                       str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


def _solve_once(args, space: ProblemSpace) -> None:
    secret = random_candidate(space.length, random.Random(args.seed))
    print(f"Secret: {secret}")

    def on_round(n: int, choice: Choice, fb: int, remaining: List[Candidate]) -> None:
        print(f"Guess #{n}: {choice.guess} | feedback {fb} | "
              f"{len(remaining)} left (H={choice.entropy:.3f} bits)")

    r = run_case(create_solver(args.solver), secret, space=space, on_round=on_round)
    print(f"Solved: {r['solution']} in {r['guesses']} guesses")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    if args.solver not in get_solver_ids():
        ap.error(f"unknown solver id: {args.solver}")
    try:
        config.check_length(args.length)
    except ValueError as e:
        ap.error(f"--length: {e}")
    if args.workers < 1:
        ap.error("--workers must be >= 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    space = ProblemSpace(args.length)

    if args.assist:
        try:
            run_interactive(space)
        except AssistNotImplemented as e:
            print(f"Assist mode unavailable: {e}", file=sys.stderr)
            return EXIT_UNAVAILABLE
    elif args.once:
        _solve_once(args, space)
    else:
        _solve_all(args, space)
    return 0


if __name__ == "__main__":
    sys.exit(main())
