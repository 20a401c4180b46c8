"""
Experiment harness core primitives.

- run_case:  solve one secret with a given solver, recording every round.
- run_batch: solve every secret of the problem space, sequentially or
             across a multiprocessing pool.
- summarize: reduce batch results to average and worst case.

The solve loop is the only place the secret is consulted: the solver sees
the remaining-candidate set, the harness computes the real feedback and
keeps the matching bucket of the partition the solver already built.

These functions are UI-agnostic; the CLI layers printing and progress on
top through the `on_round` / `on_result` callbacks.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from codebreaker.engine import Candidate, InvariantViolation, ProblemSpace, feedback
from codebreaker.solvers import BaseSolver, Choice, create_solver

log = logging.getLogger(__name__)

RoundCallback = Callable[[int, Choice, int, Sequence[Candidate]], None]
ResultCallback = Callable[[int, Dict], None]


class SolverStalled(InvariantViolation):
    """A chosen guess could not split a remaining set of two or more."""


def run_case(
        solver: BaseSolver,
        secret: Candidate,
        *,
        space: ProblemSpace,
        on_round: Optional[RoundCallback] = None,
) -> Dict:
    """
    Narrow the full problem space down to `secret`.

    Args:
        solver:   a BaseSolver; reset() is called here
        secret:   the hidden candidate (must belong to `space`)
        space:    problem space used both as guess pool and initial candidates
        on_round: optional callback(round_no, choice, feedback, remaining)

    Returns:
        dict with keys:
            secret, solution (sole remaining candidate), guesses (int),
            history (list[(guess, feedback, remaining_size)]), time_ms (float)
    """
    if secret not in space:
        raise ValueError(f"secret {secret} is not in the length-{space.length} problem space")

    solver.reset(space=space)
    remaining: Sequence[Candidate] = space.candidates
    history: List[tuple] = []

    t0 = time.perf_counter()
    while len(remaining) > 1:
        choice = solver.choose(remaining)
        if choice.entropy <= solver.tolerance:
            raise SolverStalled(f"guess {choice.guess} cannot split {len(remaining)} candidates")

        fb = feedback(choice.guess, secret)
        remaining = choice.partition[fb]
        history.append((choice.guess, fb, len(remaining)))

        if on_round is not None:
            on_round(len(history), choice, fb, remaining)

    # The secret always lands in the kept bucket, so it is what is left.
    solution = remaining[0]
    if solution != secret:
        raise InvariantViolation(f"solved to {solution}, expected {secret}")

    return {
        "secret": secret,
        "solution": solution,
        "guesses": len(history),
        "history": history,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
    }


# ---- multiprocessing workers ----
# Each worker builds its own space and solver once (pool initializer) and
# keeps the solver's choice cache across the secrets it is handed.
_WORKER: Dict[str, object] = {}


def _init_worker(solver_id: str, length: int) -> None:
    _WORKER["space"] = ProblemSpace(length)
    _WORKER["solver"] = create_solver(solver_id)


def _worker_case(index: int) -> Dict:
    space: ProblemSpace = _WORKER["space"]
    solver: BaseSolver = _WORKER["solver"]
    r = run_case(solver, space[index], space=space)
    r["index"] = index
    r["solver_id"] = solver.id
    return r


def run_batch(
        solver_id: str,
        space: ProblemSpace,
        *,
        workers: int = 1,
        on_result: Optional[ResultCallback] = None,
) -> List[Dict]:
    """
    Run every secret of `space` and return results in enumeration order.

    With workers > 1 the secrets are spread over a process pool; results
    arrive in completion order (on_result sees them that way) but are
    sorted back by enumeration index before returning.
    """
    workers = max(1, int(workers))
    out: List[Dict] = []

    if workers == 1:
        solver = create_solver(solver_id)
        for idx, secret in enumerate(space):
            r = run_case(solver, secret, space=space)
            r["index"] = idx
            r["solver_id"] = solver.id
            out.append(r)
            if on_result is not None:
                on_result(idx, r)
        return out

    start_methods = mp.get_all_start_methods()
    ctx = mp.get_context("fork" if "fork" in start_methods else "spawn")
    chunk = max(1, len(space) // (workers * 8))
    log.info("batch: %d secrets on %d workers (chunk %d)", len(space), workers, chunk)

    with ctx.Pool(processes=workers, initializer=_init_worker,
                  initargs=(solver_id, space.length)) as pool:
        for r in pool.imap_unordered(_worker_case, range(len(space)), chunksize=chunk):
            out.append(r)
            if on_result is not None:
                on_result(r["index"], r)

    out.sort(key=lambda r: r["index"])
    return out


@dataclass
class BatchSummary:
    num_cases: int
    average: float
    worst_secret: Candidate
    worst_guesses: int
    distribution: Dict[int, int] = field(default_factory=dict)  # guesses -> #secrets


def summarize(results: List[Dict]) -> BatchSummary:
    """
    Average guess count and the worst case. Ties for the worst case go to
    the secret with the lowest enumeration index (results are expected in
    enumeration order, as run_batch returns them).
    """
    if not results:
        raise ValueError("cannot summarize an empty batch")

    ordered = sorted(results, key=lambda r: r.get("index", 0))
    worst = ordered[0]
    for r in ordered[1:]:
        if r["guesses"] > worst["guesses"]:
            worst = r

    counts = [r["guesses"] for r in ordered]
    return BatchSummary(
        num_cases=len(counts),
        average=sum(counts) / len(counts),
        worst_secret=worst["secret"],
        worst_guesses=worst["guesses"],
        distribution=dict(sorted(Counter(counts).items())),
    )
