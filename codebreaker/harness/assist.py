"""
Assist mode: suggest guesses from feedback a human reports, without the
secret being known.

suggest_next_guess is the non-interactive core and is usable today.
The interactive prompt loop is not implemented; run_interactive raises
AssistNotImplemented so callers can tell "unavailable" apart from
"nothing to suggest".
"""

from __future__ import annotations

from typing import Iterable, Tuple

from codebreaker import config
from codebreaker.engine import Candidate, ProblemSpace, filter_candidates
from codebreaker.solvers import Choice, create_solver


class AssistNotImplemented(NotImplementedError):
    """Interactive assist mode is not available."""


class InconsistentFeedback(ValueError):
    """No candidate agrees with every reported (guess, feedback) pair."""


def suggest_next_guess(
        space: ProblemSpace,
        history: Iterable[Tuple[Candidate, int]],
        solver_id: str = config.DEFAULT_SOLVER,
) -> Tuple[Choice, list]:
    """
    Return (choice, remaining) for the next round.

    `remaining` is the list of candidates consistent with `history`. When
    only one is left, the choice is that candidate itself with entropy 0.
    """
    history = list(history)
    for g, fb in history:
        if len(g) != space.length or not 0 <= fb <= space.length:
            raise ValueError(f"bad history entry ({g}, {fb}) for length {space.length}")

    remaining = filter_candidates(space, history)
    if not remaining:
        raise InconsistentFeedback(f"no candidate matches the {len(history)} reported rounds")
    if len(remaining) == 1:
        only = remaining[0]
        return Choice(only, space.index_of(only), 0.0, {space.length: remaining}), remaining

    solver = create_solver(solver_id)
    solver.reset(space=space)
    return solver.choose(remaining), remaining


def run_interactive(space: ProblemSpace) -> None:
    """
    Prompt loop: show suggest_next_guess for `space`, read the feedback a
    human reports, repeat until one candidate is left. Not implemented.
    """
    raise AssistNotImplemented("interactive assist mode is not implemented")
