from __future__ import annotations

import logging
from typing import Dict, NamedTuple, Sequence, Tuple, Type

import numpy as np

from codebreaker.config import ENTROPY_TOLERANCE
from codebreaker.engine import Candidate, ProblemSpace
from codebreaker.engine.partition import Partition

log = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class Choice(NamedTuple):
    """A selected guess together with the partition it induces."""
    guess: Candidate
    index: int          # enumeration index in the problem space
    entropy: float
    partition: Partition


def select_best(entropies: Sequence[float], tol: float = ENTROPY_TOLERANCE) -> int:
    """
    Deterministic arg-max: the lowest index whose entropy is within `tol`
    of the maximum. `entropies[i]` must belong to the guess with
    enumeration index i; the result does not depend on the order in which
    the scores were produced.
    """
    h = np.asarray(entropies, dtype=float)
    if h.size == 0:
        raise ValueError("no guesses to choose from")
    return int(np.flatnonzero(h >= h.max() - tol)[0])


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.space: ProblemSpace | None = None
        self.tolerance: float = ENTROPY_TOLERANCE
        # remaining-set indices -> Choice; the choice depends on nothing else
        self._memo: Dict[Tuple[int, ...], Choice] = {}

    def reset(self, *, space: ProblemSpace) -> None:
        if space is not self.space:
            self._memo = {}
        self.space = space

    def choose(self, remaining: Sequence[Candidate]) -> Choice:
        """Pick the next guess for the given remaining-candidate set."""
        if self.space is None:
            raise RuntimeError(f"{type(self).__name__}.reset(space=...) was not called")
        if not remaining:
            raise ValueError("remaining-candidate set is empty")

        key = tuple(self.space.index_of(c) for c in remaining)
        hit = self._memo.get(key)
        if hit is None:
            hit = self._choose(remaining)
            self._memo[key] = hit
            log.debug("%s: |R|=%d -> %s (H=%.4f)", self.id, len(remaining), hit.guess, hit.entropy)
        return hit

    def _choose(self, remaining: Sequence[Candidate]) -> Choice:
        raise NotImplementedError("Override in subclass")
