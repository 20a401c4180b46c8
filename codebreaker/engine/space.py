"""
The problem space: every candidate of a given length, in a fixed order.

Generation extends sequences one position at a time (Cartesian product of
the current set with the alphabet), so the resulting order is
lexicographic in ALPHABET order with the first position most significant.
That order is the "enumeration index" every tie-break refers to.

A ProblemSpace is built once per run and then only read. It is passed
explicitly to solvers and to the batch harness instead of living in a
module global.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from codebreaker.config import check_length
from .alphabet import ALPHABET, COLOR_INDEX, Color
from .candidate import Candidate

log = logging.getLogger(__name__)


class InvariantViolation(RuntimeError):
    """An enumeration or solver invariant failed; this is a logic bug."""


def generate_problem_space(length: int) -> List[Candidate]:
    """
    Enumerate all len(ALPHABET)**length candidates.

    Raises InvariantViolation if the generated sequences do not all have
    the requested length or the count is wrong.
    """
    n = check_length(length)

    seqs: List[Tuple[Color, ...]] = [(c,) for c in ALPHABET]
    for _ in range(n - 1):
        seqs = [s + (c,) for s in seqs for c in ALPHABET]

    mean_len = sum(len(s) for s in seqs) / len(seqs)
    if mean_len != n:
        raise InvariantViolation(f"average sequence length should equal {n}; got {mean_len}")
    if len(seqs) != len(ALPHABET) ** n:
        raise InvariantViolation(
            f"expected {len(ALPHABET) ** n} sequences of length {n}; got {len(seqs)}")

    return [Candidate(s) for s in seqs]


class ProblemSpace:
    """Immutable universe of candidates for one sequence length."""

    def __init__(self, length: int):
        self.length: int = check_length(length)
        self.candidates: Tuple[Candidate, ...] = tuple(generate_problem_space(self.length))
        self._index: Dict[Candidate, int] = {c: i for i, c in enumerate(self.candidates)}
        self._matrix: np.ndarray | None = None
        log.debug("problem space: length=%d size=%d", self.length, len(self.candidates))

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __getitem__(self, i: int) -> Candidate:
        return self.candidates[i]

    def __contains__(self, c: object) -> bool:
        return c in self._index

    def index_of(self, c: Candidate) -> int:
        try:
            return self._index[c]
        except KeyError as e:
            raise ValueError(f"{c} is not a length-{self.length} candidate") from e

    def indices_of(self, cands: Sequence[Candidate]) -> np.ndarray:
        return np.fromiter((self._index[c] for c in cands), dtype=np.int64, count=len(cands))

    def color_codes(self) -> np.ndarray:
        """(size, length) array of 1-based colour indices."""
        return np.array([[COLOR_INDEX[c] for c in cand] for cand in self.candidates],
                        dtype=np.int8)

    @property
    def feedback_matrix(self) -> np.ndarray:
        """
        M[i, j] == feedback(space[i], space[j]), built on first use.
        Symmetric, with `length` on the diagonal.
        """
        if self._matrix is None:
            codes = self.color_codes()
            m = np.zeros((len(codes), len(codes)), dtype=np.int8)
            # One column-position at a time keeps peak memory at size**2.
            for pos in range(self.length):
                col = codes[:, pos]
                m += (col[:, None] == col[None, :])
            m.setflags(write=False)
            self._matrix = m
            log.debug("feedback matrix built: %s", m.shape)
        return self._matrix
