"""
Entropy Solver, vectorised with numpy.

Same choice rule as `entropy` (max entropy, lowest enumeration index on
ties) and therefore the same guess sequences, but every guess is scored
at once from the problem space's precomputed feedback matrix:

  sub[g, r]    = feedback(space[g], remaining[r])
  counts[g, k] = #{r : sub[g, r] == k}
  H[g]         = sum_k -p log2 p,  p = counts[g, k] / |R|

Only the winner's partition is materialised.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .base import BaseSolver, Choice, register, select_best
from codebreaker.engine import Candidate


def entropies_from_counts(counts: np.ndarray) -> np.ndarray:
    """Row-wise Shannon entropy (bits) of a (guesses, feedback values) count table."""
    n = counts.sum(axis=1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        p = counts / n
        terms = np.where(counts > 0, -p * np.log2(p), 0.0)
    return terms.sum(axis=1)


@register
class VectorEntropySolver(BaseSolver):
    id = "entropy_np"
    name = "Entropy (numpy)"
    version = "1.0.0"

    def _choose(self, remaining: Sequence[Candidate]) -> Choice:
        space = self.space
        idx = space.indices_of(remaining)
        sub = space.feedback_matrix[:, idx]

        counts = np.stack([(sub == k).sum(axis=1) for k in range(space.length + 1)], axis=1)
        H = entropies_from_counts(counts)
        best = select_best(H, self.tolerance)

        row = sub[best]
        buckets = {}
        for k in np.unique(row):
            buckets[int(k)] = [space[i] for i in idx[row == k]]
        return Choice(space[best], best, float(H[best]), buckets)
