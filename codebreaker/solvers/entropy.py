"""
Entropy Solver (expected information gain), reference version.

  - For each guess g in the WHOLE problem space (not just the remaining
    candidates), partition the remaining set by feedback and compute the
    Shannon entropy of the bucket sizes.
  - Pick the maximum; ties (within tolerance) go to the lowest
    enumeration index.
  - Hand back the winner's partition so the caller narrows the set
    without a second pass.

Pure Python; see entropy_np for the vectorised equivalent.
"""

from __future__ import annotations

from typing import List, Sequence

from .base import BaseSolver, Choice, register, select_best
from codebreaker.engine import Candidate, GuessScore, score


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def _choose(self, remaining: Sequence[Candidate]) -> Choice:
        remaining = list(remaining)
        scores: List[GuessScore] = [score(g, remaining) for g in self.space]
        best = select_best([s.entropy for s in scores], self.tolerance)
        return Choice(self.space[best], best, scores[best].entropy, scores[best].partition)
