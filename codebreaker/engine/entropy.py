"""
Expected information gain of a guess.

For a guess g and candidate set R, partition R by feedback and compute

    H(g) = sum over nonempty buckets of -p * log2(p),   p = |bucket| / |R|

Maximising H is the usual greedy information-gain heuristic. H is 0 when
|R| <= 1 or when every candidate lands in the same bucket.

The partition is returned along with H so the caller can narrow the set
without partitioning a second time.
"""

from math import log2
from typing import Iterable, NamedTuple, Sequence

from .candidate import Candidate
from .partition import Partition, partition


class GuessScore(NamedTuple):
    entropy: float
    partition: Partition


def entropy_from_sizes(sizes: Iterable[int]) -> float:
    """Shannon entropy (bits) of the distribution given by bucket sizes."""
    sizes = [s for s in sizes if s > 0]
    n = sum(sizes)
    if n <= 1 or len(sizes) <= 1:
        return 0.0
    H = 0.0
    for c in sizes:
        p = c / n
        H += p * log2(1 / p)   # == -p*log2(p)
    return H


def score(guess: Candidate, remaining: Sequence[Candidate]) -> GuessScore:
    buckets = partition(guess, remaining)
    return GuessScore(entropy_from_sizes(len(b) for b in buckets.values()), buckets)
