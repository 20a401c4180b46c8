"""
Group a candidate set by the feedback each member would give against one
guess.

Only feedback values that actually occur get a bucket. Within a bucket,
candidates keep the order they had in `remaining`, so a bucket taken from
an enumeration-ordered set is itself enumeration-ordered.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from .candidate import Candidate
from .scoring import feedback

Partition = Dict[int, List[Candidate]]


def partition(guess: Candidate, remaining: Iterable[Candidate]) -> Partition:
    buckets: Dict[int, List[Candidate]] = defaultdict(list)
    _feedback = feedback
    for c in remaining:
        buckets[_feedback(guess, c)].append(c)
    return dict(buckets)
