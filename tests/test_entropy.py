from math import isclose, log2

import pytest

from codebreaker.engine import Candidate, ProblemSpace, entropy_from_sizes, partition, score

C = Candidate.from_string


def test_partition_covers_remaining_once():
    space = ProblemSpace(3)
    remaining = list(space)[::3]
    for g in (space[0], space[21], space[63]):
        buckets = partition(g, remaining)
        assert sum(len(b) for b in buckets.values()) == len(remaining)
        members = [c for b in buckets.values() for c in b]
        assert sorted(members, key=space.index_of) == remaining
        assert all(0 <= k <= 3 for k in buckets)
        assert all(buckets.values())


def test_partition_keeps_input_order():
    remaining = [C("yy"), C("ry"), C("rr")]
    assert partition(C("rr"), remaining) == {0: [C("yy")], 1: [C("ry")], 2: [C("rr")]}


@pytest.mark.parametrize("remaining", [[], ["rg"]])
def test_entropy_zero_for_tiny_sets(remaining):
    s = score(C("rr"), [C(w) for w in remaining])
    assert s.entropy == 0.0


def test_even_split_beats_single_bucket():
    remaining = [C("r"), C("g")]
    even = score(C("r"), remaining)
    flat = score(C("b"), remaining)
    assert isclose(even.entropy, 1.0)
    assert flat.entropy == 0.0
    assert even.entropy > flat.entropy
    assert flat.partition == {0: remaining}


def test_entropy_is_probability_weighted():
    # buckets 1, 2, 1 out of 4 -> 1.5 bits
    remaining = [C(w) for w in ["rr", "rg", "gr", "gg"]]
    s = score(C("rr"), remaining)
    assert isclose(s.entropy, 1.5)
    assert isclose(entropy_from_sizes([1, 3]), -(0.25 * log2(0.25) + 0.75 * log2(0.75)))
    assert entropy_from_sizes([5]) == 0.0
    assert entropy_from_sizes([0, 4, 0]) == 0.0
