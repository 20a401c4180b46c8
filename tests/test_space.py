import numpy as np
import pytest

from codebreaker.engine import (
    Candidate, InvariantViolation, ProblemSpace, feedback, generate_problem_space,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_space_size_and_lengths(n):
    cands = generate_problem_space(n)
    assert len(cands) == 4 ** n
    assert all(len(c) == n for c in cands)
    assert len(set(cands)) == len(cands)


def test_enumeration_order():
    space = ProblemSpace(2)
    assert [str(c) for c in space][:5] == ["rr", "rg", "rb", "ry", "gr"]
    assert str(space[-1]) == "yy"
    assert space.index_of(Candidate.from_string("gb")) == 6


@pytest.mark.parametrize("n", [0, 7, -1])
def test_unsupported_length(n):
    with pytest.raises(ValueError):
        ProblemSpace(n)


def test_index_of_foreign_candidate():
    with pytest.raises(ValueError):
        ProblemSpace(2).index_of(Candidate.from_string("rgb"))


def test_feedback_matrix_matches_feedback():
    space = ProblemSpace(3)
    m = space.feedback_matrix
    assert m.shape == (64, 64)
    assert np.array_equal(m, m.T)
    assert (np.diag(m) == 3).all()
    for i in (0, 5, 17, 63):
        for j in range(len(space)):
            assert m[i, j] == feedback(space[i], space[j])
    assert space.feedback_matrix is m


@pytest.mark.parametrize("n", [2.7, "3", True, None])
def test_non_int_length(n):
    with pytest.raises(ValueError):
        ProblemSpace(n)


class _MiscountedAlphabet(tuple):
    def __len__(self):
        return tuple.__len__(self) - 1


def test_enumeration_check_is_fatal(monkeypatch):
    import codebreaker.engine.space as space_mod
    monkeypatch.setattr(space_mod, "ALPHABET", _MiscountedAlphabet(space_mod.ALPHABET))
    with pytest.raises(InvariantViolation):
        generate_problem_space(2)
