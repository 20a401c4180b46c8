import pytest

from codebreaker import config
from codebreaker.engine import Candidate, ProblemSpace
from codebreaker.harness import run_batch, summarize


def test_batch_single_position():
    space = ProblemSpace(1)
    results = run_batch("entropy", space)
    assert [r["guesses"] for r in results] == [1, 2, 3, 3]
    s = summarize(results)
    assert s.num_cases == 4
    assert s.average == 2.25
    # b and y both need 3; b comes first in enumeration order
    assert s.worst_secret == Candidate.from_string("b")
    assert s.worst_guesses == 3
    assert s.distribution == {1: 1, 2: 1, 3: 2}


def test_batch_reproducible_and_ordered():
    space = ProblemSpace(2)
    seen = []
    a = run_batch("entropy_np", space, on_result=lambda i, r: seen.append(i))
    b = run_batch("entropy_np", space)
    assert seen == list(range(16))
    assert [r["index"] for r in a] == list(range(16))
    assert summarize(a) == summarize(b)
    assert max(r["guesses"] for r in a) == summarize(a).worst_guesses


def test_batch_parallel_matches_sequential():
    space = ProblemSpace(2)
    seq = run_batch("entropy_np", space)
    par = run_batch("entropy_np", space, workers=2)
    assert [r["history"] for r in par] == [r["history"] for r in seq]
    assert summarize(par) == summarize(seq)


def test_summarize_empty():
    with pytest.raises(ValueError):
        summarize([])


def test_reference_game_average_and_worst_case():
    n = config.DEFAULT_LENGTH
    space = ProblemSpace(n)
    first = summarize(run_batch("entropy_np", space))
    second = summarize(run_batch("entropy_np", space))

    assert first.num_cases == 4 ** n
    assert 1 <= first.average <= n + 1
    assert first.worst_secret == second.worst_secret == Candidate.from_string("rbbyr")
    assert first.worst_guesses == second.worst_guesses == 7
    assert first.distribution == {1: 1, 2: 3, 3: 18, 4: 128, 5: 524, 6: 338, 7: 12}
