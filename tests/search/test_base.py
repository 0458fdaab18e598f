from __future__ import annotations

import random

import pytest

from hillclimb import (
    EmptyNeighborhoodError,
    FirstChoiceHillClimbing,
    HillClimbing,
    HillClimbValueError,
    RandomRestartHillClimbing,
    SimulatedAnnealing,
)
from hillclimb.problems import SequenceWalk, sequence_value
from tests.helpers import ring


def _identity(value: int) -> float:
    return float(value)


class _Opaque:
    """State without an expand() method."""


def test_rejects_missing_state():
    with pytest.raises(HillClimbValueError):
        HillClimbing(None, _identity, expand=ring(5))


def test_rejects_missing_heuristic(walk_start):
    with pytest.raises(HillClimbValueError):
        HillClimbing(walk_start, None)


def test_rejects_non_callable_heuristic(walk_start):
    with pytest.raises(ValueError):
        HillClimbing(walk_start, 3.0)


def test_rejects_state_without_neighbor_source():
    with pytest.raises(HillClimbValueError, match="no expand"):
        HillClimbing(_Opaque(), lambda state: 0.0)


def test_expand_function_takes_precedence_over_state_method(walk_start):
    called: list[SequenceWalk] = []

    def expand(state: SequenceWalk) -> list[SequenceWalk]:
        called.append(state)
        return []

    search = HillClimbing(walk_start, sequence_value, expand=expand)
    search.iterate_once()
    assert called == [walk_start]
    assert search.is_completed
    assert search.state is walk_start


def test_random_neighbor_on_empty_expansion_raises(points):
    search = HillClimbing(SequenceWalk(points, len(points) - 1), sequence_value)
    with pytest.raises(EmptyNeighborhoodError):
        search.random_neighbor()


def test_best_expanded_state_prefers_first_of_equal_maxima():
    first, second = ("a", 5.0), ("b", 5.0)
    scores = {"start": 1.0, "a": 5.0, "b": 5.0}
    search = HillClimbing(
        ("start", 1.0),
        lambda state: scores[state[0]],
        expand=lambda state: [first, second],
    )
    assert search.best_expanded_state() is first


def test_best_expanded_state_is_none_without_improvement(points):
    search = HillClimbing(SequenceWalk(points, 3), sequence_value)
    assert search.best_expanded_state() is None


def _searches(points):
    start = SequenceWalk(points, 0)
    rng = random.Random(5)
    return [
        HillClimbing(start, sequence_value),
        FirstChoiceHillClimbing(start, sequence_value, rng=rng),
        RandomRestartHillClimbing(
            start,
            sequence_value,
            2,
            lambda: SequenceWalk(points, rng.randrange(len(points))),
            rng=rng,
        ),
        SimulatedAnnealing(0, _identity, 20.0, 1.0, expand=ring(7), rng=rng),
    ]


@pytest.mark.parametrize("index", range(4))
def test_terminal_state_is_idempotent(points, index):
    search = _searches(points)[index]
    final = search.complete_search()
    assert search.is_completed
    iterations = search.iterations
    for _ in range(5):
        assert search.iterate_once() is final
        assert search.is_completed
    assert search.complete_search() is final
    assert search.get_state() is final
    assert search.iterations == iterations
