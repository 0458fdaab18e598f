from __future__ import annotations

import random

import pytest

from hillclimb import HillClimbing
from hillclimb.problems import SequenceWalk, queens_heuristic, sequence_value
from hillclimb.problems.queens import random_board


def test_complete_search_stops_at_local_maximum(walk_start):
    search = HillClimbing(walk_start, sequence_value)
    result = search.complete_search()
    assert result.index == 3
    assert result.value == 6.0
    assert search.is_completed


def test_complete_search_with_injected_neighbor_function(points):
    search = HillClimbing(
        0,
        lambda index: points[index],
        expand=lambda index: [index + 1] if index + 1 < len(points) else [],
    )
    assert search.complete_search() == 3


def test_iterate_once_moves_one_position(walk_start):
    search = HillClimbing(walk_start, sequence_value)
    result = search.iterate_once()
    assert result.index == 1
    assert search.state is result
    assert not search.is_completed


def test_completion_flag_is_set_on_first_step_without_improvement(walk_start):
    search = HillClimbing(walk_start, sequence_value)
    for expected in (1, 2, 3):
        assert search.iterate_once().index == expected
        assert not search.is_completed
    assert search.iterate_once().index == 3
    assert search.is_completed
    assert search.iterations == 4


def test_no_improving_neighbor_leaves_state_unchanged(points):
    start = SequenceWalk(points, 3)
    search = HillClimbing(start, sequence_value)
    assert search.iterate_once() is start
    assert search.is_completed


def test_equal_neighbor_is_not_an_improvement():
    search = HillClimbing(0, lambda state: 1.0, expand=lambda state: [state + 1])
    assert search.iterate_once() == 0
    assert search.is_completed


def test_empty_expansion_completes(points):
    end = SequenceWalk(points, len(points) - 1)
    search = HillClimbing(end, sequence_value)
    assert search.complete_search() is end
    assert search.iterations == 1


def test_picks_best_neighbor_and_first_on_ties():
    scores = {"start": 0.0, "low": 1.0, "high-a": 4.0, "high-b": 4.0}
    search = HillClimbing(
        "start",
        scores.__getitem__,
        expand=lambda state: ["low", "high-a", "high-b"] if state == "start" else [],
    )
    assert search.iterate_once() == "high-a"


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_heuristic_is_non_decreasing_across_iterations(seed):
    rng = random.Random(seed)
    search = HillClimbing(random_board(6, rng), queens_heuristic)
    scores = [queens_heuristic(search.state)]
    while not search.is_completed:
        scores.append(queens_heuristic(search.iterate_once()))
    assert scores == sorted(scores)
    final = search.state
    assert all(queens_heuristic(n) <= queens_heuristic(final) for n in final.expand())


def test_collaborator_errors_propagate(walk_start):
    def broken(state):
        raise RuntimeError("neighbor generation failed")

    search = HillClimbing(walk_start, sequence_value, expand=broken)
    with pytest.raises(RuntimeError, match="neighbor generation failed"):
        search.iterate_once()
    assert not search.is_completed
    assert search.iterations == 0
