from __future__ import annotations

import random

import pytest

from hillclimb import HillClimbValueError
from hillclimb.config import ProblemSettings
from hillclimb.problems import SequenceWalk, build_problem, build_sequence_problem


def test_expand_returns_next_position(points):
    walk = SequenceWalk(points, 1)
    assert walk.expand() == [SequenceWalk(points, 2)]
    assert walk.value == 2.0


def test_expand_is_empty_at_the_end(points):
    assert SequenceWalk(points, len(points) - 1).expand() == []


def test_build_sequence_problem_defaults_to_first_index(points):
    problem = build_sequence_problem(points)
    assert problem.initial_state.index == 0
    assert problem.heuristic(problem.initial_state) == 1.0
    assert problem.describe(problem.initial_state) == "index=0 value=1"


def test_random_state_draws_an_index(points):
    problem = build_sequence_problem(points)
    state = problem.random_state(random.Random(9))
    assert 0 <= state.index < len(points)


@pytest.mark.parametrize(("values", "start"), [((), 0), ((1.0, 2.0), 2), ((1.0,), -1)])
def test_build_sequence_problem_validates_input(values, start):
    with pytest.raises(HillClimbValueError):
        build_sequence_problem(values, start)


def test_build_problem_dispatches_on_name():
    rng = random.Random(0)
    sequence = build_problem(ProblemSettings(name="sequence", values=[3, 4], start=1), rng)
    assert sequence.initial_state.index == 1
    queens = build_problem(ProblemSettings(name="queens", size=4), rng)
    assert queens.initial_state.size == 4
