from __future__ import annotations

import random
from pathlib import Path

import pytest

from hillclimb import (
    HillClimbing,
    HillClimbValueError,
    RandomRestartHillClimbing,
    SimulatedAnnealing,
    run_search,
)
from hillclimb.problems import SequenceWalk, sequence_value
from hillclimb.telemetry import read_jsonl
from tests.helpers import ring


def test_runs_to_completion(walk_start):
    result = run_search(HillClimbing(walk_start, sequence_value))
    assert result["completed"]
    assert result["objective"] == 6.0
    assert result["best_objective"] == 6.0
    assert result["state"].index == 3
    meta = result["meta"]
    assert meta["steps"] == 4
    assert meta["improvements"] == 3
    assert meta["initial_objective"] == 1.0
    assert meta["solver"] == "hill-climbing"
    assert not meta["stopped_by_cap"]


def test_iteration_cap_stops_early(walk_start):
    search = HillClimbing(walk_start, sequence_value)
    result = run_search(search, max_iterations=2)
    assert not result["completed"]
    assert result["state"].index == 2
    assert result["meta"]["stopped_by_cap"]
    assert not search.is_completed


def test_rejects_non_positive_cap(walk_start):
    with pytest.raises(HillClimbValueError):
        run_search(HillClimbing(walk_start, sequence_value), max_iterations=0)


def test_tracks_best_state_seen_by_annealing():
    search = SimulatedAnnealing(
        0, lambda v: -abs(v - 3), 50.0, 0.5, expand=ring(12), rng=random.Random(6)
    )
    result = run_search(search)
    assert result["best_objective"] >= result["objective"]
    assert result["meta"]["iteration_count"] == search.iteration_count
    assert result["meta"]["temperature"] <= 0.5


def test_folds_in_random_restart_best_state():
    values = (1.0, 9.0, 2.0, 4.0)
    starts = [SequenceWalk(values, 0)]
    search = RandomRestartHillClimbing(
        SequenceWalk(values, 2), sequence_value, 1, lambda: starts.pop()
    )
    result = run_search(search)
    assert result["state"].value == 9.0
    assert result["best_objective"] == 9.0
    assert result["meta"]["restarts"] == 1
    assert result["meta"]["remaining_restarts"] == 0


def test_writes_telemetry(tmp_path: Path, walk_start):
    log_path = tmp_path / "runs.jsonl"
    result = run_search(
        HillClimbing(walk_start, sequence_value),
        seed=7,
        problem="sequence",
        telemetry_log=log_path,
        telemetry_context={"command": "test"},
        step_interval=1,
    )
    meta = result["meta"]
    record = read_jsonl(log_path)[0]
    assert record["status"] == "ok"
    assert record["run_id"] == meta["telemetry_run_id"]
    assert record["solver"] == "hill-climbing"
    assert record["seed"] == 7
    assert record["context"] == {"command": "test"}
    assert record["steps_logged"] == 4
    assert record["metrics"]["best_objective"] == 6.0
    assert record["metrics"]["objective_delta_vs_initial"] == 5.0
    steps = read_jsonl(meta["telemetry_steps_path"])
    assert [step["step"] for step in steps] == [1, 2, 3, 4]
    assert steps[-1]["accepted"] is False


def test_collaborator_failure_is_recorded_and_raised(tmp_path: Path, walk_start):
    calls = []

    def flaky(state):
        calls.append(state)
        if len(calls) > 1:
            raise RuntimeError("expand failed")
        return state.expand()

    log_path = tmp_path / "runs.jsonl"
    with pytest.raises(RuntimeError, match="expand failed"):
        run_search(
            HillClimbing(walk_start, sequence_value, expand=flaky), telemetry_log=log_path
        )
    record = read_jsonl(log_path)[0]
    assert record["status"] == "error"
