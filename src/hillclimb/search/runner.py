"""Drive a search to completion with optional iteration caps and telemetry."""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any

from hillclimb.core.errors import HillClimbValueError
from hillclimb.search.annealing import SimulatedAnnealing
from hillclimb.search.base import IterativeSearch
from hillclimb.search.first_choice import FirstChoiceHillClimbing
from hillclimb.search.random_restart import RandomRestartHillClimbing
from hillclimb.telemetry import RunTelemetryLogger, StepRecord

__all__ = ["run_search", "search_snapshot"]


def search_snapshot(search: IterativeSearch) -> dict[str, Any]:
    """Return algorithm-specific counters for reporting."""
    snapshot: dict[str, Any] = {
        "iterations": search.iterations,
        "completed": search.is_completed,
    }
    if isinstance(search, SimulatedAnnealing):
        snapshot.update(
            {
                "temperature": search.temperature,
                "initial_temperature": search.initial_temperature,
                "min_temperature": search.min_temperature,
                "iteration_count": search.iteration_count,
                "accepted_moves": search.accepted_moves,
            }
        )
    elif isinstance(search, RandomRestartHillClimbing):
        snapshot.update(
            {
                "restarts": search.restarts,
                "remaining_restarts": search.remaining_restarts,
            }
        )
    elif isinstance(search, FirstChoiceHillClimbing):
        snapshot["last_draws"] = search.last_draws
    return snapshot


def run_search(
    search: IterativeSearch,
    *,
    max_iterations: int | None = None,
    seed: int | None = None,
    solver: str | None = None,
    problem: str | None = None,
    telemetry_log: str | Path | None = None,
    telemetry_context: dict[str, Any] | None = None,
    step_interval: int | None = 100,
) -> dict[str, Any]:
    """Run ``search`` until it completes or ``max_iterations`` steps have been taken.

    Parameters
    ----------
    search : IterativeSearch
        Search to drive. It is advanced in place.
    max_iterations : int | None
        Optional cap on :meth:`~IterativeSearch.iterate_once` calls. ``None`` runs until
        the algorithm's own termination rule fires.
    seed : int | None
        Seed recorded in telemetry; the caller is responsible for seeding the search's RNG.
    solver, problem : str | None
        Labels recorded in telemetry. ``solver`` defaults to the search's ``name``.
    telemetry_log : str | pathlib.Path | None
        Optional JSONL path. When provided a run record (and step records every
        ``step_interval`` steps) is written.
    telemetry_context : dict[str, Any] | None
        Additional context merged into the run record.

    Returns
    -------
    dict
        ``state`` and ``objective`` of the final state, ``best_state`` and ``best_objective``
        of the best state observed, ``completed``, and a ``meta`` dictionary with counters.
    """
    if max_iterations is not None and max_iterations < 1:
        raise HillClimbValueError("max_iterations must be >= 1 when provided.")

    solver_name = solver or search.name
    config_snapshot: dict[str, Any] = {
        "max_iterations": max_iterations,
        **{key: value for key, value in search_snapshot(search).items() if key != "completed"},
    }

    telemetry_logger: RunTelemetryLogger | None = None
    if telemetry_log:
        telemetry_logger = RunTelemetryLogger(
            log_path=Path(telemetry_log),
            solver=solver_name,
            problem=problem,
            seed=seed,
            config=config_snapshot,
            context=dict(telemetry_context or {}),
            step_interval=step_interval,
        )

    with telemetry_logger if telemetry_logger else nullcontext() as run_logger:
        initial_score = search.evaluate(search.state)
        best_state, best_score = search.state, initial_score
        current_score = initial_score
        improvements = 0
        steps = 0
        while not search.is_completed:
            if max_iterations is not None and steps >= max_iterations:
                break
            previous = search.state
            state = search.iterate_once()
            steps += 1
            current_score = search.evaluate(state)
            if current_score > best_score:
                best_state, best_score = state, current_score
                improvements += 1
            if run_logger and run_logger.should_log_step(steps, final=search.is_completed):
                run_logger.log_step(
                    StepRecord(
                        step=steps,
                        objective=float(current_score),
                        best_objective=float(best_score),
                        temperature=getattr(search, "temperature", None),
                        accepted=state is not previous,
                    )
                )

        if isinstance(search, RandomRestartHillClimbing) and search.best_state is not None:
            restart_best = search.best_state
            restart_score = search.evaluate(restart_best)
            if restart_score > best_score:
                best_state, best_score = restart_best, restart_score

        meta: dict[str, Any] = {
            "solver": solver_name,
            "steps": steps,
            "initial_objective": float(initial_score),
            "improvements": improvements,
            "stopped_by_cap": not search.is_completed,
            **search_snapshot(search),
        }
        if run_logger and telemetry_logger:
            run_logger.finalize(
                metrics={
                    "objective": float(current_score),
                    "best_objective": float(best_score),
                    "initial_objective": float(initial_score),
                    "objective_delta_vs_initial": float(best_score - initial_score),
                },
                extra=meta,
            )
            meta["telemetry_run_id"] = telemetry_logger.run_id
            if telemetry_logger.steps_logged:
                meta["telemetry_steps_path"] = str(telemetry_logger.steps_path)
            meta["telemetry_log_path"] = str(telemetry_logger.log_path)

    return {
        "state": search.state,
        "objective": float(current_score),
        "best_state": best_state,
        "best_objective": float(best_score),
        "completed": search.is_completed,
        "meta": meta,
    }
