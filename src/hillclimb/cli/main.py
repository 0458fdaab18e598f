from __future__ import annotations

import random
from pathlib import Path
from typing import Any, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hillclimb.config import ALGORITHM_SETTINGS, ProblemSettings, RunConfig, load_run_config
from hillclimb.core.errors import HillClimbError
from hillclimb.problems import build_problem
from hillclimb.search import SearchRegistry, run_search

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _parse_values(raw: str | None) -> list[float] | None:
    if raw is None:
        return None
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(f"--values must be comma separated numbers, got '{raw}'") from exc


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def _execute(config: RunConfig, *, show_state: bool, context: dict[str, Any]) -> None:
    registry = SearchRegistry.from_defaults()
    rng = random.Random(config.seed)
    try:
        problem = build_problem(config.problem, rng)
        search = registry.build(config.algorithm, problem, config.algorithm_settings(), rng)
    except (HillClimbError, KeyError, ValidationError) as exc:
        _fail(str(exc))

    try:
        result = run_search(
            search,
            max_iterations=config.max_iterations,
            seed=config.seed,
            problem=problem.name,
            telemetry_log=config.telemetry_log,
            telemetry_context=context,
            step_interval=config.step_interval,
        )
    except HillClimbError as exc:
        _fail(f"{config.algorithm} stopped on {problem.name}: {exc}")

    meta = result["meta"]
    t = Table(title=f"{config.algorithm} on {problem.name}")
    t.add_column("Metric")
    t.add_column("Value")
    t.add_row("Final state", problem.describe(result["state"]))
    t.add_row("Objective", _format_value(result["objective"]))
    t.add_row("Best objective", _format_value(result["best_objective"]))
    t.add_row("Completed", str(result["completed"]))
    for key in (
        "steps",
        "improvements",
        "restarts",
        "remaining_restarts",
        "temperature",
        "accepted_moves",
    ):
        if key in meta:
            t.add_row(key.replace("_", " ").capitalize(), _format_value(meta[key]))
    console.print(t)
    if show_state:
        best = result["best_state"]
        render = getattr(best, "render", None)
        console.print(render() if callable(render) else problem.describe(best))
    if "telemetry_log_path" in meta:
        console.print(f"[dim]Telemetry appended to {meta['telemetry_log_path']}[/dim]")


@app.command("algorithms")
def algorithms_cmd():
    """List the available search algorithms."""
    t = Table(title="Algorithms")
    t.add_column("Name")
    t.add_column("Parameters")
    t.add_column("Description")
    for spec in SearchRegistry.from_defaults().specs():
        t.add_row(spec.name, ", ".join(spec.parameters()) or "-", spec.description)
    console.print(t)


@app.command("solve")
def solve_cmd(
    algorithm: str = typer.Argument(..., help="Algorithm name (see `hillclimb algorithms`)."),
    problem: str = typer.Option("sequence", "--problem", "-p", help="sequence | queens"),
    values: str | None = typer.Option(
        None, "--values", help="Comma separated values for the sequence problem."
    ),
    size: int = typer.Option(8, "--size", help="Board size for the queens problem."),
    start: int | None = typer.Option(None, "--start", help="Start index (sequence problem)."),
    seed: int | None = typer.Option(42, "--seed", help="RNG seed."),
    max_iterations: int | None = typer.Option(
        None, "--max-iterations", help="Stop after this many iterations even if not completed."
    ),
    restarts: int | None = typer.Option(None, "--restarts", help="Random-restart budget."),
    initial_temperature: float | None = typer.Option(
        None, "--initial-temperature", help="Simulated annealing starting temperature."
    ),
    min_temperature: float | None = typer.Option(
        None, "--min-temperature", help="Simulated annealing temperature floor."
    ),
    telemetry_log: Path | None = typer.Option(
        None, "--telemetry-log", help="Append run telemetry to this JSONL file."
    ),
    show_state: bool = typer.Option(False, "--show-state", help="Print the best state found."),
):
    """Run one search algorithm on a demonstration problem."""
    overrides = {
        "restarts": restarts,
        "initial_temperature": initial_temperature,
        "min_temperature": min_temperature,
    }
    settings_model = ALGORITHM_SETTINGS.get(algorithm.strip().lower())
    accepted = set(settings_model.model_fields) if settings_model else set()
    settings = {key: value for key, value in overrides.items() if value is not None}
    ignored = sorted(set(settings) - accepted)
    if ignored and settings_model is not None:
        console.print(
            f"[yellow]Ignoring options not used by {algorithm}: {', '.join(ignored)}[/yellow]"
        )
    settings = {key: value for key, value in settings.items() if key in accepted}

    problem_payload: dict[str, Any] = {"name": problem, "size": size, "start": start}
    parsed = _parse_values(values)
    if parsed is not None:
        problem_payload["values"] = parsed
    try:
        config = RunConfig(
            algorithm=algorithm,
            problem=ProblemSettings(**problem_payload),
            seed=seed,
            max_iterations=max_iterations,
            telemetry_log=telemetry_log,
            settings=settings,
        )
    except ValidationError as exc:
        _fail(str(exc))
    _execute(config, show_state=show_state, context={"command": "solve"})


@app.command("run")
def run_cmd(
    config_path: Path = typer.Argument(..., help="YAML run configuration."),
    show_state: bool = typer.Option(False, "--show-state", help="Print the best state found."),
):
    """Run a search described by a YAML configuration file."""
    try:
        config = load_run_config(config_path)
    except (HillClimbError, FileNotFoundError) as exc:
        _fail(f"Could not load {config_path}: {exc}")
    _execute(
        config,
        show_state=show_state,
        context={"command": "run", "config_path": str(config_path)},
    )


if __name__ == "__main__":
    app()
