"""JSONL run and step records for a single search run."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from .jsonl import append_jsonl


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(frozen=True, slots=True)
class StepRecord:
    """Snapshot of a search after one ``iterate_once`` call."""

    step: int
    objective: float
    best_objective: float
    temperature: float | None = None
    accepted: bool | None = None


@dataclass(slots=True)
class RunTelemetryLogger(AbstractContextManager["RunTelemetryLogger"]):
    """Append one ``run`` record per search run, plus sampled ``step`` records.

    Parameters
    ----------
    log_path:
        JSONL file receiving run records.
    solver:
        Algorithm name, e.g. ``"simulated-annealing"``.
    problem, seed:
        Labels copied into the run record.
    config, context:
        Driver settings and caller metadata copied into the run record.
    step_interval:
        Write every ``step_interval``-th step (plus the first and the last) to
        ``<log dir>/steps/<run_id>.jsonl``. ``None`` or ``<= 0`` turns step records off.

    The run record is written exactly once: by :meth:`finalize`, or on leaving the
    ``with`` block (``status="error"`` when an exception escapes it).
    """

    log_path: Path
    solver: str
    problem: str | None = None
    seed: int | None = None
    config: Mapping[str, Any] | None = None
    context: Mapping[str, Any] | None = None
    step_interval: int | None = 100
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    steps_logged: int = field(default=0, init=False)
    _started: float | None = field(default=None, init=False)
    _started_at: str | None = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)
        if self.step_interval is not None and self.step_interval <= 0:
            self.step_interval = None

    def __enter__(self) -> "RunTelemetryLogger":
        self._started = time.perf_counter()
        self._started_at = _timestamp()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None:
            self._write_run("error", error=repr(exc))
        else:
            self._write_run("ok")
        return False

    @property
    def steps_path(self) -> Path | None:
        if self.step_interval is None:
            return None
        return self.log_path.parent / "steps" / f"{self.run_id}.jsonl"

    @property
    def closed(self) -> bool:
        return self._closed

    def should_log_step(self, step: int, *, final: bool = False) -> bool:
        if self.step_interval is None:
            return False
        return final or step == 1 or step % self.step_interval == 0

    def log_step(self, record: StepRecord) -> None:
        """Append ``record`` to the step file; a no-op when step records are off."""
        path = self.steps_path
        if path is None:
            return
        append_jsonl(
            path,
            {"record_type": "step", "run_id": self.run_id, "timestamp": _timestamp()}
            | asdict(record),
        )
        self.steps_logged += 1

    def finalize(
        self,
        *,
        metrics: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        """Write the successful run record with final ``metrics``."""
        self._write_run("ok", metrics=metrics, extra=extra)

    def _write_run(
        self,
        status: str,
        *,
        metrics: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
        error: str | None = None,
    ) -> None:
        if self._closed:
            return
        self._closed = True
        duration = 0.0 if self._started is None else time.perf_counter() - self._started
        append_jsonl(
            self.log_path,
            {
                "record_type": "run",
                "run_id": self.run_id,
                "solver": self.solver,
                "problem": self.problem,
                "seed": self.seed,
                "status": status,
                "error": error,
                "steps_logged": self.steps_logged,
                "metrics": dict(metrics or {}),
                "config": dict(self.config or {}),
                "context": dict(self.context or {}),
                "extra": dict(extra or {}),
                "started_at": self._started_at,
                "finished_at": _timestamp(),
                "duration_seconds": round(duration, 3),
            },
        )


__all__ = ["RunTelemetryLogger", "StepRecord"]
