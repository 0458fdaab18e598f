"""Validated run configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HillClimbingSettings(BaseModel):
    """Steepest-ascent hill climbing takes no parameters."""

    model_config = ConfigDict(extra="forbid")


class FirstChoiceSettings(BaseModel):
    """First-choice hill climbing takes no parameters."""

    model_config = ConfigDict(extra="forbid")


class RandomRestartSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    restarts: int = Field(10, ge=0, description="Restarts after the first inner search.")


class AnnealingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initial_temperature: float = Field(100.0, gt=0)
    min_temperature: float = Field(1.0, gt=0)

    @model_validator(mode="after")
    def _initial_above_floor(self) -> AnnealingSettings:
        if self.initial_temperature <= self.min_temperature:
            raise ValueError("initial_temperature must be greater than min_temperature")
        return self


ALGORITHM_SETTINGS: dict[str, type[BaseModel]] = {
    "hill-climbing": HillClimbingSettings,
    "first-choice": FirstChoiceSettings,
    "random-restart": RandomRestartSettings,
    "simulated-annealing": AnnealingSettings,
}


class ProblemSettings(BaseModel):
    """Selects and parameterises one of the bundled demonstration problems.

    Attributes
    ----------
    name:
        ``"sequence"`` walks ``values`` left to right; ``"queens"`` places ``size`` queens.
    values:
        Sequence values (sequence problem only).
    size:
        Board size (queens problem only).
    start:
        Starting index for the sequence problem. Ignored by queens, which starts from a
        random board.
    """

    model_config = ConfigDict(extra="forbid")

    name: Literal["sequence", "queens"] = "sequence"
    values: list[float] = Field(default_factory=lambda: [1.0, 2.0, 5.0, 6.0, 1.0])
    size: int = Field(8, ge=2)
    start: int | None = None

    @model_validator(mode="after")
    def _start_in_range(self) -> ProblemSettings:
        if self.name == "sequence":
            if not self.values:
                raise ValueError("sequence problem needs at least one value")
            if self.start is not None and not 0 <= self.start < len(self.values):
                raise ValueError(f"start must be within 0..{len(self.values) - 1}")
        return self


class RunConfig(BaseModel):
    """One search run: algorithm, problem, and driver options."""

    model_config = ConfigDict(extra="forbid")

    algorithm: str = "hill-climbing"
    problem: ProblemSettings = Field(default_factory=ProblemSettings)
    seed: int | None = 42
    max_iterations: int | None = Field(None, ge=1)
    telemetry_log: Path | None = None
    step_interval: int | None = 100
    settings: dict[str, Any] = Field(default_factory=dict)

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        key = value.strip().lower()
        if key not in ALGORITHM_SETTINGS:
            available = ", ".join(sorted(ALGORITHM_SETTINGS))
            raise ValueError(f"Unknown algorithm '{value}'. Available: {available}")
        return key

    @model_validator(mode="after")
    def _validate_settings(self) -> RunConfig:
        self.algorithm_settings()
        return self

    def algorithm_settings(self) -> BaseModel:
        """Return ``settings`` validated against the selected algorithm's model."""
        return ALGORITHM_SETTINGS[self.algorithm].model_validate(self.settings)


__all__ = [
    "HillClimbingSettings",
    "FirstChoiceSettings",
    "RandomRestartSettings",
    "AnnealingSettings",
    "ALGORITHM_SETTINGS",
    "ProblemSettings",
    "RunConfig",
]
