"""Algorithm registry used by the driver, config loader, and CLI."""

from __future__ import annotations

import random as _random
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from hillclimb.config.models import (
    AnnealingSettings,
    FirstChoiceSettings,
    HillClimbingSettings,
    RandomRestartSettings,
)
from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import RandomSource
from hillclimb.problems.contract import SearchProblem
from hillclimb.search.annealing import SimulatedAnnealing
from hillclimb.search.base import IterativeSearch
from hillclimb.search.first_choice import FirstChoiceHillClimbing
from hillclimb.search.hill_climbing import HillClimbing
from hillclimb.search.random_restart import RandomRestartHillClimbing

SearchBuilder = Callable[[SearchProblem, Any, RandomSource], IterativeSearch]


@dataclass(frozen=True, slots=True)
class AlgorithmSpec:
    """Registered algorithm: how to validate its settings and how to build it."""

    name: str
    description: str
    settings_model: type[BaseModel]
    builder: SearchBuilder

    def parameters(self) -> list[str]:
        return list(self.settings_model.model_fields)


def _build_hill_climbing(
    problem: SearchProblem, settings: HillClimbingSettings, rng: RandomSource
) -> IterativeSearch:
    return HillClimbing(problem.initial_state, problem.heuristic, expand=problem.expand, rng=rng)


def _build_first_choice(
    problem: SearchProblem, settings: FirstChoiceSettings, rng: RandomSource
) -> IterativeSearch:
    return FirstChoiceHillClimbing(
        problem.initial_state, problem.heuristic, expand=problem.expand, rng=rng
    )


def _build_random_restart(
    problem: SearchProblem, settings: RandomRestartSettings, rng: RandomSource
) -> IterativeSearch:
    builder = problem.random_state
    if builder is None:
        raise HillClimbValueError(
            f"Problem '{problem.name}' cannot generate random states for restarts."
        )
    return RandomRestartHillClimbing(
        problem.initial_state,
        problem.heuristic,
        settings.restarts,
        lambda: builder(rng),
        expand=problem.expand,
        rng=rng,
    )


def _build_annealing(
    problem: SearchProblem, settings: AnnealingSettings, rng: RandomSource
) -> IterativeSearch:
    return SimulatedAnnealing(
        problem.initial_state,
        problem.heuristic,
        settings.initial_temperature,
        settings.min_temperature,
        expand=problem.expand,
        rng=rng,
    )


class SearchRegistry:
    """Container mapping algorithm names to builders."""

    def __init__(self) -> None:
        self._specs: dict[str, AlgorithmSpec] = {}

    def register(self, spec: AlgorithmSpec) -> None:
        """Register or replace an algorithm."""
        self._specs[spec.name] = spec

    def get(self, name: str) -> AlgorithmSpec:
        """Return an algorithm by (case-insensitive) name."""
        key = name.strip().lower()
        try:
            return self._specs[key]
        except KeyError as exc:
            available = ", ".join(sorted(self._specs))
            raise KeyError(f"Unknown algorithm '{name}'. Available: {available}") from exc

    def names(self) -> list[str]:
        return list(self._specs.keys())

    def specs(self) -> Iterable[AlgorithmSpec]:
        return tuple(self._specs.values())

    def build(
        self,
        name: str,
        problem: SearchProblem,
        settings: BaseModel | Mapping[str, Any] | None = None,
        rng: RandomSource | None = None,
    ) -> IterativeSearch:
        """Validate ``settings`` for ``name`` and build a search over ``problem``."""
        spec = self.get(name)
        if not isinstance(settings, spec.settings_model):
            settings = spec.settings_model.model_validate(dict(settings or {}))
        return spec.builder(problem, settings, rng if rng is not None else _random.Random())

    @classmethod
    def from_defaults(cls, specs: Iterable[AlgorithmSpec] | None = None) -> SearchRegistry:
        registry = cls()
        if specs is None:
            specs = (
                AlgorithmSpec(
                    name=HillClimbing.name,
                    description="Steepest ascent: move to the best strictly improving neighbor.",
                    settings_model=HillClimbingSettings,
                    builder=_build_hill_climbing,
                ),
                AlgorithmSpec(
                    name=FirstChoiceHillClimbing.name,
                    description="Take the first randomly sampled neighbor that improves.",
                    settings_model=FirstChoiceSettings,
                    builder=_build_first_choice,
                ),
                AlgorithmSpec(
                    name=RandomRestartHillClimbing.name,
                    description="Hill climbing restarted from random states, keeping the best.",
                    settings_model=RandomRestartSettings,
                    builder=_build_random_restart,
                ),
                AlgorithmSpec(
                    name=SimulatedAnnealing.name,
                    description="Accept worse moves with probability exp(delta / T); T = T0 / k.",
                    settings_model=AnnealingSettings,
                    builder=_build_annealing,
                ),
            )
        for spec in specs:
            registry.register(spec)
        return registry


def build_search(
    name: str,
    problem: SearchProblem,
    settings: BaseModel | Mapping[str, Any] | None = None,
    rng: RandomSource | None = None,
) -> IterativeSearch:
    """Build a search with the default registry."""
    return SearchRegistry.from_defaults().build(name, problem, settings, rng)


__all__ = ["AlgorithmSpec", "SearchBuilder", "SearchRegistry", "build_search"]
