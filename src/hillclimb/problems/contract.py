"""Problem bundle handed to the algorithm registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic

from hillclimb.core.types import ExpandFn, Heuristic, RandomSource, S

RandomStateBuilder = Callable[[RandomSource], S]


@dataclass(slots=True)
class SearchProblem(Generic[S]):
    """Everything an algorithm needs to search a concrete state space.

    Attributes
    ----------
    name:
        Short identifier used in telemetry and CLI output.
    initial_state:
        State the search starts from.
    heuristic:
        Scores a state; higher is better.
    expand:
        Optional neighbor function. ``None`` means the state's own ``expand()`` is used.
    random_state:
        Optional builder of uniformly random states, required by random-restart searches.
    describe:
        Formats a state for display.
    """

    name: str
    initial_state: S
    heuristic: Heuristic[S]
    expand: ExpandFn[S] | None = None
    random_state: RandomStateBuilder | None = None
    describe: Callable[[S], str] = repr


__all__ = ["SearchProblem", "RandomStateBuilder"]
