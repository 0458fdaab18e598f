"""Walk along a sequence of numbers, one position at a time."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import RandomSource
from hillclimb.problems.contract import SearchProblem


@dataclass(frozen=True, slots=True)
class SequenceWalk:
    """Position ``index`` within ``values``; the only neighbor is the next position."""

    values: tuple[float, ...]
    index: int = 0

    @property
    def value(self) -> float:
        return self.values[self.index]

    def expand(self) -> list[SequenceWalk]:
        following = self.index + 1
        if following >= len(self.values):
            return []
        return [SequenceWalk(self.values, following)]


def sequence_value(state: SequenceWalk) -> float:
    return float(state.value)


def random_walk(values: tuple[float, ...], rng: RandomSource) -> SequenceWalk:
    return SequenceWalk(values, rng.randrange(len(values)))


def describe_walk(state: SequenceWalk) -> str:
    return f"index={state.index} value={state.value:g}"


def build_sequence_problem(values: Sequence[float], start: int | None = 0) -> SearchProblem:
    """Bundle a :class:`SequenceWalk` problem starting at ``start`` (default ``0``)."""
    items = tuple(float(v) for v in values)
    if not items:
        raise HillClimbValueError("sequence problem needs at least one value.")
    index = 0 if start is None else int(start)
    if not 0 <= index < len(items):
        raise HillClimbValueError(f"start index {index} is outside 0..{len(items) - 1}.")
    return SearchProblem(
        name="sequence",
        initial_state=SequenceWalk(items, index),
        heuristic=sequence_value,
        random_state=lambda rng: random_walk(items, rng),
        describe=describe_walk,
    )


__all__ = [
    "SequenceWalk",
    "sequence_value",
    "random_walk",
    "describe_walk",
    "build_sequence_problem",
]
