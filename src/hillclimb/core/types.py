"""Protocols and callable aliases describing what callers supply to a search."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")


@runtime_checkable
class ExpandableState(Protocol):
    """A state that knows how to produce its neighbors."""

    def expand(self) -> Sequence[Any]:
        """Return zero or more neighboring states."""


class RandomSource(Protocol):
    """Uniform random draws consumed by the stochastic algorithms.

    ``random.Random`` satisfies this protocol; tests may pass a scripted source.
    """

    def randrange(self, stop: int, /) -> int:  # pragma: no cover - interface only
        ...

    def random(self) -> float:  # pragma: no cover - interface only
        ...


Heuristic = Callable[[S], float]
ExpandFn = Callable[[S], Sequence[S]]
StateFactory = Callable[[], S]

__all__ = ["ExpandableState", "RandomSource", "Heuristic", "ExpandFn", "StateFactory", "S"]
