"""Shared test doubles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class ScriptedRandom:
    """Random source replaying fixed draws and recording the bounds it was asked for."""

    def __init__(self, indices: Iterable[int] = (), reals: Iterable[float] = ()) -> None:
        self._indices = deque(indices)
        self._reals = deque(reals)
        self.stops: list[int] = []

    def randrange(self, stop: int) -> int:
        self.stops.append(stop)
        value = self._indices.popleft()
        assert 0 <= value < stop, f"scripted index {value} outside [0, {stop})"
        return value

    def random(self) -> float:
        return self._reals.popleft()


class CountingHeuristic:
    """Wrap a heuristic and count how often each state is evaluated."""

    def __init__(self, fn) -> None:
        self._fn = fn
        self.calls: list[object] = []

    def __call__(self, state) -> float:
        self.calls.append(state)
        return self._fn(state)

    def reset(self) -> None:
        self.calls.clear()


def ring(size: int):
    """Neighbor function over ``0..size-1`` where each integer neighbors its two adjacent values."""

    def _expand(value: int) -> list[int]:
        return [(value - 1) % size, (value + 1) % size]

    return _expand
