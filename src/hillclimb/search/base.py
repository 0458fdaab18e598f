"""Iterative search contract shared by every hillclimb algorithm."""

from __future__ import annotations

import random as _random
from abc import ABC, abstractmethod
from typing import Generic

from hillclimb.core.errors import EmptyNeighborhoodError, HillClimbValueError
from hillclimb.core.types import ExpandFn, Heuristic, RandomSource, S

__all__ = ["IterativeSearch"]


class IterativeSearch(ABC, Generic[S]):
    """Base class for searches that advance one step per :meth:`iterate_once` call.

    Parameters
    ----------
    state : S
        Initial state. Must not be ``None``.
    heuristic : Callable[[S], float]
        Scores a state; higher is better.
    expand : Callable[[S], Sequence[S]] | None, optional
        Neighbor function. When omitted the state's own ``expand()`` method is used.
    rng : RandomSource | None, optional
        Source of uniform draws. A private ``random.Random`` is created when omitted.
    """

    name: str = "search"

    def __init__(
        self,
        state: S,
        heuristic: Heuristic[S],
        *,
        expand: ExpandFn[S] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        if state is None:
            raise HillClimbValueError("state must be a valid instance, got None.")
        if heuristic is None or not callable(heuristic):
            raise HillClimbValueError("heuristic must be a callable returning a number.")
        if expand is not None and not callable(expand):
            raise HillClimbValueError("expand must be callable when provided.")
        if expand is None and not callable(getattr(state, "expand", None)):
            raise HillClimbValueError(
                f"{type(state).__name__} has no expand() method and no expand function was given."
            )
        self._state: S = state
        self._heuristic = heuristic
        self._expand = expand
        self._rng: RandomSource = rng if rng is not None else _random.Random()
        self._completed = False
        self._iterations = 0

    @abstractmethod
    def _step(self) -> S:
        """Run one algorithm-specific step on a search that is not yet completed."""

    def _exhausted(self) -> bool:
        """Return ``True`` when the search should stop without doing any work."""
        return False

    def iterate_once(self) -> S:
        """Advance the search by one step and return the current state."""
        if self._completed:
            return self._state
        if self._exhausted():
            self._mark_completed()
            return self._state
        state = self._step()
        self._iterations += 1
        return state

    def complete_search(self) -> S:
        """Call :meth:`iterate_once` until the search completes."""
        while not self._completed:
            self.iterate_once()
        return self._state

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def state(self) -> S:
        return self._state

    def get_state(self) -> S:
        return self._state

    @property
    def heuristic(self) -> Heuristic[S]:
        return self._heuristic

    @property
    def expand_fn(self) -> ExpandFn[S] | None:
        return self._expand

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def iterations(self) -> int:
        """Number of :meth:`iterate_once` calls that completed a working step."""
        return self._iterations

    def evaluate(self, state: S) -> float:
        return self._heuristic(state)

    def expand_state(self, state: S) -> list[S]:
        """Return the neighbors of ``state`` as a fresh list."""
        if self._expand is not None:
            return list(self._expand(state))
        return list(state.expand())  # type: ignore[attr-defined]

    def best_expanded_state(self) -> S | None:
        """Return the best neighbor strictly better than the current state, or ``None``.

        Neighbors are scanned in ``expand()`` order; the first of several equal maxima wins.
        """
        best: S | None = None
        best_score = self.evaluate(self._state)
        for neighbor in self.expand_state(self._state):
            score = self.evaluate(neighbor)
            if score > best_score:
                best_score = score
                best = neighbor
        return best

    def random_neighbor(self) -> S:
        """Return a uniformly drawn neighbor of the current state."""
        neighbors = self.expand_state(self._state)
        if not neighbors:
            raise EmptyNeighborhoodError(
                f"{type(self._state).__name__} produced no neighbors to sample from."
            )
        return neighbors[self._rng.randrange(len(neighbors))]

    def _mark_completed(self) -> None:
        self._completed = True

    def _child_kwargs(self) -> dict[str, object]:
        """Keyword arguments that let a composed search share this search's collaborators."""
        return {"expand": self._expand, "rng": self._rng}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state!r}, completed={self._completed}, "
            f"iterations={self._iterations})"
        )

