"""First-choice hill climbing."""

from __future__ import annotations

from hillclimb.core.types import ExpandFn, Heuristic, RandomSource, S
from hillclimb.search.base import IterativeSearch

__all__ = ["FirstChoiceHillClimbing"]


class FirstChoiceHillClimbing(IterativeSearch[S]):
    """Sample neighbors at random until one strictly improves on the current state.

    Each step draws from the current expansion without replacement, so at most
    ``len(expand(state))`` neighbors are evaluated. When every neighbor has been tried
    without improvement the search completes and keeps its state.
    """

    name = "first-choice"

    def __init__(
        self,
        state: S,
        heuristic: Heuristic[S],
        *,
        expand: ExpandFn[S] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(state, heuristic, expand=expand, rng=rng)
        self._last_draws = 0

    @property
    def last_draws(self) -> int:
        """Neighbors evaluated during the most recent step."""
        return self._last_draws

    def _step(self) -> S:
        start_score = self.evaluate(self._state)
        pool = self.expand_state(self._state)
        self._last_draws = 0
        # pool shrinks by one per draw, bounding the loop by the initial expansion size
        while pool:
            candidate = pool.pop(self._rng.randrange(len(pool)))
            self._last_draws += 1
            if self.evaluate(candidate) > start_score:
                self._state = candidate
                return self._state
        self._mark_completed()
        return self._state
