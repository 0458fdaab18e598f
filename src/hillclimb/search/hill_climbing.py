"""Steepest-ascent hill climbing."""

from __future__ import annotations

from hillclimb.core.types import S
from hillclimb.search.base import IterativeSearch

__all__ = ["HillClimbing"]


class HillClimbing(IterativeSearch[S]):
    """Move to the highest-ranking neighbor while one strictly improves on the current state.

    The search completes the first time no neighbor beats the current evaluation; the
    state is left unchanged on that step.
    """

    name = "hill-climbing"

    def _step(self) -> S:
        next_state = self.best_expanded_state()
        if next_state is None:
            self._mark_completed()
        else:
            self._state = next_state
        return self._state
