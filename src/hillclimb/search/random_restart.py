"""Random-restart hill climbing."""

from __future__ import annotations

from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import ExpandFn, Heuristic, RandomSource, S, StateFactory
from hillclimb.search.base import IterativeSearch
from hillclimb.search.hill_climbing import HillClimbing

__all__ = ["RandomRestartHillClimbing"]


class RandomRestartHillClimbing(IterativeSearch[S]):
    """Restart a steepest-ascent search from random states until the restart budget is spent.

    Parameters
    ----------
    state : S
        Starting state of the first inner search.
    heuristic : Callable[[S], float]
        Scores a state; shared with every inner search.
    restarts : int
        Number of restarts allowed after the first inner search completes (``>= 0``).
    random_state : Callable[[], S]
        Zero-argument factory producing the starting state of each restart.
    expand, rng
        Forwarded to every inner :class:`HillClimbing`.

    Notes
    -----
    The best state is recorded when a restart fires, from the state the completed inner
    search ended in. The final inner search's result is available through :attr:`state`
    and is not folded into :attr:`best_state`.
    """

    name = "random-restart"

    def __init__(
        self,
        state: S,
        heuristic: Heuristic[S],
        restarts: int,
        random_state: StateFactory[S],
        *,
        expand: ExpandFn[S] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(state, heuristic, expand=expand, rng=rng)
        if isinstance(restarts, bool) or not isinstance(restarts, int) or restarts < 0:
            raise HillClimbValueError(f"restarts must be a non-negative integer, got {restarts!r}.")
        if random_state is None or not callable(random_state):
            raise HillClimbValueError("random_state must be a zero-argument callable.")
        self._random_state = random_state
        self._remaining_restarts = restarts
        self._restarts_done = 0
        self._best_state: S | None = None
        self._inner: HillClimbing[S] = HillClimbing(state, heuristic, **self._child_kwargs())

    @property
    def best_state(self) -> S | None:
        """Best state seen when a restart fired; ``None`` before the first restart."""
        return self._best_state

    def get_best_state(self) -> S | None:
        return self._best_state

    @property
    def remaining_restarts(self) -> int:
        return self._remaining_restarts

    def get_remaining_restarts(self) -> int:
        return self._remaining_restarts

    @property
    def restarts(self) -> int:
        """Restarts performed so far."""
        return self._restarts_done

    @property
    def inner(self) -> HillClimbing[S]:
        return self._inner

    def _record_best(self, candidate: S) -> None:
        if self._best_state is None:
            self._best_state = candidate
        elif self._inner.evaluate(candidate) > self._inner.evaluate(self._best_state):
            self._best_state = candidate

    def _restart(self) -> None:
        self._record_best(self._state)
        self._inner = HillClimbing(
            self._random_state(), self._inner.heuristic, **self._child_kwargs()
        )
        self._remaining_restarts -= 1
        self._restarts_done += 1

    def _step(self) -> S:
        if self._inner.is_completed and self._remaining_restarts >= 0:
            self._restart()

        self._state = self._inner.iterate_once()

        if self._remaining_restarts == 0 and self._inner.is_completed:
            self._mark_completed()
        return self._state
