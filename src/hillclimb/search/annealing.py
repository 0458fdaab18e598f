"""Simulated annealing with a ``T0 / k`` cooling schedule."""

from __future__ import annotations

import math

from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import ExpandFn, Heuristic, RandomSource, S
from hillclimb.search.base import IterativeSearch

__all__ = ["SimulatedAnnealing", "acceptance_probability"]


def acceptance_probability(delta: float, temperature: float) -> float:
    """Return the probability of moving to a neighbor whose evaluation differs by ``delta``.

    Improving moves (``delta > 0``) are always accepted. Worse or equal moves are accepted
    with probability ``exp(delta / temperature)``, which lies in ``(0, 1]``.
    """
    if delta > 0:
        return 1.0
    return math.exp(delta / temperature)


class SimulatedAnnealing(IterativeSearch[S]):
    """Accept worse neighbors with a probability that shrinks as the temperature decays.

    Parameters
    ----------
    state : S
        Initial state. Every state reached must have at least one neighbor.
    heuristic : Callable[[S], float]
        Scores a state; higher is better.
    initial_temperature : float
        Starting temperature ``T0``. Must exceed ``min_temperature``.
    min_temperature : float
        Floor below which the search stops. Must be positive.
    expand, rng
        See :class:`hillclimb.search.base.IterativeSearch`.

    Notes
    -----
    On the ``k``-th working step the temperature becomes ``T0 / k``. The search completes
    on the first call made once the temperature is at or below ``min_temperature``, so at
    most ``ceil(T0 / min_temperature)`` working steps run.
    """

    name = "simulated-annealing"

    def __init__(
        self,
        state: S,
        heuristic: Heuristic[S],
        initial_temperature: float,
        min_temperature: float,
        *,
        expand: ExpandFn[S] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(state, heuristic, expand=expand, rng=rng)
        if not min_temperature > 0:
            raise HillClimbValueError(
                f"min_temperature must be positive, got {min_temperature!r}."
            )
        if not initial_temperature > min_temperature:
            raise HillClimbValueError(
                "initial_temperature must be greater than min_temperature "
                f"({initial_temperature!r} <= {min_temperature!r})."
            )
        self._initial_temperature = float(initial_temperature)
        self._min_temperature = float(min_temperature)
        self._temperature = self._initial_temperature
        self._iteration_count = 0
        self._accepted_moves = 0

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def initial_temperature(self) -> float:
        return self._initial_temperature

    @property
    def min_temperature(self) -> float:
        return self._min_temperature

    @property
    def iteration_count(self) -> int:
        """Working steps taken; drives the cooling schedule."""
        return self._iteration_count

    @property
    def accepted_moves(self) -> int:
        return self._accepted_moves

    def _exhausted(self) -> bool:
        return self._temperature <= self._min_temperature

    def _step(self) -> S:
        self._iteration_count += 1
        self._temperature = self._initial_temperature / self._iteration_count

        current_score = self.evaluate(self._state)
        neighbor = self.random_neighbor()
        delta = self.evaluate(neighbor) - current_score

        if delta > 0 or self._rng.random() < acceptance_probability(delta, self._temperature):
            self._state = neighbor
            self._accepted_moves += 1
        return self._state
