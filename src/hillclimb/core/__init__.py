"""Core contracts shared across hillclimb modules."""

from .errors import EmptyNeighborhoodError, HillClimbError, HillClimbValueError
from .types import ExpandableState, ExpandFn, Heuristic, RandomSource, StateFactory

__all__ = [
    "EmptyNeighborhoodError",
    "HillClimbError",
    "HillClimbValueError",
    "ExpandableState",
    "ExpandFn",
    "Heuristic",
    "RandomSource",
    "StateFactory",
]
