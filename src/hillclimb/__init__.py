"""Generic iterative local search: hill climbing variants and simulated annealing."""

from hillclimb.core import (
    EmptyNeighborhoodError,
    ExpandableState,
    HillClimbError,
    HillClimbValueError,
    RandomSource,
)
from hillclimb.search import (
    FirstChoiceHillClimbing,
    HillClimbing,
    IterativeSearch,
    RandomRestartHillClimbing,
    SimulatedAnnealing,
    run_search,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyNeighborhoodError",
    "ExpandableState",
    "HillClimbError",
    "HillClimbValueError",
    "RandomSource",
    "IterativeSearch",
    "HillClimbing",
    "FirstChoiceHillClimbing",
    "RandomRestartHillClimbing",
    "SimulatedAnnealing",
    "run_search",
]
