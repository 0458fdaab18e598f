"""Demonstration problems implementing the state and heuristic contracts."""

from hillclimb.config.models import ProblemSettings
from hillclimb.core.errors import HillClimbValueError
from hillclimb.core.types import RandomSource

from .contract import SearchProblem
from .queens import QueensBoard, build_queens_problem, queens_heuristic
from .sequence import SequenceWalk, build_sequence_problem, sequence_value


def build_problem(settings: ProblemSettings, rng: RandomSource) -> SearchProblem:
    """Build the problem described by ``settings``."""
    if settings.name == "sequence":
        return build_sequence_problem(settings.values, settings.start)
    if settings.name == "queens":
        return build_queens_problem(settings.size, rng)
    raise HillClimbValueError(f"Unknown problem '{settings.name}'")


__all__ = [
    "SearchProblem",
    "QueensBoard",
    "SequenceWalk",
    "build_problem",
    "build_queens_problem",
    "build_sequence_problem",
    "queens_heuristic",
    "sequence_value",
]
