"""Local-search algorithms sharing the iterative search contract."""

from .annealing import SimulatedAnnealing, acceptance_probability
from .base import IterativeSearch
from .first_choice import FirstChoiceHillClimbing
from .hill_climbing import HillClimbing
from .random_restart import RandomRestartHillClimbing
from .registry import AlgorithmSpec, SearchRegistry, build_search
from .runner import run_search, search_snapshot

__all__ = [
    "IterativeSearch",
    "HillClimbing",
    "FirstChoiceHillClimbing",
    "RandomRestartHillClimbing",
    "SimulatedAnnealing",
    "acceptance_probability",
    "AlgorithmSpec",
    "SearchRegistry",
    "build_search",
    "run_search",
    "search_snapshot",
]
