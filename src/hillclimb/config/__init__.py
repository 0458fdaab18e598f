"""Run configuration models and loaders."""

from .loaders import load_run_config
from .models import (
    ALGORITHM_SETTINGS,
    AnnealingSettings,
    FirstChoiceSettings,
    HillClimbingSettings,
    ProblemSettings,
    RandomRestartSettings,
    RunConfig,
)

__all__ = [
    "ALGORITHM_SETTINGS",
    "AnnealingSettings",
    "FirstChoiceSettings",
    "HillClimbingSettings",
    "ProblemSettings",
    "RandomRestartSettings",
    "RunConfig",
    "load_run_config",
]
