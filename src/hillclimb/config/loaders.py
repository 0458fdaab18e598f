"""Run configuration loading utilities (YAML)."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from hillclimb.config.models import RunConfig
from hillclimb.core.errors import HillClimbValueError

__all__ = ["load_run_config"]


def load_run_config(path: str | Path) -> RunConfig:
    """Read a YAML run configuration.

    Relative ``telemetry_log`` paths are resolved against the configuration file's directory.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise HillClimbValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    try:
        config = RunConfig.model_validate(data)
    except ValidationError as exc:
        raise HillClimbValueError(f"Invalid run configuration in {path}:\n{exc}") from exc
    if config.telemetry_log is not None and not config.telemetry_log.is_absolute():
        config = config.model_copy(update={"telemetry_log": path.parent / config.telemetry_log})
    return config
