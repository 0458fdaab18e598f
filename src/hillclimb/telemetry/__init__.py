"""Structured run telemetry for search drivers."""

from .jsonl import append_jsonl, read_jsonl
from .run_logger import RunTelemetryLogger, StepRecord

__all__ = ["RunTelemetryLogger", "StepRecord", "append_jsonl", "read_jsonl"]
