"""Pydantic data models for the move runner."""

from src.models.config import Settings
from src.models.move_config import DEFAULT_API_URL, ExecutionParams, MoveConfig
from src.models.run_history import ErrorNotification, RunHistoryEntry
from src.models.run_result import MAX_REPORTED_ERRORS, RunResult

__all__ = [
    "DEFAULT_API_URL",
    "MAX_REPORTED_ERRORS",
    "ErrorNotification",
    "ExecutionParams",
    "MoveConfig",
    "RunHistoryEntry",
    "RunResult",
    "Settings",
]
