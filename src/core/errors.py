"""Exceptions that abort a whole batch run."""

from __future__ import annotations


class MoveRunnerError(Exception):
    """Base class for errors that abort a run before any move executes."""


class ConfigurationError(MoveRunnerError):
    """A required setting is missing or empty."""


class ConfigFetchError(MoveRunnerError):
    """The config store was unreachable or answered with a non-success status."""

    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        if status is not None:
            message = f"Config download failed ({status})"
        else:
            message = f"Config download failed ({reason or 'no response'})"
        super().__init__(message)


class ConfigParseError(MoveRunnerError):
    """The config store answered with a body that is not valid JSON."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Config is not valid JSON: {reason}")
