"""Service protocols defining interfaces for dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from src.models.move_config import ExecutionParams
    from src.models.run_history import ErrorNotification


class ConfigFetcherProtocol(Protocol):
    """Protocol for retrieving named config documents."""

    def fetch_config(self, base_url: str, config_name: str) -> Any: ...


class MoveClientProtocol(Protocol):
    """Protocol for the remote move API."""

    def move(
        self,
        params: ExecutionParams,
        move_from: Mapping[str, Any],
        move_to: Mapping[str, Any],
    ) -> Any: ...


class ErrorNotifierProtocol(Protocol):
    """Protocol for delivering run failure notifications."""

    def notify(self, notification: ErrorNotification) -> bool: ...
