"""Chat-style front end for the ``run`` and ``status`` commands."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from src.core import replies
from src.core.errors import MoveRunnerError
from src.core.moves import describe_exception
from src.core.permissions import has_permission
from src.core.result_aggregation import format_run_summary
from src.core.validators import normalize_config_name
from src.models.run_history import ErrorNotification, RunHistoryEntry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from src.services.batch_runner import BatchRunner
    from src.services.protocols import ErrorNotifierProtocol
    from src.services.run_history import RunHistory

logger = structlog.get_logger(__name__)


class RunCommandHandler:
    """Checks permissions, runs batches, and keeps the run history current."""

    def __init__(
        self,
        runner: BatchRunner,
        history: RunHistory,
        notifier: ErrorNotifierProtocol | None = None,
        allowed_role_ids: frozenset[str] = frozenset(),
    ) -> None:
        self.runner = runner
        self.history = history
        self.notifier = notifier
        self.allowed_role_ids = allowed_role_ids

    def handle_run(
        self,
        name: str,
        user_tag: str,
        member_roles: Iterable[str] = (),
        reply: Callable[[str], None] | None = None,
    ) -> str:
        """Run the named config and return the final reply.

        ``reply`` receives the start message before the batch begins.
        """
        if not has_permission(member_roles, self.allowed_role_ids):
            logger.info("run_permission_denied", user_tag=user_tag, config_name=name)
            return replies.PERMISSION_DENIED

        config_name = normalize_config_name(name)
        if config_name is None:
            return replies.render_invalid_name()

        if reply is not None:
            reply(replies.render_start(config_name))

        start = time.monotonic()
        try:
            result = self.runner.run(config_name)
        except MoveRunnerError as exc:
            logger.error(
                "run_command_failed",
                config_name=config_name,
                user_tag=user_tag,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return self._record_failure(config_name, user_tag, exc, _elapsed_ms(start))
        except Exception as exc:
            logger.exception(
                "run_command_crashed",
                config_name=config_name,
                user_tag=user_tag,
                error_type=type(exc).__name__,
            )
            return self._record_failure(config_name, user_tag, exc, _elapsed_ms(start))

        self.history.record(
            RunHistoryEntry(
                name=config_name,
                ok=result.ok,
                duration_ms=_elapsed_ms(start),
                user_tag=user_tag,
                summary=format_run_summary(result),
            )
        )
        return replies.render_result(config_name, result)

    def handle_status(self, limit: int | None = None) -> str:
        return replies.render_status(self.history.recent(limit))

    def _record_failure(
        self,
        config_name: str,
        user_tag: str,
        exc: Exception,
        duration_ms: int,
    ) -> str:
        """Record a failed run in history, notify, and render the reply."""
        error = describe_exception(exc)
        self.history.record(
            RunHistoryEntry(
                name=config_name,
                ok=False,
                duration_ms=duration_ms,
                user_tag=user_tag,
                summary=error,
            )
        )
        if self.notifier is not None:
            self.notifier.notify(
                ErrorNotification(
                    name=config_name,
                    user_tag=user_tag,
                    error=error,
                    duration_ms=duration_ms,
                )
            )
        return replies.render_failure(error)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
