"""Config-driven batch runner: fetch a move config and execute its moves in order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from src.core.errors import ConfigurationError
from src.core.moves import (
    classify_move_response,
    describe_exception,
    format_step_error,
    normalize_base_url,
    parse_move_config,
    resolve_execution_params,
    split_move,
)
from src.core.result_aggregation import build_run_result
from src.models.run_result import RunResult

if TYPE_CHECKING:
    from src.models.config import Settings
    from src.services.protocols import ConfigFetcherProtocol, MoveClientProtocol

logger = structlog.get_logger(__name__)


class BatchRunner:
    """Runs every move of a named config against the move API.

    Holds no per-run state, so one instance can serve overlapping runs.
    """

    def __init__(
        self,
        settings: Settings,
        config_fetcher: ConfigFetcherProtocol,
        move_client: MoveClientProtocol,
    ) -> None:
        self.settings = settings
        self.config_fetcher = config_fetcher
        self.move_client = move_client

    def run(self, config_name: str) -> RunResult:
        """Execute the named config and aggregate the outcome.

        Raises:
            ConfigurationError: API key or config base URL is missing.
            ConfigFetchError: the config could not be retrieved.
            ConfigParseError: the config is not valid JSON.

        Step failures never raise; they are reported in ``RunResult.errors``.
        """
        api_key = self.settings.api_key
        base_url = normalize_base_url(self.settings.config_base_url)
        if not api_key:
            msg = "API_KEY is missing"
            raise ConfigurationError(msg)
        if not base_url:
            msg = "CONFIG_BASE_URL is missing or empty"
            raise ConfigurationError(msg)

        document = self.config_fetcher.fetch_config(base_url, config_name)

        config = parse_move_config(document)
        params = resolve_execution_params(config, api_key, self.settings.api_url)
        moves = config.moves

        if not moves:
            logger.info("batch_run_empty", config_name=config_name)
            return RunResult.empty()

        logger.info(
            "batch_run_started",
            config_name=config_name,
            total=len(moves),
            api_url=params.api_url,
            load_chunks=params.load_chunks,
        )

        ok_count = 0
        errors: list[str] = []

        for index, move in enumerate(moves):
            try:
                move_from, move_to = split_move(move)
                body = self.move_client.move(params, move_from, move_to)
                success, reason = classify_move_response(body)
            except Exception as exc:
                success, reason = False, describe_exception(exc)

            if success:
                ok_count += 1
                continue

            errors.append(format_step_error(index, reason or ""))
            logger.warning(
                "move_step_failed",
                config_name=config_name,
                step=index + 1,
                reason=reason,
            )

        result = build_run_result(len(moves), ok_count, errors)
        logger.info(
            "batch_run_completed",
            config_name=config_name,
            total=result.total,
            ok_count=result.ok_count,
            fail_count=result.fail_count,
        )
        return result
