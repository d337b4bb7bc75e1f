"""Client for the remote move API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import requests
import structlog

from src.core.moves import build_move_query

if TYPE_CHECKING:
    from collections.abc import Mapping

    from src.models.move_config import ExecutionParams

logger = structlog.get_logger(__name__)


class MoveApiClient:
    """Sends one move request per call. No retries."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def move(
        self,
        params: ExecutionParams,
        move_from: Mapping[str, Any],
        move_to: Mapping[str, Any],
    ) -> Any:
        """Request a move and return the parsed response body.

        Raises on missing coordinates, transport failure, or a non-JSON
        body. Classifying the body is left to the caller.
        """
        query = build_move_query(params, move_from, move_to)
        logger.debug(
            "move_request",
            api_url=params.api_url,
            from_position=[query["fromX"], query["fromY"], query["fromZ"]],
            to_position=[query["toX"], query["toY"], query["toZ"]],
            load_chunks=query["loadChunks"],
        )
        response = self.session.get(params.api_url, params=query, timeout=self.timeout)
        return response.json()
