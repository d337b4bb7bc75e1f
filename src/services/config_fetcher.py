"""Retrieves named move configs from the remote config store."""

from __future__ import annotations

from typing import Any

import requests
import structlog

from src.core.errors import ConfigFetchError, ConfigParseError, ConfigurationError
from src.core.moves import build_config_url, normalize_base_url

logger = structlog.get_logger(__name__)

USER_AGENT = "discord-control-bot"


class ConfigFetcher:
    """Client for the config store. One attempt per fetch, no retries."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_config(self, base_url: str, config_name: str) -> Any:
        """Fetch and parse ``<base_url>/<config_name>.json``.

        Raises:
            ConfigurationError: base_url is empty after trimming.
            ConfigFetchError: the store was unreachable or returned non-2xx.
            ConfigParseError: the body is not valid JSON.
        """
        base = normalize_base_url(base_url)
        if not base:
            msg = "Config base URL is missing or empty"
            raise ConfigurationError(msg)

        url = build_config_url(base, config_name)
        logger.info("config_url_resolved", url=url)

        try:
            response = self.session.get(
                url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("config_fetch_failed", url=url, error=str(exc))
            raise ConfigFetchError(url, reason=str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.error("config_fetch_failed", url=url, status=response.status_code)
            raise ConfigFetchError(url, status=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("config_parse_failed", url=url, error=str(exc))
            raise ConfigParseError(url, str(exc)) from exc
