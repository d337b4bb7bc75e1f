"""Delivers run failure notifications to a webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests
import structlog

from src.utils.retry import retry_with_logging

if TYPE_CHECKING:
    from src.models.run_history import ErrorNotification

logger = structlog.get_logger(__name__)


class WebhookErrorNotifier:
    """POSTs ErrorNotification payloads as JSON. Disabled when no URL is set."""

    def __init__(
        self,
        webhook_url: str | None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def notify(self, notification: ErrorNotification) -> bool:
        """Send a notification. Returns False if it was not delivered.

        Delivery problems are logged and never raised.
        """
        if not self.enabled:
            logger.debug("error_notification_skipped", name=notification.name)
            return False
        try:
            self._post(notification.to_payload())
        except requests.RequestException as exc:
            logger.warning(
                "error_notification_failed",
                name=notification.name,
                error=str(exc),
            )
            return False
        logger.info("error_notification_sent", name=notification.name)
        return True

    @retry_with_logging(max_attempts=3)
    def _post(self, payload: dict[str, object]) -> None:
        response = self.session.post(str(self.webhook_url), json=payload, timeout=self.timeout)
        response.raise_for_status()
