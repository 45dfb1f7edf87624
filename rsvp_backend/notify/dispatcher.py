"""Best-effort confirmation email via the Resend HTTP API."""
import logging

import requests

from rsvp_backend.core.errors import NotificationError
from rsvp_backend.models import NotificationResult

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Sends confirmation notices.

    The outcome is informational only. An unconfigured dispatcher skips
    delivery; provider rejections and transport errors are reported in the
    returned NotificationResult instead of being raised.
    """

    def __init__(
        self,
        api_key: str,
        sender: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.sender = sender
        self.api_url = api_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.sender)

    def notify(self, to: str, subject: str, text: str, html: str | None = None) -> NotificationResult:
        if not self.is_configured:
            logger.info("Mailer not configured, skipping confirmation email")
            return NotificationResult(skipped=True)

        try:
            self._deliver(to, subject, text, html)
        except NotificationError as e:
            logger.warning(f"Confirmation email to {to} failed: {e}")
            return NotificationResult(ok=False, details=str(e))

        logger.info(f"Confirmation email sent to {to}")
        return NotificationResult(ok=True)

    def _deliver(self, to: str, subject: str, text: str, html: str | None) -> None:
        """Make one delivery call; raise NotificationError on any failure."""
        payload = {"from": self.sender, "to": to, "subject": subject, "text": text}
        if html:
            payload["html"] = html

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NotificationError(str(e)) from e

        if not response.ok:
            raise NotificationError(response.text)
