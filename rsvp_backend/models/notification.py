"""Outcome of a confirmation notice."""

from pydantic import BaseModel


class NotificationResult(BaseModel):
    """Informational result of a delivery attempt.

    This is a plain value: a failed delivery is reported through `ok` and
    `details`, never raised.

    Attributes:
        skipped: True when the mailer is not configured and nothing was sent.
        ok: Whether the provider accepted the message. None when skipped.
        details: Raw provider response or transport error on failure.
    """
    skipped: bool = False
    ok: bool | None = None
    details: str | None = None
