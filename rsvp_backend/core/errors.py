"""Error taxonomy for lookup and submission requests.

Every error carries the HTTP status and the user-facing message it is
reported with. Upstream errors also carry a diagnostic string for
operators; the message itself stays generic.
"""


class RSVPError(Exception):
    """Base class for errors reported back to the requester."""

    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: str | None = None, details: str | None = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ClientInputError(RSVPError):
    """A required query or payload field is missing or malformed."""

    status_code = 400
    message = "Invalid request."


class CutoffExceededError(RSVPError):
    """The RSVP window has closed."""

    status_code = 403
    message = "Cutoff passed"


class UpstreamStoreError(RSVPError):
    """Reading from or writing to the spreadsheet failed."""

    status_code = 500
    message = "Server error"


class StoreNotConfiguredError(UpstreamStoreError):
    """Spreadsheet id or service account credentials are not set."""


class NotificationError(Exception):
    """Delivery of a confirmation notice failed.

    Only raised inside the dispatcher, which converts it into a
    NotificationResult. It is never reported as a request error.
    """
