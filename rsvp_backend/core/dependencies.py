"""FastAPI dependencies that build request-scoped components from settings.

These are the only places that read configuration; the components
themselves receive it through their constructors. Tests replace them
through `app.dependency_overrides`.
"""

from fastapi import Depends

from rsvp_backend.core.config import settings
from rsvp_backend.core.cutoff import CutoffGate
from rsvp_backend.notify.dispatcher import NotificationDispatcher
from rsvp_backend.sheets.store import SheetStore
from rsvp_backend.sheets.writer import SubmissionWriter


def get_cutoff_gate() -> CutoffGate:
    return CutoffGate(settings.rsvp_cutoff)


def get_store() -> SheetStore:
    """Dependency for getting the roster store."""
    return SheetStore(settings.spreadsheet_id, settings.google_credentials)


def get_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher(
        api_key=settings.resend_api_key,
        sender=settings.resend_from,
        api_url=settings.resend_api_url,
        timeout=settings.email_timeout_seconds,
    )


def roster_range() -> str:
    """A1 range of the roster data rows (A..K, starting below the header)."""
    return f"{settings.sheet_tab_name}!A2:K"


def get_writer(store: SheetStore = Depends(get_store)) -> SubmissionWriter:
    return SubmissionWriter(store, settings.sheet_tab_name)
