"""Submission route: save a party's RSVP and confirm by email."""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rsvp_backend.core.config import settings
from rsvp_backend.core.cutoff import CutoffGate
from rsvp_backend.core.dependencies import get_cutoff_gate, get_dispatcher, get_writer
from rsvp_backend.core.errors import ClientInputError, CutoffExceededError
from rsvp_backend.models import NotificationResult
from rsvp_backend.notify.dispatcher import NotificationDispatcher
from rsvp_backend.notify.messages import format_deadline, render_confirmation
from rsvp_backend.sheets.writer import SubmissionWriter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["rsvp"])


class SubmitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    row_number: int | None = Field(default=None, alias="rowNumber")
    values: dict[str, Any] | None = None


class SubmitResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ok: bool = True
    email: str
    email_result: NotificationResult


def send_confirmation(dispatcher: NotificationDispatcher, to: str) -> NotificationResult:
    """Render and send the confirmation notice.

    Runs after the RSVP is saved, so any failure here, including a bad
    timezone or a missing template, is reported in the result instead of
    being raised.
    """
    try:
        text, html = render_confirmation(
            deadline=format_deadline(settings.rsvp_cutoff, settings.display_timezone),
            site_url=settings.site_url,
        )
        return dispatcher.notify(to, settings.confirmation_subject, text, html)
    except Exception as e:
        logger.error(f"Confirmation email to {to} failed: {e}")
        return NotificationResult(ok=False, details=str(e))


@router.post("/submit", response_model=SubmitResponse, response_model_exclude_none=True)
async def submit_rsvp(
    body: SubmitRequest,
    gate: CutoffGate = Depends(get_cutoff_gate),
    writer: SubmissionWriter = Depends(get_writer),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """
    Save an RSVP to the party's row, then send a confirmation.

    Rejected with 403 after the cutoff and with 400 when the row number,
    the values, or the email are missing; nothing is written in either
    case. The seven RSVP cells are written in one batch. The confirmation
    email is sent afterwards and its outcome is reported in `emailResult`
    without affecting `ok`.
    """
    if gate.has_passed():
        raise CutoffExceededError()

    if not body.row_number or body.values is None:
        raise ClientInputError("Missing rowNumber or values.")

    record = writer.validate(body.values)
    await run_in_threadpool(writer.write, body.row_number, record)

    email_result = await run_in_threadpool(send_confirmation, dispatcher, record.email)
    logger.info(
        f"RSVP submitted for row {body.row_number}; email "
        f"{'skipped' if email_result.skipped else 'ok' if email_result.ok else 'failed'}"
    )

    return SubmitResponse(ok=True, email=record.email, email_result=email_result)
