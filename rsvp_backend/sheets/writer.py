"""Validate RSVP submissions and write them back to the party's row."""
import logging
from collections.abc import Mapping

from pydantic import ValidationError

from rsvp_backend.core.errors import ClientInputError
from rsvp_backend.models import FIRST_DATA_ROW, RsvpRecord
from rsvp_backend.sheets.store import USER_ENTERED

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    """Turn a pydantic error into one specific client message."""
    missing, unknown = [], []
    for detail in error.errors():
        field = str(detail["loc"][0]) if detail["loc"] else ""
        if detail["type"] == "missing":
            missing.append(field)
        elif detail["type"] == "extra_forbidden":
            unknown.append(field)
        elif field in ("J", "email"):
            return "Email is required."
    if missing:
        return f"Missing RSVP field(s): {', '.join(sorted(missing))}."
    if unknown:
        return f"Unknown RSVP field(s): {', '.join(sorted(unknown))}."
    return "Invalid RSVP values."


class SubmissionWriter:
    """Maps a validated RSVP onto the fixed E..K columns of one row."""

    def __init__(self, store, tab_name: str):
        self.store = store
        self.tab_name = tab_name

    @staticmethod
    def validate(values: Mapping | None) -> RsvpRecord:
        """Build an RsvpRecord from a submission payload.

        Raises ClientInputError for missing or unknown keys and for an
        empty email.
        """
        if not isinstance(values, Mapping):
            raise ClientInputError("Missing rowNumber or values.")
        try:
            return RsvpRecord.model_validate(dict(values))
        except ValidationError as e:
            raise ClientInputError(_describe_validation_error(e)) from e

    def prepare_write(self, row_number: int, record: RsvpRecord) -> list[tuple[str, str]]:
        """Return the seven (cell address, value) pairs for a row."""
        if row_number < FIRST_DATA_ROW:
            raise ClientInputError(f"rowNumber must be {FIRST_DATA_ROW} or greater.")
        return [
            (f"{self.tab_name}!{column}{row_number}", value)
            for column, value in record.cells()
        ]

    def write(self, row_number: int, record: RsvpRecord) -> list[tuple[str, str]]:
        """Persist the record in a single batched write. Returns the updates sent."""
        updates = self.prepare_write(row_number, record)
        self.store.batch_write(updates, mode=USER_ENTERED)
        logger.info(f"Saved RSVP for row {row_number}")
        return updates
