"""Spreadsheet-backed storage for the guest roster."""
import logging

from rsvp_backend.core.errors import StoreNotConfiguredError, UpstreamStoreError
from rsvp_backend.sheets.client import get_sheets_service

logger = logging.getLogger(__name__)

USER_ENTERED = "USER_ENTERED"


class SheetStore:
    """Key-range reads and batched writes against one spreadsheet.

    The Sheets service is built on first use, so a request that never
    touches the sheet never needs credentials. Any read or write failure
    (API errors, credential refresh errors, network errors) is raised as
    UpstreamStoreError with the upstream message as diagnostic detail.
    """

    def __init__(self, spreadsheet_id: str, credentials_json: str = "", service=None):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_json = credentials_json
        self._service = service

    @property
    def service(self):
        if not self.spreadsheet_id:
            raise StoreNotConfiguredError(details="Missing SPREADSHEET_ID env var")
        if self._service is None:
            self._service = get_sheets_service(self.credentials_json)
        return self._service

    def read_range(self, range_spec: str) -> list[list[str]]:
        """Return the rows of a range. Rows may be shorter than the range is wide."""
        service = self.service
        try:
            result = (
                service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_spec)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to read {range_spec}: {e}")
            raise UpstreamStoreError(details=str(e)) from e

        return result.get("values", [])

    def batch_write(self, updates: list[tuple[str, str]], mode: str = USER_ENTERED) -> None:
        """Write every (cell address, value) pair in one batchUpdate call.

        The API applies the whole batch or none of it.
        """
        body = {
            "valueInputOption": mode,
            "data": [{"range": address, "values": [[value]]} for address, value in updates],
        }
        service = self.service
        try:
            (
                service.spreadsheets()
                .values()
                .batchUpdate(spreadsheetId=self.spreadsheet_id, body=body)
                .execute()
            )
        except Exception as e:
            logger.error(f"Batch write of {len(updates)} cells failed: {e}")
            raise UpstreamStoreError(details=str(e)) from e
