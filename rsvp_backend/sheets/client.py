"""Google Sheets API client using service account credentials."""
import json
import logging

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from rsvp_backend.core.errors import StoreNotConfiguredError

logger = logging.getLogger(__name__)

# Scopes for Google Sheets API
SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def get_credentials(credentials_json: str) -> Credentials:
    """Load service account credentials from a JSON key string."""
    if not credentials_json:
        raise StoreNotConfiguredError(details="Missing GOOGLE_CREDENTIALS env var")

    try:
        info = json.loads(credentials_json)
    except json.JSONDecodeError as e:
        logger.error(f"GOOGLE_CREDENTIALS is not valid JSON: {e}")
        raise StoreNotConfiguredError(details="GOOGLE_CREDENTIALS is not valid JSON") from e

    try:
        return Credentials.from_service_account_info(info, scopes=SCOPES)
    except ValueError as e:
        logger.error(f"GOOGLE_CREDENTIALS is not a service account key: {e}")
        raise StoreNotConfiguredError(details="GOOGLE_CREDENTIALS is not a service account key") from e


def get_sheets_service(credentials_json: str):
    """Build an authenticated Sheets API service.

    A new service is built per request; nothing is cached between requests.
    """
    creds = get_credentials(credentials_json)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


def has_valid_credentials(spreadsheet_id: str, credentials_json: str) -> bool:
    """Check if the spreadsheet and service account are configured."""
    return bool(spreadsheet_id and credentials_json)
