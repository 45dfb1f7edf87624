"""Application configuration via environment variables."""
from datetime import UTC, datetime

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or .env file."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "RSVP Guest Backend"
    debug: bool = False
    log_dir: str = "~/.logs/rsvp"

    # Server
    allowed_origins: str = "*"  # Comma-separated origins, or "*" for all

    # Google Sheets
    spreadsheet_id: str = ""
    google_credentials: str = ""  # Service account key as a JSON string
    sheet_tab_name: str = "Guests"

    # RSVP window: March 7, 2026 11:59 PM PST
    rsvp_cutoff: datetime = datetime(2026, 3, 8, 7, 59, tzinfo=UTC)

    display_timezone: str = "America/Los_Angeles"  # Used when showing the cutoff to guests

    # Confirmation email (Resend)
    resend_api_key: str = ""
    resend_from: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    email_timeout_seconds: float = 10.0
    confirmation_subject: str = "RSVP Confirmation"
    site_url: str = ""

    @field_validator("rsvp_cutoff")
    @classmethod
    def cutoff_in_utc(cls, value: datetime) -> datetime:
        """A cutoff given without an offset is read as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


settings = Settings()
