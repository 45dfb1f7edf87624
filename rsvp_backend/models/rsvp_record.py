"""RSVP record model for the seven write-back columns.

Submissions and saved rows both use the sheet's column letters as keys
(E through K). Values are free text; the only coercion applied is
trimming, turning missing values into empty strings and rendering
numbers as text.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RsvpRecord(BaseModel):
    """Attendance details for one party.

    Attributes:
        attending: Attendance flag, usually "Y" or "N" (column E).
        headcount: Number of guests coming (column F).
        attendees: Semicolon-separated names of guests coming (column G).
        meals: Semicolon-separated meal choices (column H).
        ages: Semicolon-separated ages, for children (column I).
        email: Contact email for the confirmation notice (column J).
            Must be non-empty.
        phone: Optional contact phone (column K).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    attending: str = Field(alias="E")
    headcount: str = Field(alias="F")
    attendees: str = Field(alias="G")
    meals: str = Field(alias="H")
    ages: str = Field(alias="I")
    email: str = Field(alias="J")
    phone: str = Field(alias="K")

    @field_validator("*", mode="before")
    @classmethod
    def as_trimmed_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("email")
    @classmethod
    def email_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Email is required.")
        return value

    def cells(self) -> list[tuple[str, str]]:
        """Return (column letter, value) pairs in column order."""
        return [
            (field.alias, getattr(self, name))
            for name, field in type(self).model_fields.items()
        ]


# Column letters of the write-back fields, in sheet order.
WRITE_BACK_COLUMNS: tuple[str, ...] = tuple(
    field.alias for field in RsvpRecord.model_fields.values()
)
