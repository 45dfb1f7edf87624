"""Party model for one roster row.

A party is a household or group sharing one row of the guest sheet and
one RSVP. The row number is the party's only stable identity: it is
assigned when the raw row is parsed and is the sole key used when the
party's RSVP is written back.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rsvp_backend.models.person import Person
from rsvp_backend.models.rsvp_record import RsvpRecord

# Row 1 of the sheet holds headers, so data row index 0 is sheet row 2.
FIRST_DATA_ROW = 2


class Party(BaseModel):
    """A roster row with its parsed guests.

    Attributes:
        party_id: Optional identifier from column A.
        row_number: 1-based sheet row (data index + 2).
        members: Guests in the order they appear in the names cell.
        postal_codes: Normalized postal codes accepted for lookup. Used for
            matching only and never included in responses.
        seats_reserved: Column D, passed through untouched.
        saved_rsvp: RSVP already recorded on the row, if any.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    party_id: str = ""
    row_number: int = Field(ge=FIRST_DATA_ROW)
    members: list[Person] = Field(default_factory=list)
    postal_codes: set[str] = Field(default_factory=set, exclude=True)
    seats_reserved: str = ""
    saved_rsvp: RsvpRecord | None = None

    @property
    def last_names(self) -> set[str]:
        return {member.last_name.lower() for member in self.members}
