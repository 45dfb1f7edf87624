from rsvp_backend.models.notification import NotificationResult
from rsvp_backend.models.party import FIRST_DATA_ROW, Party
from rsvp_backend.models.person import Person
from rsvp_backend.models.query import MatchQuery
from rsvp_backend.models.rsvp_record import WRITE_BACK_COLUMNS, RsvpRecord

__all__ = [
    "Person",
    "Party",
    "RsvpRecord",
    "MatchQuery",
    "NotificationResult",
    "FIRST_DATA_ROW",
    "WRITE_BACK_COLUMNS",
]
