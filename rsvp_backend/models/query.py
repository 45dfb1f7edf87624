"""Lookup query model."""

from pydantic import BaseModel, ConfigDict

from rsvp_backend.core.errors import ClientInputError
from rsvp_backend.roster.text import norm_lower, normalize_postal_code


class MatchQuery(BaseModel):
    """Normalized lookup criteria.

    The postal code is a filter applied only when present.
    """
    model_config = ConfigDict(frozen=True)

    last_name_lower: str
    postal_code_normalized: str = ""

    @classmethod
    def from_input(cls, last_name: str | None, postal_code: str | None = None) -> "MatchQuery":
        last_name_lower = norm_lower(last_name)
        if not last_name_lower:
            raise ClientInputError("Please provide lastName.")
        return cls(
            last_name_lower=last_name_lower,
            postal_code_normalized=normalize_postal_code(postal_code),
        )
