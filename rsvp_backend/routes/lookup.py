"""Lookup route: find a guest's party by last name and postal code."""
import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rsvp_backend.core.cutoff import CutoffGate
from rsvp_backend.core.dependencies import get_cutoff_gate, get_store, roster_range
from rsvp_backend.models import MatchQuery, Party
from rsvp_backend.roster.matcher import find_matches
from rsvp_backend.sheets.store import SheetStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["rsvp"])


class LookupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    last_name: str | None = Field(default=None, alias="lastName")
    postal_code: str | None = Field(default=None, alias="zip")


class LookupResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cutoff_passed: bool = False
    valid: bool = False
    matches: list[Party] = Field(default_factory=list)


@router.post("/validate", response_model=LookupResponse)
async def lookup_party(
    body: LookupRequest,
    gate: CutoffGate = Depends(get_cutoff_gate),
    store: SheetStore = Depends(get_store),
):
    """
    Look up the parties a guest belongs to.

    Matches the last name against every roster row, case-insensitively.
    The postal code narrows the result only when supplied. Every matching
    party is returned with the row number used to submit its RSVP.

    Once the cutoff has passed the roster is not read and the response
    reports `cutoffPassed` with no matches, so the client can tell
    "too late" apart from "not found".
    """
    query = MatchQuery.from_input(body.last_name, body.postal_code)

    if gate.has_passed():
        logger.info("Lookup after cutoff, returning no matches")
        return LookupResponse(cutoff_passed=True, valid=False, matches=[])

    rows = await run_in_threadpool(store.read_range, roster_range())
    matches = find_matches(rows, query)
    logger.info(f"Lookup matched {len(matches)} of {len(rows)} roster rows")

    return LookupResponse(cutoff_passed=False, valid=bool(matches), matches=matches)
