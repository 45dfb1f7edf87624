"""Match a lookup query against the guest roster."""
import logging
from collections.abc import Iterable

from rsvp_backend.models import FIRST_DATA_ROW, MatchQuery, Party
from rsvp_backend.roster.parser import parse_roster_row

logger = logging.getLogger(__name__)


def iter_roster(rows: Iterable[list]) -> Iterable[Party]:
    """Parse raw data rows (starting at sheet row 2) into parties, in row order."""
    for index, row in enumerate(rows):
        yield parse_roster_row(row, row_number=index + FIRST_DATA_ROW)


def party_matches(party: Party, query: MatchQuery) -> bool:
    """
    Check whether a party qualifies for a query.

    The last name must match one of the party's members, ignoring case.
    The postal code only filters when the query carries one; it must then
    equal one of the party's normalized codes exactly.
    """
    if query.last_name_lower not in party.last_names:
        return False
    if query.postal_code_normalized and query.postal_code_normalized not in party.postal_codes:
        return False
    return True


def find_matches(rows: Iterable[list], query: MatchQuery) -> list[Party]:
    """Return every qualifying party in original row order."""
    matches = [party for party in iter_roster(rows) if party_matches(party, query)]
    logger.debug(
        f"Lookup for '{query.last_name_lower}' "
        f"(postal code filter: {bool(query.postal_code_normalized)}) matched {len(matches)} parties"
    )
    return matches
