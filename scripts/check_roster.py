#!/usr/bin/env python3
"""
Audit the guest roster as the lookup endpoint will see it.

Reads the live sheet and prints every parsed party, flagging rows that
guests will not be able to find or that will produce several matches.

Usage:
    python scripts/check_roster.py [--quiet]

Options:
    --quiet    Only print rows with problems and the summary
"""
import sys
from collections import defaultdict
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rsvp_backend.core.config import settings
from rsvp_backend.core.dependencies import get_store, roster_range
from rsvp_backend.core.errors import UpstreamStoreError
from rsvp_backend.roster.matcher import iter_roster
from rsvp_backend.roster.text import parse_list
from rsvp_backend.sheets.client import has_valid_credentials


def main(quiet: bool = False):
    """Parse every roster row and report problems."""
    if not has_valid_credentials(settings.spreadsheet_id, settings.google_credentials):
        print("Error: SPREADSHEET_ID and GOOGLE_CREDENTIALS must be set.")
        sys.exit(1)

    try:
        rows = get_store().read_range(roster_range())
    except UpstreamStoreError as e:
        print(f"Error: Could not read roster: {e.details}")
        sys.exit(1)

    if not rows:
        print("Roster is empty.")
        return

    parties_by_last_name = defaultdict(list)
    problem_count = 0

    for party, row in zip(iter_roster(rows), rows):
        problems = []
        raw_tokens = parse_list(row[1] if len(row) > 1 else "")
        if not party.members:
            problems.append("no parsable guests")
        elif len(party.members) < len(raw_tokens):
            problems.append(f"{len(raw_tokens) - len(party.members)} name token(s) dropped")
        if not party.postal_codes:
            problems.append("no postal codes (only matches lookups without a postal code)")

        for last_name in party.last_names:
            parties_by_last_name[last_name].append(party.row_number)

        if problems:
            problem_count += 1
        if problems or not quiet:
            names = "; ".join(member.display_name for member in party.members) or "(none)"
            status = "RSVP saved" if party.saved_rsvp else "no RSVP"
            print(f"Row {party.row_number}: {names} [{status}]")
            for problem in problems:
                print(f"  ! {problem}")

    shared = {name: rows_ for name, rows_ in parties_by_last_name.items() if len(rows_) > 1}
    if shared:
        print(f"\n=== {len(shared)} last names appear in more than one party ===\n")
        for name, row_numbers in sorted(shared.items()):
            print(f"  {name}: rows {', '.join(str(n) for n in row_numbers)}")

    print(f"\nChecked {len(rows)} rows: {problem_count} with problems")


if __name__ == "__main__":
    quiet = "--quiet" in sys.argv
    main(quiet=quiet)
