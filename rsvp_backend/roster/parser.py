"""Parse guest roster rows from the sheet.

Expected sheet layout (header in row 1):
    A = Party ID (optional)
    B = Names, e.g. "Smith, John, Jr; Smith, Jane" (suffix optional)
    C = Postal codes, e.g. "07001;07002" or "07001"
    D = Seats reserved
    E..K = Saved RSVP (see RsvpRecord)
"""
from rsvp_backend.models import WRITE_BACK_COLUMNS, Party, Person, RsvpRecord
from rsvp_backend.roster.text import norm, normalize_postal_code, parse_list

PARTY_ID_COL = 0
NAMES_COL = 1
POSTAL_CODES_COL = 2
SEATS_COL = 3
RSVP_START_COL = 4
ROW_WIDTH = RSVP_START_COL + len(WRITE_BACK_COLUMNS)


def format_display_name(first_name: str, last_name: str, suffix: str = "") -> str:
    """Render "First Last", appending ", Suffix" only when a suffix is present."""
    display = " ".join(part for part in (first_name, last_name) if part)
    if suffix:
        display = f"{display}, {suffix}"
    return display.strip()


def parse_name(token: str) -> Person:
    """
    Parse one "Last, First[, Suffix]" token.

    Never fails: a malformed token gives a Person with empty fields, which
    callers filter out.
    """
    parts = [part.strip() for part in norm(token).split(",") if part.strip()]
    last_name = parts[0] if len(parts) > 0 else ""
    first_name = parts[1] if len(parts) > 1 else ""
    suffix = parts[2] if len(parts) > 2 else ""
    return Person(
        last_name=last_name,
        first_name=first_name,
        suffix=suffix,
        display_name=format_display_name(first_name, last_name, suffix),
    )


def parse_names_cell(names_cell: str) -> list[Person]:
    people = (parse_name(token) for token in parse_list(names_cell, ";"))
    return [person for person in people if not person.is_blank]


def parse_postal_codes_cell(postal_codes_cell: str) -> set[str]:
    codes = (normalize_postal_code(code) for code in parse_list(postal_codes_cell, ";"))
    return {code for code in codes if code}


def parse_party(names_cell: str, postal_codes_cell: str) -> tuple[list[Person], set[str]]:
    """Parse a party's names and postal codes cells into (members, postal_codes)."""
    return parse_names_cell(names_cell), parse_postal_codes_cell(postal_codes_cell)


def parse_saved_rsvp(cells: list[str]) -> RsvpRecord | None:
    """Read the E..K cells of a row; None when no RSVP has been saved yet."""
    values = dict(zip(WRITE_BACK_COLUMNS, cells))
    if not norm(values.get("J")):
        return None
    return RsvpRecord.model_validate(values)


def pad_row(row: list | None, width: int = ROW_WIDTH) -> list[str]:
    """Sheets omits trailing empty cells; treat them as empty strings."""
    cells = [norm(cell) for cell in (row or [])]
    return cells + [""] * (width - len(cells))


def parse_roster_row(row: list | None, row_number: int) -> Party:
    """Build a Party from one raw sheet row.

    `row_number` is assigned here and carried unchanged to write-back.
    """
    cells = pad_row(row)
    members, postal_codes = parse_party(cells[NAMES_COL], cells[POSTAL_CODES_COL])
    return Party(
        party_id=cells[PARTY_ID_COL],
        row_number=row_number,
        members=members,
        postal_codes=postal_codes,
        seats_reserved=cells[SEATS_COL],
        saved_rsvp=parse_saved_rsvp(cells[RSVP_START_COL:ROW_WIDTH]),
    )
