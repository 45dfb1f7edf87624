"""Tests for roster cell parsing."""

from rsvp_backend.roster.parser import (
    format_display_name,
    pad_row,
    parse_name,
    parse_party,
    parse_roster_row,
)
from rsvp_backend.roster.text import norm_lower, normalize_postal_code, parse_list


class TestParseList:
    """Tests for delimited cell splitting."""

    def test_splits_and_trims(self):
        """Test pieces are trimmed and kept in order."""
        assert parse_list(" Smith, John ; Smith, Jane ") == ["Smith, John", "Smith, Jane"]

    def test_drops_empty_pieces(self):
        """Test empty pieces between delimiters are dropped."""
        assert parse_list("a;;  ; b;") == ["a", "b"]

    def test_empty_and_none(self):
        """Test empty or missing cells give an empty list."""
        assert parse_list("") == []
        assert parse_list("   ") == []
        assert parse_list(None) == []

    def test_custom_delimiter(self):
        """Test a delimiter other than semicolon."""
        assert parse_list("x | y", delimiter="|") == ["x", "y"]

    def test_norm_lower(self):
        assert norm_lower("  SMITH ") == "smith"
        assert norm_lower(None) == ""


class TestPostalCodes:
    """Tests for postal code normalization."""

    def test_leading_zero_preserved(self):
        """Test leading zeros survive normalization."""
        assert normalize_postal_code("07001") == "07001"

    def test_surrounding_whitespace_removed(self):
        assert normalize_postal_code(" 07001 ") == "07001"

    def test_inner_whitespace_removed(self):
        """Test whitespace inside the code is stripped as well."""
        assert normalize_postal_code("SW1A 1AA") == "SW1A1AA"

    def test_extended_format_kept(self):
        """Test other characters such as the ZIP+4 dash are kept."""
        assert normalize_postal_code("07001-1234") == "07001-1234"


class TestParseName:
    """Tests for single name token parsing."""

    def test_last_first_suffix(self):
        """Test a full "Last, First, Suffix" token."""
        person = parse_name("Smith, John, Jr")
        assert person.last_name == "Smith"
        assert person.first_name == "John"
        assert person.suffix == "Jr"
        assert person.display_name == "John Smith, Jr"

    def test_without_suffix(self):
        person = parse_name("Smith, Jane")
        assert person.suffix == ""
        assert person.display_name == "Jane Smith"

    def test_last_name_only(self):
        person = parse_name("Lee")
        assert person.last_name == "Lee"
        assert person.first_name == ""
        assert person.display_name == "Lee"

    def test_empty_parts_dropped(self):
        """Test empty comma parts do not shift fields into blanks."""
        person = parse_name(" Smith , , John ")
        assert person.last_name == "Smith"
        assert person.first_name == "John"

    def test_garbage_token(self):
        """Test a token with no name parts gives a blank person."""
        person = parse_name(" , ,")
        assert person.is_blank
        assert person.display_name == ""

    def test_display_name_policy(self):
        assert format_display_name("John", "Smith", "III") == "John Smith, III"
        assert format_display_name("", "Smith", "Jr") == "Smith, Jr"


class TestParseParty:
    """Tests for names and postal codes cells of one row."""

    def test_members_in_order(self):
        """Test members keep the order of the names cell."""
        members, _ = parse_party("Smith, John, Jr; Smith, Jane", "07001;07002")
        assert [m.first_name for m in members] == ["John", "Jane"]

    def test_blank_tokens_dropped(self):
        """Test tokens without a first or last name are dropped."""
        members, _ = parse_party("Smith, John; ,, ; Lee, Amy", "")
        assert [m.display_name for m in members] == ["John Smith", "Amy Lee"]

    def test_postal_code_set(self):
        _, postal_codes = parse_party("Smith, John", " 07001 ; 07002 ;; ")
        assert postal_codes == {"07001", "07002"}


class TestParseRosterRow:
    """Tests for building a Party from a raw sheet row."""

    def test_full_row(self):
        row = ["P-001", "Smith, John; Smith, Jane", "07001", "2"]
        party = parse_roster_row(row, row_number=2)
        assert party.party_id == "P-001"
        assert party.row_number == 2
        assert len(party.members) == 2
        assert party.postal_codes == {"07001"}
        assert party.seats_reserved == "2"
        assert party.saved_rsvp is None

    def test_sparse_row(self):
        """Test missing trailing cells are read as empty strings."""
        party = parse_roster_row(["", "Lee, Amy"], row_number=7)
        assert party.party_id == ""
        assert party.postal_codes == set()
        assert party.seats_reserved == ""

    def test_saved_rsvp(self):
        """Test a row with a saved email exposes the saved RSVP."""
        row = ["", "Smith, John", "07001", "2", "Y", "1", "John", "Fish", "", "j@example.com"]
        party = parse_roster_row(row, row_number=3)
        assert party.saved_rsvp is not None
        assert party.saved_rsvp.attending == "Y"
        assert party.saved_rsvp.email == "j@example.com"
        assert party.saved_rsvp.phone == ""

    def test_row_without_saved_email_has_no_rsvp(self):
        row = ["", "Smith, John", "07001", "2", "Y", "1"]
        assert parse_roster_row(row, row_number=3).saved_rsvp is None

    def test_pad_row(self):
        assert pad_row(None, width=3) == ["", "", ""]
        assert pad_row([" a ", None], width=3) == ["a", "", ""]
