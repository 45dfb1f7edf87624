"""Tests for data models."""

import pytest
from pydantic import ValidationError

from rsvp_backend.models import WRITE_BACK_COLUMNS, Party, Person, RsvpRecord


class TestPersonModel:
    """Tests for the Person model."""

    def test_camel_case_serialization(self):
        person = Person(last_name="Smith", first_name="John", suffix="Jr", display_name="John Smith, Jr")
        assert person.model_dump(by_alias=True) == {
            "lastName": "Smith",
            "firstName": "John",
            "suffix": "Jr",
            "displayName": "John Smith, Jr",
        }

    def test_frozen(self):
        person = Person(last_name="Smith")
        with pytest.raises(ValidationError):
            person.last_name = "Jones"

    def test_is_blank(self):
        assert Person().is_blank is True
        assert Person(first_name="Amy").is_blank is False


class TestRsvpRecordModel:
    """Tests for the RsvpRecord model."""

    def test_column_layout(self):
        assert WRITE_BACK_COLUMNS == ("E", "F", "G", "H", "I", "J", "K")

    def test_accepts_field_names(self):
        record = RsvpRecord(
            attending="N", headcount="0", attendees="", meals="", ages="",
            email="a@example.com", phone="",
        )
        assert record.cells()[0] == ("E", "N")
        assert record.cells()[5] == ("J", "a@example.com")

    def test_serializes_by_column(self):
        record = RsvpRecord.model_validate(
            {"E": "Y", "F": "1", "G": "", "H": "", "I": "", "J": "a@example.com", "K": ""}
        )
        assert record.model_dump(by_alias=True)["J"] == "a@example.com"


class TestPartyModel:
    """Tests for the Party model."""

    def test_postal_codes_not_serialized(self):
        """Test postal codes are used for matching but never returned."""
        party = Party(row_number=2, postal_codes={"07001"}, members=[Person(last_name="Lee")])
        data = party.model_dump(by_alias=True)
        assert "postalCodes" not in data
        assert data["rowNumber"] == 2

    def test_header_row_not_allowed(self):
        with pytest.raises(ValidationError):
            Party(row_number=1)

    def test_last_names_lowercased(self):
        party = Party(row_number=2, members=[Person(last_name="Smith"), Person(last_name="LEE")])
        assert party.last_names == {"smith", "lee"}
