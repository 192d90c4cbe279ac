"""Unit tests for positional field coercion."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import InvalidDateError, InvalidRatingError
from decode.field_coercion import field_at, parse_date, present_fields, split_rating, trim


def test_trim_maps_blank_text_to_none() -> None:
    """Whitespace-only fields should read as absent."""
    assert trim("  ") is None
    assert trim("") is None
    assert trim(None) is None
    assert trim(" JANE ") == "JANE"


def test_field_at_reads_missing_positions_as_blank() -> None:
    """Positions past the end of a short row should be absent."""
    fields = ["A1", " DOE "]

    assert field_at(fields, 1) == "DOE"
    assert field_at(fields, 5) is None


def test_present_fields_skips_blank_positions() -> None:
    """Rating scans should ignore blank positions in the range."""
    fields = ["id", "", "A/ASEL", " ", "C/GL "]

    assert present_fields(fields, slice(1, None)) == ["A/ASEL", "C/GL"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("011550", date(1950, 1, 15)),
        ("063024", date(2024, 6, 30)),
        ("123149", date(2049, 12, 31)),
        ("06152023", date(2023, 6, 15)),
        (" 063024 ", date(2024, 6, 30)),
    ],
)
def test_parse_date_expands_years_around_pivot(raw: str, expected: date) -> None:
    """Two-digit years at or above 50 should land in the 1900s."""
    assert parse_date(raw) == expected


def test_parse_date_returns_none_for_blank() -> None:
    """An all-blank date field should be absent."""
    assert parse_date("   ") is None


@pytest.mark.parametrize("raw", ["0630", "0630245", "06AB24", "063O24", "13012024", "023024"])
def test_parse_date_rejects_malformed_text(raw: str) -> None:
    """Wrong lengths, non-digits and non-calendar days should fail."""
    with pytest.raises(InvalidDateError):
        parse_date(raw, "A0000001")


def test_parse_date_error_carries_identifier() -> None:
    """Date errors should name the offending record."""
    with pytest.raises(InvalidDateError) as error_info:
        parse_date("1234", "A0000009")

    assert error_info.value.holder_id == "A0000009"
    assert error_info.value.raw == "1234"


def test_split_rating_returns_both_parts() -> None:
    """A well-formed rating should split into level and code."""
    assert split_rating("C/AMELC", "A1") == ("C", "AMELC")


@pytest.mark.parametrize("raw", ["ASEL", "A/B/C", "/ASEL", "C/"])
def test_split_rating_rejects_bad_grammar(raw: str) -> None:
    """Ratings must have exactly two non-empty parts."""
    with pytest.raises(InvalidRatingError):
        split_rating(raw, "A1")
