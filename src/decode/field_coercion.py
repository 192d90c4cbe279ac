"""Positional field coercion.

This module turns raw CSV text into trimmed optional strings, calendar
dates and two-part rating tokens. Every decoder funnels its fields
through these helpers before any taxonomy lookup.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from core.constants import (
    LONG_DATE_LENGTH,
    RATING_SEPARATOR,
    SHORT_DATE_LENGTH,
    TWO_DIGIT_YEAR_PIVOT,
)
from core.errors import InvalidDateError, InvalidRatingError


def trim(raw: str | None) -> str | None:
    """Strip surrounding whitespace and map empty text to None.

    Args:
        raw: Raw field text.

    Returns:
        Trimmed text, or None when nothing remains.
    """
    if raw is None:
        return None
    trimmed = raw.strip()
    return trimmed or None


def field_at(fields: Sequence[str], index: int) -> str | None:
    """Return the trimmed field at ``index``; missing positions read as blank."""
    if index >= len(fields):
        return None
    return trim(fields[index])


def present_fields(fields: Sequence[str], positions: slice) -> list[str]:
    """Return the trimmed non-blank fields within ``positions``."""
    trimmed = (trim(raw) for raw in fields[positions])
    return [value for value in trimmed if value is not None]


def parse_date(raw: str | None, holder_id: str | None = None) -> date | None:
    """Parse a compact ``MMDDYY`` or ``MMDDYYYY`` date.

    Two-digit years at or above the pivot map to 19xx, the rest to 20xx.

    Args:
        raw: Raw field text.
        holder_id: Record identifier for error context.

    Returns:
        Parsed date, or None for a blank field.

    Raises:
        InvalidDateError: If the text has the wrong length, contains
            non-digits, or names a day that does not exist.
    """
    value = trim(raw)
    if value is None:
        return None
    if len(value) not in (SHORT_DATE_LENGTH, LONG_DATE_LENGTH):
        raise InvalidDateError(value, holder_id)
    if not (value.isascii() and value.isdigit()):
        raise InvalidDateError(value, holder_id)
    month = int(value[0:2])
    day = int(value[2:4])
    year = _expand_year(value[4:])
    try:
        return date(year, month, day)
    except ValueError as error:
        raise InvalidDateError(value, holder_id) from error


def _expand_year(year_text: str) -> int:
    """Expand a two- or four-digit year."""
    year = int(year_text)
    if len(year_text) == 4:
        return year
    if year >= TWO_DIGIT_YEAR_PIVOT:
        return 1900 + year
    return 2000 + year


def split_rating(raw: str, holder_id: str) -> tuple[str, str]:
    """Split a ``<left>/<right>`` rating token.

    Args:
        raw: Trimmed, non-blank rating text.
        holder_id: Record identifier for error context.

    Returns:
        The left (level or type tag) and right (code) parts.

    Raises:
        InvalidRatingError: If the token is not exactly two non-empty parts.
    """
    parts = raw.split(RATING_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise InvalidRatingError(raw, holder_id)
    return parts[0], parts[1]
