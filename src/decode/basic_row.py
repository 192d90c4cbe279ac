"""Decoder for the pilot and non-pilot basic holder files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from core.errors import IdentifierNotGivenError, UnknownMedicalClassError
from decode.field_coercion import field_at, parse_date
from decode.row_schema import BASIC_SCHEMA
from decode.taxonomy import MedicalClassCode, lookup


@dataclass(frozen=True)
class BasicRow:
    """Typed row of a basic holder file.

    Attributes:
        holder_id: Registry identifier.
        first_name: Given name.
        last_name: Family name.
        street1: First street line.
        street2: Second street line.
        city: City name.
        state: State or province code.
        zip_code: ZIP or postal code.
        country: Country name.
        region: Administrative region code.
        medical_class: Medical class code, when recorded.
        medical_date: Medical issue date.
        medical_expiration_date: Medical or BasicMed expiration date.
        basic_med_course_date: BasicMed course completion date.
        basic_med_checklist_date: BasicMed examination checklist date.
    """

    holder_id: str
    first_name: str | None = None
    last_name: str | None = None
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    region: str | None = None
    medical_class: MedicalClassCode | None = None
    medical_date: date | None = None
    medical_expiration_date: date | None = None
    basic_med_course_date: date | None = None
    basic_med_checklist_date: date | None = None


def decode_basic_row(fields: Sequence[str]) -> BasicRow:
    """Decode one basic-file row.

    Args:
        fields: Raw row fields in file column order.

    Returns:
        The typed basic row.

    Raises:
        IdentifierNotGivenError: If the UNIQUE ID column is blank.
        UnknownMedicalClassError: For an unrecognized medical class code.
        InvalidDateError: For any malformed date column.
    """

    def column(name: str) -> str | None:
        return field_at(fields, BASIC_SCHEMA.position(name))

    holder_id = column("UNIQUE ID")
    if holder_id is None:
        raise IdentifierNotGivenError()
    class_code = column("MED CLASS")
    medical_class = None
    if class_code is not None:
        medical_class = lookup(MedicalClassCode, class_code, UnknownMedicalClassError, holder_id)
    return BasicRow(
        holder_id=holder_id,
        first_name=column("FIRST NAME"),
        last_name=column("LAST NAME"),
        street1=column("STREET 1"),
        street2=column("STREET 2"),
        city=column("CITY"),
        state=column("STATE"),
        zip_code=column("ZIP CODE"),
        country=column("COUNTRY"),
        region=column("REGION"),
        medical_class=medical_class,
        medical_date=parse_date(column("MED DATE"), holder_id),
        medical_expiration_date=parse_date(column("MED EXP DATE"), holder_id),
        basic_med_course_date=parse_date(column("BASIC MED COURSE DATE"), holder_id),
        basic_med_checklist_date=parse_date(column("BASIC MED CMEC DATE"), holder_id),
    )
