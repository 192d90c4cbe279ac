"""Unit tests for basic row mapping."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import MedicalWithoutDateError
from core.holder_types import BasicMedMedical, FAAMedical, MedicalClass
from decode.basic_row import BasicRow
from decode.taxonomy import MedicalClassCode
from mapping.basic_mapper import map_basic_row


def test_map_basic_row_drops_empty_address() -> None:
    """An all-blank address should map to no address."""
    holder = map_basic_row(BasicRow("A0000001", first_name="JANE"))

    assert holder.address is None
    assert holder.first_name == "JANE"
    assert holder.certificates == ()


def test_map_basic_row_keeps_partial_address() -> None:
    """Any present address field should keep the address."""
    holder = map_basic_row(BasicRow("A0000001", country="CANADA"))

    assert holder.address is not None
    assert holder.address.country == "CANADA"


def test_map_basic_row_builds_agency_medical() -> None:
    """A recognized class with an issue date should map to an agency medical."""
    row = BasicRow(
        "A0000001",
        medical_class=MedicalClassCode.FIRST,
        medical_date=date(2023, 6, 15),
        medical_expiration_date=date(2024, 6, 30),
    )

    holder = map_basic_row(row)

    assert holder.medical == FAAMedical(MedicalClass.FIRST, date(2023, 6, 15), date(2024, 6, 30))


def test_map_basic_row_treats_class_eight_as_no_medical() -> None:
    """Class 8 should never raise and never produce a medical."""
    row = BasicRow(
        "A0000001",
        medical_class=MedicalClassCode.UNKNOWN,
        basic_med_course_date=date(2022, 1, 1),
    )

    assert map_basic_row(row).medical is None


def test_map_basic_row_requires_medical_date() -> None:
    """A recognized class without an issue date should fail the record."""
    row = BasicRow("A0000005", medical_class=MedicalClassCode.THIRD)

    with pytest.raises(MedicalWithoutDateError) as error_info:
        map_basic_row(row)

    assert error_info.value.holder_id == "A0000005"


def test_map_basic_row_builds_basic_med_without_class() -> None:
    """A course date without a medical class should map to BasicMed."""
    row = BasicRow(
        "A0000002",
        medical_expiration_date=date(2026, 6, 30),
        basic_med_course_date=date(2024, 1, 15),
        basic_med_checklist_date=date(2024, 1, 10),
    )

    assert map_basic_row(row).medical == BasicMedMedical(
        course_date=date(2024, 1, 15),
        expiration_date=date(2026, 6, 30),
        checklist_date=date(2024, 1, 10),
    )
