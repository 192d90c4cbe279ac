"""Unit tests for holder and certificate domain models."""

from __future__ import annotations

from datetime import date

import pytest

from core.certificate_types import (
    CategoryClassRating,
    CertificateKind,
    MechanicCertificate,
    MechanicRating,
    PilotCategoryClass,
    PilotCertificate,
    PilotLevel,
    RiggerLevel,
)
from core.holder_types import Address, FAAMedical, Holder, MedicalClass


def test_address_is_empty_when_all_fields_absent() -> None:
    """An address with no fields should report itself empty."""
    assert Address().is_empty
    assert not Address(city="DENVER").is_empty


def test_holder_name_joins_present_parts() -> None:
    """Full name should skip missing name parts."""
    assert Holder("A1", first_name="JANE", last_name="DOE").name == "JANE DOE"
    assert Holder("A1", last_name="DOE").name == "DOE"
    assert Holder("A1").name is None


def test_certificates_expose_kind_discriminant() -> None:
    """Certificate variants should carry a class-level kind."""
    certificate = MechanicCertificate(ratings=frozenset({MechanicRating.AIRFRAME}))

    assert certificate.kind is CertificateKind.MECHANIC
    assert PilotCertificate(level=PilotLevel.PRIVATE).kind is CertificateKind.PILOT


def test_structurally_equal_certificates_compare_equal() -> None:
    """Certificates with equal payloads should be equal and hash alike."""
    rating = CategoryClassRating(PilotCategoryClass.GLIDER, PilotLevel.PRIVATE)
    first = PilotCertificate(level=PilotLevel.PRIVATE, ratings=frozenset({rating}))
    second = PilotCertificate(level=PilotLevel.PRIVATE, ratings=frozenset({rating}))

    assert first == second
    assert len({first, second}) == 1


def test_faa_medical_expiration_is_optional() -> None:
    """Agency medicals should default to no expiration date."""
    medical = FAAMedical(MedicalClass.SECOND, date(2024, 1, 2))

    assert medical.expiration_date is None


def test_pilot_levels_order_from_student_to_airline_transport() -> None:
    """Pilot levels should compare by seniority."""
    assert PilotLevel.STUDENT < PilotLevel.PRIVATE < PilotLevel.AIRLINE_TRANSPORT
    assert PilotLevel.COMMERCIAL >= PilotLevel.COMMERCIAL
    assert max(PilotLevel.SPORT, PilotLevel.COMMERCIAL) is PilotLevel.COMMERCIAL
    assert PilotLevel.STUDENT.rank == 0


def test_rigger_levels_order_senior_below_master() -> None:
    """A senior rigger rating should rank below a master certificate."""
    assert RiggerLevel.SENIOR < RiggerLevel.MASTER
    assert sorted([RiggerLevel.MASTER, RiggerLevel.SENIOR]) == [
        RiggerLevel.SENIOR,
        RiggerLevel.MASTER,
    ]


def test_levels_of_different_ladders_do_not_compare() -> None:
    """Pilot and rigger levels should not be orderable against each other."""
    with pytest.raises(TypeError):
        PilotLevel.PRIVATE < RiggerLevel.MASTER  # noqa: B015
