"""Unit tests for pilot certificate row decoding."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import (
    CertificateTypeNotGivenError,
    InvalidRatingError,
    UnknownCertificateLevelError,
    UnknownCertificateTypeError,
    UnknownRatingError,
    UnknownRatingLevelError,
)
from decode.pilot_cert_row import LeveledPilotRating, TypeRatingToken, decode_pilot_cert_row
from decode.taxonomy import (
    FlightEngineerRatingCode,
    FlightInstructorRatingCode,
    PilotFileCertificateType,
    PilotLevelCode,
    PilotRatingCode,
    RemotePilotRatingCode,
)


def _pilot_cert_fields(
    cert_type: str,
    level: str = "",
    expire: str = "",
    ratings: tuple[str, ...] = (),
    type_ratings: tuple[str, ...] = (),
) -> list[str]:
    padded = list(ratings) + [""] * (11 - len(ratings))
    return ["A0000001", "JANE", "DOE", cert_type, level, expire, *padded, *type_ratings]


def test_decode_pilot_row_reads_leveled_ratings() -> None:
    """Pilot ratings should keep the level given in each field."""
    row = decode_pilot_cert_row(_pilot_cert_fields("P", "C", ratings=("C/ASEL", "P/GL")))

    assert row.certificate_type is PilotFileCertificateType.PILOT
    assert row.level is PilotLevelCode.COMMERCIAL
    assert row.ratings == (
        LeveledPilotRating(PilotLevelCode.COMMERCIAL, PilotRatingCode.AIRPLANE_SINGLE_ENGINE_LAND),
        LeveledPilotRating(PilotLevelCode.PRIVATE, PilotRatingCode.GLIDER),
    )


def test_decode_pilot_row_reads_type_rating_tail() -> None:
    """Fields after the eleventh rating should decode as type ratings."""
    row = decode_pilot_cert_row(
        _pilot_cert_fields("P", "A", ratings=("A/AMEL",), type_ratings=("A/B737", "", "C/CE-500"))
    )

    assert row.type_ratings == (
        TypeRatingToken(PilotLevelCode.AIRLINE_TRANSPORT, "B737"),
        TypeRatingToken(PilotLevelCode.COMMERCIAL, "CE-500"),
    )


def test_decode_pilot_row_removes_duplicate_ratings() -> None:
    """Repeated rating fields should decode once."""
    row = decode_pilot_cert_row(_pilot_cert_fields("P", "P", ratings=("P/ASEL", "P/ASEL")))

    assert len(row.ratings) == 1


def test_decode_flight_instructor_row_reads_tagged_ratings() -> None:
    """Flight instructor ratings should use the F tag."""
    row = decode_pilot_cert_row(_pilot_cert_fields("F", expire="063025", ratings=("F/ASME",)))

    assert row.expiration_date == date(2025, 6, 30)
    assert row.ratings == (FlightInstructorRatingCode.AIRPLANE_SINGLE_MULTI_ENGINE,)


def test_decode_flight_engineer_foreign_row_uses_x_tag() -> None:
    """Foreign flight engineer ratings should repeat the X type code."""
    row = decode_pilot_cert_row(_pilot_cert_fields("X", ratings=("X/TPROP",)))

    assert row.ratings == (FlightEngineerRatingCode.TURBOPROP,)


def test_decode_remote_pilot_row_accepts_suas() -> None:
    """Remote pilots should accept only the small unmanned rating."""
    row = decode_pilot_cert_row(_pilot_cert_fields("U", ratings=("U/SUAS",)))

    assert row.ratings == (RemotePilotRatingCode.SMALL_UNMANNED_AIRCRAFT,)
    with pytest.raises(UnknownRatingError):
        decode_pilot_cert_row(_pilot_cert_fields("U", ratings=("U/UAS",)))


def test_decode_pilot_row_requires_certificate_type() -> None:
    """A blank type column should fail the record."""
    with pytest.raises(CertificateTypeNotGivenError):
        decode_pilot_cert_row(_pilot_cert_fields(" "))


def test_decode_pilot_row_rejects_unknown_type() -> None:
    """Unknown type codes should fail with the raw code."""
    with pytest.raises(UnknownCertificateTypeError) as error_info:
        decode_pilot_cert_row(_pilot_cert_fields("Q"))

    assert error_info.value.code == "Q"


def test_decode_pilot_row_rejects_level_on_other_types() -> None:
    """Only pilot certificates may carry a level."""
    with pytest.raises(UnknownCertificateLevelError):
        decode_pilot_cert_row(_pilot_cert_fields("F", "C", expire="063025"))


def test_decode_pilot_row_rejects_unknown_rating_level() -> None:
    """A pilot rating with an unknown level should fail as unknown level."""
    with pytest.raises(UnknownCertificateLevelError):
        decode_pilot_cert_row(_pilot_cert_fields("P", "P", ratings=("Z/ASEL",)))


def test_decode_instructor_row_rejects_wrong_tag() -> None:
    """A tagged rating with another type's tag should fail."""
    with pytest.raises(UnknownRatingLevelError):
        decode_pilot_cert_row(_pilot_cert_fields("F", expire="063025", ratings=("P/ASE",)))


def test_decode_row_rejects_ratings_on_kinds_without_ratings() -> None:
    """Authorized instructors and lessees take no ratings."""
    with pytest.raises(UnknownRatingError) as error_info:
        decode_pilot_cert_row(_pilot_cert_fields("A", ratings=("A/ASE",)))

    assert error_info.value.code == "A/ASE"


def test_decode_pilot_row_rejects_malformed_rating() -> None:
    """Ratings without exactly one separator should fail."""
    with pytest.raises(InvalidRatingError):
        decode_pilot_cert_row(_pilot_cert_fields("P", "P", ratings=("ASEL",)))


def test_decode_pilot_row_rejects_malformed_type_rating() -> None:
    """Type ratings share the two-part grammar."""
    with pytest.raises(InvalidRatingError):
        decode_pilot_cert_row(_pilot_cert_fields("P", "A", type_ratings=("B737",)))
