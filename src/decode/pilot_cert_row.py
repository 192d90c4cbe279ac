"""Decoder for the pilot certificate file.

Each row holds one certificate: the shared leading columns, up to eleven
rating positions whose grammar depends on the certificate type, and an
unbounded tail of ``<pilot level>/<ICAO type>`` type ratings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence, Union

from core.errors import UnknownCertificateLevelError, UnknownRatingError
from decode.certificate_header import decode_certificate_header
from decode.field_coercion import present_fields, split_rating
from decode.row_schema import PILOT_CERT_SCHEMA
from decode.taxonomy import (
    FlightEngineerRatingCode,
    FlightInstructorRatingCode,
    PilotFileCertificateType,
    PilotLevelCode,
    PilotRatingCode,
    RemotePilotRatingCode,
    lookup,
    lookup_leveled_rating,
    lookup_tagged_rating,
)


@dataclass(frozen=True)
class LeveledPilotRating:
    """Pilot rating code with the level it was earned at."""

    level: PilotLevelCode
    code: PilotRatingCode


@dataclass(frozen=True)
class TypeRatingToken:
    """Decoded type-rating field."""

    level: PilotLevelCode
    aircraft_type: str


PilotFileRating = Union[
    LeveledPilotRating,
    FlightInstructorRatingCode,
    FlightEngineerRatingCode,
    RemotePilotRatingCode,
]


@dataclass(frozen=True)
class PilotCertRow:
    """Typed row of the pilot certificate file.

    Attributes:
        holder_id: Registry identifier.
        first_name: Given name.
        last_name: Family name.
        certificate_type: Certificate type code.
        level: Pilot level code; only pilot certificates carry one.
        expiration_date: Certificate expiration date.
        ratings: Decoded rating codes, duplicates removed.
        type_ratings: Decoded type ratings, duplicates removed.
    """

    holder_id: str
    first_name: str | None
    last_name: str | None
    certificate_type: PilotFileCertificateType
    level: PilotLevelCode | None = None
    expiration_date: date | None = None
    ratings: tuple[PilotFileRating, ...] = ()
    type_ratings: tuple[TypeRatingToken, ...] = ()


_TAGGED_RATING_TABLES: dict[PilotFileCertificateType, type] = {
    PilotFileCertificateType.FLIGHT_INSTRUCTOR: FlightInstructorRatingCode,
    PilotFileCertificateType.REMOTE_PILOT: RemotePilotRatingCode,
    PilotFileCertificateType.FLIGHT_ENGINEER: FlightEngineerRatingCode,
    PilotFileCertificateType.FLIGHT_ENGINEER_FOREIGN: FlightEngineerRatingCode,
}


def decode_pilot_cert_row(fields: Sequence[str]) -> PilotCertRow:
    """Decode one pilot-certificate row.

    Args:
        fields: Raw row fields in file column order.

    Returns:
        The typed certificate row.

    Raises:
        AirmenRecordError: For any missing, unknown or malformed code,
            or an invalid expiration date.
    """
    header = decode_certificate_header(
        fields,
        PILOT_CERT_SCHEMA,
        PilotFileCertificateType,
        PilotFileCertificateType.PILOT,
        PilotLevelCode,
    )
    holder_id = header.holder_id
    certificate_type = header.certificate_type
    ratings: list[PilotFileRating] = []
    for raw in present_fields(fields, PILOT_CERT_SCHEMA.rating_slice()):
        ratings.append(_decode_rating(certificate_type, raw, holder_id))
    type_ratings = [
        _decode_type_rating(raw, holder_id)
        for raw in present_fields(fields, PILOT_CERT_SCHEMA.type_rating_slice())
    ]
    return PilotCertRow(
        holder_id=holder_id,
        first_name=header.first_name,
        last_name=header.last_name,
        certificate_type=certificate_type,
        level=header.level,
        expiration_date=header.expiration_date,
        ratings=tuple(dict.fromkeys(ratings)),
        type_ratings=tuple(dict.fromkeys(type_ratings)),
    )


def _decode_type_rating(raw: str, holder_id: str) -> TypeRatingToken:
    """Decode a ``<pilot level>/<ICAO type>`` field."""
    level_code, aircraft_type = split_rating(raw, holder_id)
    level = lookup(PilotLevelCode, level_code, UnknownCertificateLevelError, holder_id)
    return TypeRatingToken(level=level, aircraft_type=aircraft_type)


def _decode_rating(
    certificate_type: PilotFileCertificateType, raw: str, holder_id: str
) -> PilotFileRating:
    if certificate_type is PilotFileCertificateType.PILOT:
        level, code = lookup_leveled_rating(PilotLevelCode, PilotRatingCode, raw, holder_id)
        return LeveledPilotRating(level=level, code=code)
    table = _TAGGED_RATING_TABLES.get(certificate_type)
    if table is None:
        raise UnknownRatingError(raw, holder_id)
    return lookup_tagged_rating(table, certificate_type, raw, holder_id)
