"""Decoder for the non-pilot certificate file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence, Union

from core.errors import UnknownRatingError
from decode.certificate_header import decode_certificate_header
from decode.field_coercion import present_fields
from decode.row_schema import NONPILOT_CERT_SCHEMA
from decode.taxonomy import (
    GroundInstructorRatingCode,
    MechanicRatingCode,
    NonPilotFileCertificateType,
    RepairmanLightSportRatingCode,
    RiggerLevelCode,
    RiggerRatingCode,
    lookup_leveled_rating,
    lookup_tagged_rating,
)


@dataclass(frozen=True)
class LeveledRiggerRating:
    """Rigger rating code with the level it was earned at."""

    level: RiggerLevelCode
    code: RiggerRatingCode


NonPilotFileRating = Union[
    LeveledRiggerRating,
    MechanicRatingCode,
    GroundInstructorRatingCode,
    RepairmanLightSportRatingCode,
]

_TAGGED_RATING_TABLES: dict[NonPilotFileCertificateType, type] = {
    NonPilotFileCertificateType.MECHANIC: MechanicRatingCode,
    NonPilotFileCertificateType.GROUND_INSTRUCTOR: GroundInstructorRatingCode,
    NonPilotFileCertificateType.REPAIRMAN_LIGHT_SPORT: RepairmanLightSportRatingCode,
}


@dataclass(frozen=True)
class NonPilotCertRow:
    """Typed row of the non-pilot certificate file.

    Attributes:
        holder_id: Registry identifier.
        first_name: Given name.
        last_name: Family name.
        certificate_type: Certificate type code.
        level: Rigger level code; only rigger certificates carry one.
        expiration_date: Certificate expiration date.
        ratings: Decoded rating codes, duplicates removed.
    """

    holder_id: str
    first_name: str | None
    last_name: str | None
    certificate_type: NonPilotFileCertificateType
    level: RiggerLevelCode | None = None
    expiration_date: date | None = None
    ratings: tuple[NonPilotFileRating, ...] = ()


def decode_nonpilot_cert_row(fields: Sequence[str]) -> NonPilotCertRow:
    """Decode one non-pilot-certificate row.

    Rigger ratings carry a ``<rigger level>/<code>`` prefix; mechanic,
    ground instructor and light-sport repairman ratings repeat the type
    code as a tag. Every other type takes no ratings.

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
        NONPILOT_CERT_SCHEMA,
        NonPilotFileCertificateType,
        NonPilotFileCertificateType.RIGGER,
        RiggerLevelCode,
    )
    holder_id = header.holder_id
    certificate_type = header.certificate_type
    ratings: list[NonPilotFileRating] = []
    for raw in present_fields(fields, NONPILOT_CERT_SCHEMA.rating_slice()):
        ratings.append(_decode_rating(certificate_type, raw, holder_id))
    return NonPilotCertRow(
        holder_id=holder_id,
        first_name=header.first_name,
        last_name=header.last_name,
        certificate_type=certificate_type,
        level=header.level,
        expiration_date=header.expiration_date,
        ratings=tuple(dict.fromkeys(ratings)),
    )


def _decode_rating(
    certificate_type: NonPilotFileCertificateType, raw: str, holder_id: str
) -> NonPilotFileRating:
    if certificate_type is NonPilotFileCertificateType.RIGGER:
        level, code = lookup_leveled_rating(RiggerLevelCode, RiggerRatingCode, raw, holder_id)
        return LeveledRiggerRating(level=level, code=code)
    table = _TAGGED_RATING_TABLES.get(certificate_type)
    if table is None:
        raise UnknownRatingError(raw, holder_id)
    return lookup_tagged_rating(table, certificate_type, raw, holder_id)
