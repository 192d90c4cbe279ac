"""Fixed leading columns shared by both certificate files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Sequence

from core.errors import (
    CertificateTypeNotGivenError,
    IdentifierNotGivenError,
    UnknownCertificateLevelError,
    UnknownCertificateTypeError,
)
from decode.field_coercion import field_at, parse_date
from decode.row_schema import RowSchema
from decode.taxonomy import lookup


@dataclass(frozen=True)
class CertificateHeader:
    """Decoded identity, type, level and expiration columns."""

    holder_id: str
    first_name: str | None
    last_name: str | None
    certificate_type: Enum
    level: Enum | None
    expiration_date: date | None


def decode_certificate_header(
    fields: Sequence[str],
    schema: RowSchema,
    type_table: type[Enum],
    leveled_type: Enum,
    level_table: type[Enum],
) -> CertificateHeader:
    """Decode the fixed columns of a certificate row.

    Only ``leveled_type`` may carry a level code; a level on any other
    certificate type is reported as an unknown level.

    Args:
        fields: Raw row fields.
        schema: Layout of the certificate file.
        type_table: Certificate type codes valid in this file.
        leveled_type: The one certificate type that takes a level.
        level_table: Level codes valid for ``leveled_type``.

    Returns:
        The decoded header columns.

    Raises:
        AirmenRecordError: For a missing identifier, a missing or unknown
            type, a misplaced or unknown level, or an invalid expiration
            date.
    """
    holder_id = field_at(fields, schema.position("UNIQUE ID"))
    if holder_id is None:
        raise IdentifierNotGivenError()
    type_code = field_at(fields, schema.position("TYPE"))
    if type_code is None:
        raise CertificateTypeNotGivenError(holder_id)
    certificate_type = lookup(type_table, type_code, UnknownCertificateTypeError, holder_id)
    level_code = field_at(fields, schema.position("LEVEL"))
    level = None
    if level_code is not None:
        if certificate_type is not leveled_type:
            raise UnknownCertificateLevelError(level_code, holder_id)
        level = lookup(level_table, level_code, UnknownCertificateLevelError, holder_id)
    return CertificateHeader(
        holder_id=holder_id,
        first_name=field_at(fields, schema.position("FIRST NAME")),
        last_name=field_at(fields, schema.position("LAST NAME")),
        certificate_type=certificate_type,
        level=level,
        expiration_date=parse_date(
            field_at(fields, schema.position("EXPIRE DATE")), holder_id
        ),
    )
