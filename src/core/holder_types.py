"""Certificate holder domain models.

This module defines the person-level record keyed by the registry
identifier, together with its address and medical qualification.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum
from typing import Union

from core.certificate_types import Certificate


@dataclass(frozen=True)
class Address:
    """Postal address of a certificate holder.

    Attributes:
        street1: First street line.
        street2: Second street line (unit, suite).
        city: City name.
        state: State or province code.
        zip_code: ZIP or postal code.
        country: Country name.
        region: Administrative region code.
    """

    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    region: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return true when every address field is absent."""
        return all(getattr(self, address_field.name) is None for address_field in fields(self))


class MedicalClass(Enum):
    """Agency-issued medical certificate classes."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


@dataclass(frozen=True)
class FAAMedical:
    """Agency-issued medical certificate.

    Attributes:
        medical_class: First, second or third class.
        issue_date: Date of the examination.
        expiration_date: Date the certificate fully lapses, when recorded.
    """

    medical_class: MedicalClass
    issue_date: date
    expiration_date: date | None = None


@dataclass(frozen=True)
class BasicMedMedical:
    """Alternate self-certification pathway.

    Attributes:
        course_date: Completion date of the medical education course.
        expiration_date: Date the qualification lapses, when recorded.
        checklist_date: Date of the last comprehensive examination checklist.
    """

    course_date: date
    expiration_date: date | None = None
    checklist_date: date | None = None


Medical = Union[FAAMedical, BasicMedMedical]


@dataclass(frozen=True)
class Holder:
    """Credential-bearing person keyed by an immutable registry identifier.

    Attributes:
        holder_id: Registry-assigned identifier, the merge key.
        first_name: Given name.
        last_name: Family name.
        address: Postal address, absent when every field is blank.
        medical: Medical qualification, absent when none is held.
        certificates: Certificates in contribution order.
    """

    holder_id: str
    first_name: str | None = None
    last_name: str | None = None
    address: Address | None = None
    medical: Medical | None = None
    certificates: tuple[Certificate, ...] = ()

    @property
    def name(self) -> str | None:
        """Return the full name from whichever name parts are present."""
        parts = [part for part in (self.first_name, self.last_name) if part is not None]
        return " ".join(parts) if parts else None
