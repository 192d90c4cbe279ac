"""Mapping for basic holder rows."""

from __future__ import annotations

from core.errors import MedicalWithoutDateError
from core.holder_types import Address, BasicMedMedical, FAAMedical, Holder, Medical
from decode.basic_row import BasicRow
from decode.taxonomy import MEDICAL_CLASSES


def map_basic_row(row: BasicRow) -> Holder:
    """Build a partial holder from a basic-file row.

    Args:
        row: Decoded basic row.

    Returns:
        Holder with name, address and medical state; no certificates.

    Raises:
        MedicalWithoutDateError: If a medical class has no issue date.
    """
    address = Address(
        street1=row.street1,
        street2=row.street2,
        city=row.city,
        state=row.state,
        zip_code=row.zip_code,
        country=row.country,
        region=row.region,
    )
    return Holder(
        holder_id=row.holder_id,
        first_name=row.first_name,
        last_name=row.last_name,
        address=None if address.is_empty else address,
        medical=_map_medical(row),
    )


def _map_medical(row: BasicRow) -> Medical | None:
    """Resolve the single medical state a basic row describes."""
    if row.medical_class is None:
        if row.basic_med_course_date is None:
            return None
        return BasicMedMedical(
            course_date=row.basic_med_course_date,
            expiration_date=row.medical_expiration_date,
            checklist_date=row.basic_med_checklist_date,
        )
    medical_class = MEDICAL_CLASSES[row.medical_class]
    if medical_class is None:
        return None
    if row.medical_date is None:
        raise MedicalWithoutDateError(row.holder_id)
    return FAAMedical(
        medical_class=medical_class,
        issue_date=row.medical_date,
        expiration_date=row.medical_expiration_date,
    )
