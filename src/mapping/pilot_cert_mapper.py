"""Mapping for pilot certificate rows.

Combination codes expand into several discrete ratings here: one
``HELGY`` field yields both rotorcraft classes, ``INSTI`` yields both
instrument categories, and ``AMELC`` yields the multi-engine land rating
plus the centerline-thrust limitation on the certificate.
"""

from __future__ import annotations

from typing import Union

from core.certificate_types import (
    AuthorizedAircraftInstructorCertificate,
    CategoryClassRating,
    Certificate,
    FlightEngineerCertificate,
    FlightEngineerForeignCertificate,
    FlightEngineerLesseeCertificate,
    FlightInstructorCategory,
    FlightInstructorCategoryRating,
    FlightInstructorCertificate,
    FlightInstructorInstrumentRating,
    FlightInstructorRating,
    FlightInstructorSportRating,
    InstrumentCategory,
    InstrumentRating,
    PilotCategoryClass,
    PilotCertificate,
    PilotRating,
    RemotePilotCertificate,
    TypeRating,
)
from core.errors import ExpirationDateNotGivenError, LevelNotGivenError
from core.holder_types import Holder
from decode.pilot_cert_row import LeveledPilotRating, PilotCertRow
from decode.taxonomy import (
    FLIGHT_ENGINEER_RATINGS,
    PILOT_LEVELS,
    FlightInstructorRatingCode,
    PilotFileCertificateType,
    PilotRatingCode,
)
from mapping.certificate_builders import CertificateBuilder, bare_certificate

PilotRatingTarget = Union[PilotCategoryClass, InstrumentCategory]

PILOT_RATING_EXPANSIONS: dict[PilotRatingCode, tuple[PilotRatingTarget, ...]] = {
    PilotRatingCode.AIRPLANE_SINGLE_ENGINE_LAND: (PilotCategoryClass.AIRPLANE_SINGLE_ENGINE_LAND,),
    PilotRatingCode.AIRPLANE_SINGLE_ENGINE_SEA: (PilotCategoryClass.AIRPLANE_SINGLE_ENGINE_SEA,),
    PilotRatingCode.AIRPLANE_MULTI_ENGINE_LAND: (PilotCategoryClass.AIRPLANE_MULTI_ENGINE_LAND,),
    PilotRatingCode.AIRPLANE_MULTI_ENGINE_SEA: (PilotCategoryClass.AIRPLANE_MULTI_ENGINE_SEA,),
    PilotRatingCode.AIRPLANE_MULTI_ENGINE_LAND_CENTERLINE: (
        PilotCategoryClass.AIRPLANE_MULTI_ENGINE_LAND,
    ),
    PilotRatingCode.GLIDER: (PilotCategoryClass.GLIDER,),
    PilotRatingCode.ROTORCRAFT_HELICOPTER: (PilotCategoryClass.ROTORCRAFT_HELICOPTER,),
    PilotRatingCode.ROTORCRAFT_GYROPLANE: (PilotCategoryClass.ROTORCRAFT_GYROPLANE,),
    PilotRatingCode.ROTORCRAFT_HELICOPTER_GYROPLANE: (
        PilotCategoryClass.ROTORCRAFT_HELICOPTER,
        PilotCategoryClass.ROTORCRAFT_GYROPLANE,
    ),
    PilotRatingCode.LIGHTER_THAN_AIR_BALLOON: (PilotCategoryClass.LIGHTER_THAN_AIR_BALLOON,),
    PilotRatingCode.LIGHTER_THAN_AIR_AIRSHIP: (PilotCategoryClass.LIGHTER_THAN_AIR_AIRSHIP,),
    PilotRatingCode.POWERED_LIFT: (PilotCategoryClass.POWERED_LIFT,),
    PilotRatingCode.INSTRUMENT_AIRPLANE: (InstrumentCategory.AIRPLANE,),
    PilotRatingCode.INSTRUMENT_HELICOPTER: (InstrumentCategory.HELICOPTER,),
    PilotRatingCode.INSTRUMENT_AIRPLANE_HELICOPTER: (
        InstrumentCategory.AIRPLANE,
        InstrumentCategory.HELICOPTER,
    ),
    PilotRatingCode.INSTRUMENT_POWERED_LIFT: (InstrumentCategory.POWERED_LIFT,),
    # Sport privileges follow from the certificate level.
    PilotRatingCode.SPORT: (),
}

FLIGHT_INSTRUCTOR_RATING_EXPANSIONS: dict[
    FlightInstructorRatingCode, tuple[FlightInstructorRating, ...]
] = {
    FlightInstructorRatingCode.AIRPLANE_SINGLE_ENGINE: (
        FlightInstructorCategoryRating(FlightInstructorCategory.AIRPLANE_SINGLE_ENGINE),
    ),
    FlightInstructorRatingCode.AIRPLANE_MULTI_ENGINE: (
        FlightInstructorCategoryRating(FlightInstructorCategory.AIRPLANE_MULTI_ENGINE),
    ),
    FlightInstructorRatingCode.AIRPLANE_SINGLE_MULTI_ENGINE: (
        FlightInstructorCategoryRating(FlightInstructorCategory.AIRPLANE_SINGLE_ENGINE),
        FlightInstructorCategoryRating(FlightInstructorCategory.AIRPLANE_MULTI_ENGINE),
    ),
    FlightInstructorRatingCode.GLIDER: (
        FlightInstructorCategoryRating(FlightInstructorCategory.GLIDER),
    ),
    FlightInstructorRatingCode.ROTORCRAFT_HELICOPTER: (
        FlightInstructorCategoryRating(FlightInstructorCategory.ROTORCRAFT_HELICOPTER),
    ),
    FlightInstructorRatingCode.ROTORCRAFT_GYROPLANE: (
        FlightInstructorCategoryRating(FlightInstructorCategory.ROTORCRAFT_GYROPLANE),
    ),
    FlightInstructorRatingCode.ROTORCRAFT_HELICOPTER_GYROPLANE: (
        FlightInstructorCategoryRating(FlightInstructorCategory.ROTORCRAFT_HELICOPTER),
        FlightInstructorCategoryRating(FlightInstructorCategory.ROTORCRAFT_GYROPLANE),
    ),
    FlightInstructorRatingCode.POWERED_LIFT: (
        FlightInstructorCategoryRating(FlightInstructorCategory.POWERED_LIFT),
    ),
    FlightInstructorRatingCode.INSTRUMENT_AIRPLANE: (
        FlightInstructorInstrumentRating(InstrumentCategory.AIRPLANE),
    ),
    FlightInstructorRatingCode.INSTRUMENT_HELICOPTER: (
        FlightInstructorInstrumentRating(InstrumentCategory.HELICOPTER),
    ),
    FlightInstructorRatingCode.INSTRUMENT_AIRPLANE_HELICOPTER: (
        FlightInstructorInstrumentRating(InstrumentCategory.AIRPLANE),
        FlightInstructorInstrumentRating(InstrumentCategory.HELICOPTER),
    ),
    FlightInstructorRatingCode.INSTRUMENT_POWERED_LIFT: (
        FlightInstructorInstrumentRating(InstrumentCategory.POWERED_LIFT),
    ),
    FlightInstructorRatingCode.SPORT: (FlightInstructorSportRating(),),
}


def map_pilot_cert_row(row: PilotCertRow) -> Holder:
    """Build a partial holder from a pilot-certificate row.

    Args:
        row: Decoded pilot-certificate row.

    Returns:
        Holder with names and exactly one certificate.

    Raises:
        LevelNotGivenError: If a pilot certificate has no level.
        ExpirationDateNotGivenError: If a flight instructor certificate
            has no expiration date.
    """
    certificate = _CERTIFICATE_BUILDERS[row.certificate_type](row)
    return Holder(
        holder_id=row.holder_id,
        first_name=row.first_name,
        last_name=row.last_name,
        certificates=(certificate,),
    )


def expand_pilot_rating(rating: LeveledPilotRating) -> list[PilotRating]:
    """Expand one decoded pilot rating into its discrete ratings."""
    level = PILOT_LEVELS[rating.level]
    expanded: list[PilotRating] = []
    for target in PILOT_RATING_EXPANSIONS[rating.code]:
        if isinstance(target, InstrumentCategory):
            expanded.append(InstrumentRating(category=target))
        else:
            expanded.append(CategoryClassRating(category_class=target, level=level))
    return expanded


def _build_pilot(row: PilotCertRow) -> Certificate:
    if row.level is None:
        raise LevelNotGivenError(row.holder_id)
    ratings: set[PilotRating] = set()
    centerline_thrust_only = False
    for rating in row.ratings:
        ratings.update(expand_pilot_rating(rating))
        if rating.code is PilotRatingCode.AIRPLANE_MULTI_ENGINE_LAND_CENTERLINE:
            centerline_thrust_only = True
    for type_rating in row.type_ratings:
        ratings.add(
            TypeRating(aircraft_type=type_rating.aircraft_type, level=PILOT_LEVELS[type_rating.level])
        )
    return PilotCertificate(
        level=PILOT_LEVELS[row.level],
        ratings=frozenset(ratings),
        centerline_thrust_only=centerline_thrust_only,
    )


def _build_flight_instructor(row: PilotCertRow) -> Certificate:
    if row.expiration_date is None:
        raise ExpirationDateNotGivenError(row.holder_id)
    ratings: set[FlightInstructorRating] = set()
    for code in row.ratings:
        ratings.update(FLIGHT_INSTRUCTOR_RATING_EXPANSIONS[code])
    return FlightInstructorCertificate(
        expiration_date=row.expiration_date,
        ratings=frozenset(ratings),
    )


def _build_flight_engineer(row: PilotCertRow) -> Certificate:
    return FlightEngineerCertificate(
        ratings=frozenset(FLIGHT_ENGINEER_RATINGS[code] for code in row.ratings)
    )


def _build_flight_engineer_foreign(row: PilotCertRow) -> Certificate:
    return FlightEngineerForeignCertificate(
        ratings=frozenset(FLIGHT_ENGINEER_RATINGS[code] for code in row.ratings)
    )


_CERTIFICATE_BUILDERS: dict[PilotFileCertificateType, CertificateBuilder] = {
    PilotFileCertificateType.PILOT: _build_pilot,
    PilotFileCertificateType.FLIGHT_INSTRUCTOR: _build_flight_instructor,
    PilotFileCertificateType.AUTHORIZED_AIRCRAFT_INSTRUCTOR: bare_certificate(
        AuthorizedAircraftInstructorCertificate
    ),
    # The SUAS rating only validates the row; the certificate carries no ratings.
    PilotFileCertificateType.REMOTE_PILOT: bare_certificate(RemotePilotCertificate),
    PilotFileCertificateType.FLIGHT_ENGINEER: _build_flight_engineer,
    PilotFileCertificateType.FLIGHT_ENGINEER_LESSEE: bare_certificate(FlightEngineerLesseeCertificate),
    PilotFileCertificateType.FLIGHT_ENGINEER_FOREIGN: _build_flight_engineer_foreign,
}
