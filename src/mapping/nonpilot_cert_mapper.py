"""Mapping for non-pilot certificate rows."""

from __future__ import annotations

from core.certificate_types import (
    Certificate,
    ControlTowerOperatorCertificate,
    DispatcherCertificate,
    GroundInstructorCertificate,
    MechanicCertificate,
    NavigatorCertificate,
    NavigatorLesseeCertificate,
    RepairmanCertificate,
    RepairmanExperimentalCertificate,
    RepairmanLightSportCertificate,
    RiggerCertificate,
    RiggerRating,
)
from core.errors import LevelNotGivenError
from core.holder_types import Holder
from decode.nonpilot_cert_row import NonPilotCertRow
from decode.taxonomy import (
    GROUND_INSTRUCTOR_RATINGS,
    MECHANIC_RATINGS,
    REPAIRMAN_LIGHT_SPORT_RATINGS,
    RIGGER_LEVELS,
    RIGGER_RATING_TYPES,
    NonPilotFileCertificateType,
)
from mapping.certificate_builders import CertificateBuilder, bare_certificate


def map_nonpilot_cert_row(row: NonPilotCertRow) -> Holder:
    """Build a partial holder from a non-pilot-certificate row.

    Args:
        row: Decoded non-pilot-certificate row.

    Returns:
        Holder with names and exactly one certificate.

    Raises:
        LevelNotGivenError: If a rigger certificate has no level.
    """
    certificate = _CERTIFICATE_BUILDERS[row.certificate_type](row)
    return Holder(
        holder_id=row.holder_id,
        first_name=row.first_name,
        last_name=row.last_name,
        certificates=(certificate,),
    )


def _build_rigger(row: NonPilotCertRow) -> Certificate:
    # Each rating keeps the level it was earned at, independent of the certificate.
    if row.level is None:
        raise LevelNotGivenError(row.holder_id)
    ratings = frozenset(
        RiggerRating(parachute=RIGGER_RATING_TYPES[rating.code], level=RIGGER_LEVELS[rating.level])
        for rating in row.ratings
    )
    return RiggerCertificate(level=RIGGER_LEVELS[row.level], ratings=ratings)


def _build_mechanic(row: NonPilotCertRow) -> Certificate:
    return MechanicCertificate(ratings=frozenset(MECHANIC_RATINGS[code] for code in row.ratings))


def _build_ground_instructor(row: NonPilotCertRow) -> Certificate:
    return GroundInstructorCertificate(
        ratings=frozenset(GROUND_INSTRUCTOR_RATINGS[code] for code in row.ratings)
    )


def _build_repairman_light_sport(row: NonPilotCertRow) -> Certificate:
    return RepairmanLightSportCertificate(
        ratings=frozenset(REPAIRMAN_LIGHT_SPORT_RATINGS[code] for code in row.ratings)
    )


_CERTIFICATE_BUILDERS: dict[NonPilotFileCertificateType, CertificateBuilder] = {
    NonPilotFileCertificateType.GROUND_INSTRUCTOR: _build_ground_instructor,
    NonPilotFileCertificateType.MECHANIC: _build_mechanic,
    NonPilotFileCertificateType.CONTROL_TOWER_OPERATOR: bare_certificate(
        ControlTowerOperatorCertificate
    ),
    NonPilotFileCertificateType.REPAIRMAN: bare_certificate(RepairmanCertificate),
    NonPilotFileCertificateType.REPAIRMAN_EXPERIMENTAL: bare_certificate(
        RepairmanExperimentalCertificate
    ),
    NonPilotFileCertificateType.REPAIRMAN_LIGHT_SPORT: _build_repairman_light_sport,
    NonPilotFileCertificateType.RIGGER: _build_rigger,
    NonPilotFileCertificateType.DISPATCHER: bare_certificate(DispatcherCertificate),
    NonPilotFileCertificateType.NAVIGATOR: bare_certificate(NavigatorCertificate),
    NonPilotFileCertificateType.NAVIGATOR_LESSEE: bare_certificate(NavigatorLesseeCertificate),
}
