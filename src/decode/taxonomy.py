"""Registry code taxonomies.

Each enum below is a closed table for one field role within one
certificate kind; member values are the codes found in the CSV files.
The dictionaries translate codes into domain concepts where the
translation is one-to-one. Codes that expand into several concepts are
resolved by the row mappers.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

from core.certificate_types import (
    FlightEngineerRating,
    GroundInstructorRating,
    MechanicRating,
    PilotLevel,
    RepairmanLightSportRating,
    RiggerLevel,
    RiggerRatingType,
)
from core.errors import (
    AirmenRecordError,
    UnknownCertificateLevelError,
    UnknownRatingError,
    UnknownRatingLevelError,
)
from core.holder_types import MedicalClass
from decode.field_coercion import split_rating

CodeT = TypeVar("CodeT", bound=Enum)
LevelT = TypeVar("LevelT", bound=Enum)


class PilotFileCertificateType(Enum):
    """Certificate type codes found in the pilot certificate file."""

    PILOT = "P"
    FLIGHT_INSTRUCTOR = "F"
    AUTHORIZED_AIRCRAFT_INSTRUCTOR = "A"
    REMOTE_PILOT = "U"
    FLIGHT_ENGINEER = "E"
    FLIGHT_ENGINEER_LESSEE = "H"
    FLIGHT_ENGINEER_FOREIGN = "X"


class NonPilotFileCertificateType(Enum):
    """Certificate type codes found in the non-pilot certificate file."""

    GROUND_INSTRUCTOR = "G"
    MECHANIC = "M"
    CONTROL_TOWER_OPERATOR = "T"
    REPAIRMAN = "R"
    REPAIRMAN_EXPERIMENTAL = "I"
    REPAIRMAN_LIGHT_SPORT = "L"
    RIGGER = "W"
    DISPATCHER = "D"
    NAVIGATOR = "N"
    NAVIGATOR_LESSEE = "J"


class PilotLevelCode(Enum):
    """Pilot certificate and rating level codes."""

    AIRLINE_TRANSPORT = "A"
    COMMERCIAL = "C"
    PRIVATE = "P"
    RECREATIONAL = "V"
    SPORT = "T"
    STUDENT = "S"


class RiggerLevelCode(Enum):
    """Rigger certificate and rating level codes."""

    MASTER = "U"
    SENIOR = "W"


class PilotRatingCode(Enum):
    """Rating codes on a pilot certificate."""

    AIRPLANE_SINGLE_ENGINE_LAND = "ASEL"
    AIRPLANE_SINGLE_ENGINE_SEA = "ASES"
    AIRPLANE_MULTI_ENGINE_LAND = "AMEL"
    AIRPLANE_MULTI_ENGINE_SEA = "AMES"
    AIRPLANE_MULTI_ENGINE_LAND_CENTERLINE = "AMELC"
    GLIDER = "GL"
    ROTORCRAFT_HELICOPTER = "HEL"
    ROTORCRAFT_GYROPLANE = "GYRO"
    ROTORCRAFT_HELICOPTER_GYROPLANE = "HELGY"
    LIGHTER_THAN_AIR_BALLOON = "BAL"
    LIGHTER_THAN_AIR_AIRSHIP = "AIR"
    POWERED_LIFT = "PLIFT"
    INSTRUMENT_AIRPLANE = "INSTA"
    INSTRUMENT_HELICOPTER = "INSTH"
    INSTRUMENT_AIRPLANE_HELICOPTER = "INSTI"
    INSTRUMENT_POWERED_LIFT = "INSTP"
    SPORT = "SPORT"


class FlightInstructorRatingCode(Enum):
    """Rating codes on a flight instructor certificate."""

    AIRPLANE_SINGLE_ENGINE = "ASE"
    AIRPLANE_MULTI_ENGINE = "AME"
    AIRPLANE_SINGLE_MULTI_ENGINE = "ASME"
    GLIDER = "GL"
    ROTORCRAFT_HELICOPTER = "HEL"
    ROTORCRAFT_GYROPLANE = "GYRO"
    ROTORCRAFT_HELICOPTER_GYROPLANE = "HELGY"
    POWERED_LIFT = "PLIFT"
    INSTRUMENT_AIRPLANE = "INSTA"
    INSTRUMENT_HELICOPTER = "INSTH"
    INSTRUMENT_AIRPLANE_HELICOPTER = "INSTI"
    INSTRUMENT_POWERED_LIFT = "INSTP"
    SPORT = "SPORT"


class RemotePilotRatingCode(Enum):
    """Rating codes on a remote pilot certificate."""

    SMALL_UNMANNED_AIRCRAFT = "SUAS"


class FlightEngineerRatingCode(Enum):
    """Rating codes on flight engineer certificates."""

    JET = "JET"
    TURBOPROP = "TPROP"
    RECIPROCATING = "RECIP"


class MechanicRatingCode(Enum):
    """Rating codes on a mechanic certificate."""

    AIRFRAME = "AIRFR"
    POWERPLANT = "POWER"


class GroundInstructorRatingCode(Enum):
    """Rating codes on a ground instructor certificate."""

    BASIC = "BASIC"
    ADVANCED = "ADV"
    INSTRUMENT = "INST"


class RepairmanLightSportRatingCode(Enum):
    """Rating codes on a light-sport repairman certificate."""

    MAINTENANCE = "MAINT"
    INSPECTION = "INSPT"


class RiggerRatingCode(Enum):
    """Parachute rating codes on a rigger certificate."""

    BACK = "BACK"
    CHEST = "CHEST"
    SEAT = "SEAT"
    LAP = "LAP"


class MedicalClassCode(Enum):
    """Medical class codes in the basic holder files."""

    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    UNKNOWN = "8"


PILOT_LEVELS: dict[PilotLevelCode, PilotLevel] = {
    PilotLevelCode.AIRLINE_TRANSPORT: PilotLevel.AIRLINE_TRANSPORT,
    PilotLevelCode.COMMERCIAL: PilotLevel.COMMERCIAL,
    PilotLevelCode.PRIVATE: PilotLevel.PRIVATE,
    PilotLevelCode.RECREATIONAL: PilotLevel.RECREATIONAL,
    PilotLevelCode.SPORT: PilotLevel.SPORT,
    PilotLevelCode.STUDENT: PilotLevel.STUDENT,
}

RIGGER_LEVELS: dict[RiggerLevelCode, RiggerLevel] = {
    RiggerLevelCode.MASTER: RiggerLevel.MASTER,
    RiggerLevelCode.SENIOR: RiggerLevel.SENIOR,
}

FLIGHT_ENGINEER_RATINGS: dict[FlightEngineerRatingCode, FlightEngineerRating] = {
    FlightEngineerRatingCode.JET: FlightEngineerRating.JET,
    FlightEngineerRatingCode.TURBOPROP: FlightEngineerRating.TURBOPROP,
    FlightEngineerRatingCode.RECIPROCATING: FlightEngineerRating.RECIPROCATING,
}

MECHANIC_RATINGS: dict[MechanicRatingCode, MechanicRating] = {
    MechanicRatingCode.AIRFRAME: MechanicRating.AIRFRAME,
    MechanicRatingCode.POWERPLANT: MechanicRating.POWERPLANT,
}

GROUND_INSTRUCTOR_RATINGS: dict[GroundInstructorRatingCode, GroundInstructorRating] = {
    GroundInstructorRatingCode.BASIC: GroundInstructorRating.BASIC,
    GroundInstructorRatingCode.ADVANCED: GroundInstructorRating.ADVANCED,
    GroundInstructorRatingCode.INSTRUMENT: GroundInstructorRating.INSTRUMENT,
}

REPAIRMAN_LIGHT_SPORT_RATINGS: dict[RepairmanLightSportRatingCode, RepairmanLightSportRating] = {
    RepairmanLightSportRatingCode.MAINTENANCE: RepairmanLightSportRating.MAINTENANCE,
    RepairmanLightSportRatingCode.INSPECTION: RepairmanLightSportRating.INSPECTION,
}

RIGGER_RATING_TYPES: dict[RiggerRatingCode, RiggerRatingType] = {
    RiggerRatingCode.BACK: RiggerRatingType.BACK,
    RiggerRatingCode.CHEST: RiggerRatingType.CHEST,
    RiggerRatingCode.SEAT: RiggerRatingType.SEAT,
    RiggerRatingCode.LAP: RiggerRatingType.LAP,
}

# UNKNOWN ("8") is recorded by the registry but carries no medical state.
MEDICAL_CLASSES: dict[MedicalClassCode, MedicalClass | None] = {
    MedicalClassCode.FIRST: MedicalClass.FIRST,
    MedicalClassCode.SECOND: MedicalClass.SECOND,
    MedicalClassCode.THIRD: MedicalClass.THIRD,
    MedicalClassCode.UNKNOWN: None,
}


def lookup(
    table: type[CodeT],
    code: str,
    error_type: Callable[[str, str], AirmenRecordError],
    holder_id: str,
) -> CodeT:
    """Resolve a raw code against a closed taxonomy table.

    Args:
        table: Code enum to resolve against.
        code: Raw trimmed code.
        error_type: Kind-specific error raised for an unknown code.
        holder_id: Record identifier for error context.

    Returns:
        The matching enum member.

    Raises:
        AirmenRecordError: The ``error_type`` instance for unknown codes.
    """
    try:
        return table(code)
    except ValueError as error:
        raise error_type(code, holder_id) from error


def lookup_tagged_rating(
    table: type[CodeT],
    type_code: Enum,
    raw: str,
    holder_id: str,
) -> CodeT:
    """Resolve a ``<type>/<code>`` rating whose left part is a grammar tag.

    Args:
        table: Rating code enum for the certificate kind.
        type_code: Certificate type the tag must repeat.
        raw: Trimmed rating text.
        holder_id: Record identifier for error context.

    Returns:
        The matching rating code.

    Raises:
        InvalidRatingError: If the text is not two slash-separated parts.
        UnknownRatingLevelError: If the tag differs from the type code.
        UnknownRatingError: If the code is not in ``table``.
    """
    tag, code = split_rating(raw, holder_id)
    if tag != type_code.value:
        raise UnknownRatingLevelError(tag, holder_id)
    return lookup(table, code, UnknownRatingError, holder_id)


def lookup_leveled_rating(
    level_table: type[LevelT],
    table: type[CodeT],
    raw: str,
    holder_id: str,
) -> tuple[LevelT, CodeT]:
    """Resolve a ``<level>/<code>`` rating carrying its own level.

    Raises:
        InvalidRatingError: If the text is not two slash-separated parts.
        UnknownCertificateLevelError: If the level code is unknown.
        UnknownRatingError: If the rating code is unknown.
    """
    level_code, code = split_rating(raw, holder_id)
    level = lookup(level_table, level_code, UnknownCertificateLevelError, holder_id)
    return level, lookup(table, code, UnknownRatingError, holder_id)
