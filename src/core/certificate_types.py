"""Certificate and rating domain models.

This module defines the closed set of certificate kinds held by a person,
the rating variants attached to them, and the level enumerations each
kind draws from. Every certificate variant is an immutable dataclass with
a ``kind`` discriminant so callers can match exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Union


class CertificateKind(Enum):
    """Discriminant for certificate variants."""

    PILOT = "pilot"
    FLIGHT_INSTRUCTOR = "flight_instructor"
    AUTHORIZED_AIRCRAFT_INSTRUCTOR = "authorized_aircraft_instructor"
    REMOTE_PILOT = "remote_pilot"
    GROUND_INSTRUCTOR = "ground_instructor"
    FLIGHT_ENGINEER = "flight_engineer"
    FLIGHT_ENGINEER_LESSEE = "flight_engineer_lessee"
    FLIGHT_ENGINEER_FOREIGN = "flight_engineer_foreign"
    MECHANIC = "mechanic"
    CONTROL_TOWER_OPERATOR = "control_tower_operator"
    REPAIRMAN = "repairman"
    REPAIRMAN_EXPERIMENTAL = "repairman_experimental"
    REPAIRMAN_LIGHT_SPORT = "repairman_light_sport"
    RIGGER = "rigger"
    DISPATCHER = "dispatcher"
    NAVIGATOR = "navigator"
    NAVIGATOR_LESSEE = "navigator_lessee"


class RankedLevel(Enum):
    """Level enumeration ordered by member declaration, lowest first."""

    @property
    def rank(self) -> int:
        """Return the zero-based position of this level in its ladder."""
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rank >= other.rank


class PilotLevel(RankedLevel):
    """Pilot certificate levels, lowest to highest."""

    STUDENT = "student"
    SPORT = "sport"
    RECREATIONAL = "recreational"
    PRIVATE = "private"
    COMMERCIAL = "commercial"
    AIRLINE_TRANSPORT = "airline_transport"


class PilotCategoryClass(Enum):
    """Aircraft category and class combinations on a pilot certificate."""

    AIRPLANE_SINGLE_ENGINE_LAND = "airplane_single_engine_land"
    AIRPLANE_SINGLE_ENGINE_SEA = "airplane_single_engine_sea"
    AIRPLANE_MULTI_ENGINE_LAND = "airplane_multi_engine_land"
    AIRPLANE_MULTI_ENGINE_SEA = "airplane_multi_engine_sea"
    GLIDER = "glider"
    ROTORCRAFT_HELICOPTER = "rotorcraft_helicopter"
    ROTORCRAFT_GYROPLANE = "rotorcraft_gyroplane"
    LIGHTER_THAN_AIR_BALLOON = "lighter_than_air_balloon"
    LIGHTER_THAN_AIR_AIRSHIP = "lighter_than_air_airship"
    POWERED_LIFT = "powered_lift"


class InstrumentCategory(Enum):
    """Aircraft categories for an instrument rating."""

    AIRPLANE = "airplane"
    HELICOPTER = "helicopter"
    POWERED_LIFT = "powered_lift"


class FlightInstructorCategory(Enum):
    """Aircraft categories for a flight instructor rating."""

    AIRPLANE_SINGLE_ENGINE = "airplane_single_engine"
    AIRPLANE_MULTI_ENGINE = "airplane_multi_engine"
    GLIDER = "glider"
    ROTORCRAFT_HELICOPTER = "rotorcraft_helicopter"
    ROTORCRAFT_GYROPLANE = "rotorcraft_gyroplane"
    POWERED_LIFT = "powered_lift"


class FlightEngineerRating(Enum):
    """Engine ratings on flight engineer certificates."""

    RECIPROCATING = "reciprocating"
    TURBOPROP = "turboprop"
    JET = "jet"


class MechanicRating(Enum):
    """Ratings on an aviation maintenance technician certificate."""

    AIRFRAME = "airframe"
    POWERPLANT = "powerplant"


class GroundInstructorRating(Enum):
    """Ratings on a ground instructor certificate."""

    BASIC = "basic"
    ADVANCED = "advanced"
    INSTRUMENT = "instrument"


class RepairmanLightSportRating(Enum):
    """Ratings on a light-sport repairman certificate."""

    MAINTENANCE = "maintenance"
    INSPECTION = "inspection"


class RiggerLevel(RankedLevel):
    """Parachute rigger certificate levels, lowest to highest."""

    SENIOR = "senior"
    MASTER = "master"


class RiggerRatingType(Enum):
    """Parachute types a rigger may be rated for."""

    BACK = "back"
    CHEST = "chest"
    SEAT = "seat"
    LAP = "lap"


@dataclass(frozen=True)
class CategoryClassRating:
    """Pilot rating for an aircraft category and class at a given level."""

    category_class: PilotCategoryClass
    level: PilotLevel


@dataclass(frozen=True)
class InstrumentRating:
    """Pilot instrument rating for an aircraft category."""

    category: InstrumentCategory


@dataclass(frozen=True)
class TypeRating:
    """Pilot type rating for an ICAO aircraft type at a given level."""

    aircraft_type: str
    level: PilotLevel


PilotRating = Union[CategoryClassRating, InstrumentRating, TypeRating]


@dataclass(frozen=True)
class FlightInstructorCategoryRating:
    """Flight instructor rating for an aircraft category."""

    category: FlightInstructorCategory


@dataclass(frozen=True)
class FlightInstructorInstrumentRating:
    """Flight instructor instrument rating for an aircraft category."""

    category: InstrumentCategory


@dataclass(frozen=True)
class FlightInstructorSportRating:
    """Flight instructor rating limited to sport pilot training."""


FlightInstructorRating = Union[
    FlightInstructorCategoryRating,
    FlightInstructorInstrumentRating,
    FlightInstructorSportRating,
]


@dataclass(frozen=True)
class RiggerRating:
    """Rigger rating for one parachute type, earned at its own level."""

    parachute: RiggerRatingType
    level: RiggerLevel


@dataclass(frozen=True)
class PilotCertificate:
    """Pilot certificate.

    Attributes:
        level: Certificate level currently held.
        ratings: Category/class, instrument and type ratings.
        centerline_thrust_only: Multi-engine privileges are limited to
            centerline-thrust aircraft.
    """

    kind: ClassVar[CertificateKind] = CertificateKind.PILOT

    level: PilotLevel
    ratings: frozenset[PilotRating] = field(default_factory=frozenset)
    centerline_thrust_only: bool = False


@dataclass(frozen=True)
class FlightInstructorCertificate:
    """Flight instructor certificate, which always expires."""

    kind: ClassVar[CertificateKind] = CertificateKind.FLIGHT_INSTRUCTOR

    expiration_date: date
    ratings: frozenset[FlightInstructorRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class AuthorizedAircraftInstructorCertificate:
    """Authorized aircraft instructor certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.AUTHORIZED_AIRCRAFT_INSTRUCTOR


@dataclass(frozen=True)
class RemotePilotCertificate:
    """Small unmanned aircraft remote pilot certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.REMOTE_PILOT


@dataclass(frozen=True)
class GroundInstructorCertificate:
    """Ground instructor certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.GROUND_INSTRUCTOR

    ratings: frozenset[GroundInstructorRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class FlightEngineerCertificate:
    """Flight engineer certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.FLIGHT_ENGINEER

    ratings: frozenset[FlightEngineerRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class FlightEngineerLesseeCertificate:
    """Special-purpose flight engineer certificate for leased aircraft."""

    kind: ClassVar[CertificateKind] = CertificateKind.FLIGHT_ENGINEER_LESSEE


@dataclass(frozen=True)
class FlightEngineerForeignCertificate:
    """Special-purpose flight engineer certificate based on a foreign license."""

    kind: ClassVar[CertificateKind] = CertificateKind.FLIGHT_ENGINEER_FOREIGN

    ratings: frozenset[FlightEngineerRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class MechanicCertificate:
    """Aviation maintenance technician certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.MECHANIC

    ratings: frozenset[MechanicRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ControlTowerOperatorCertificate:
    """Control tower operator certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.CONTROL_TOWER_OPERATOR


@dataclass(frozen=True)
class RepairmanCertificate:
    """Repairman certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.REPAIRMAN


@dataclass(frozen=True)
class RepairmanExperimentalCertificate:
    """Repairman certificate for an experimental amateur-built aircraft."""

    kind: ClassVar[CertificateKind] = CertificateKind.REPAIRMAN_EXPERIMENTAL


@dataclass(frozen=True)
class RepairmanLightSportCertificate:
    """Repairman certificate for light-sport aircraft."""

    kind: ClassVar[CertificateKind] = CertificateKind.REPAIRMAN_LIGHT_SPORT

    ratings: frozenset[RepairmanLightSportRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class RiggerCertificate:
    """Parachute rigger certificate.

    Attributes:
        level: Certificate level currently held.
        ratings: Parachute ratings, each carrying the level it was earned at.
    """

    kind: ClassVar[CertificateKind] = CertificateKind.RIGGER

    level: RiggerLevel
    ratings: frozenset[RiggerRating] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DispatcherCertificate:
    """Aircraft dispatcher certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.DISPATCHER


@dataclass(frozen=True)
class NavigatorCertificate:
    """Flight navigator certificate."""

    kind: ClassVar[CertificateKind] = CertificateKind.NAVIGATOR


@dataclass(frozen=True)
class NavigatorLesseeCertificate:
    """Special-purpose flight navigator certificate for leased aircraft."""

    kind: ClassVar[CertificateKind] = CertificateKind.NAVIGATOR_LESSEE


Certificate = Union[
    PilotCertificate,
    FlightInstructorCertificate,
    AuthorizedAircraftInstructorCertificate,
    RemotePilotCertificate,
    GroundInstructorCertificate,
    FlightEngineerCertificate,
    FlightEngineerLesseeCertificate,
    FlightEngineerForeignCertificate,
    MechanicCertificate,
    ControlTowerOperatorCertificate,
    RepairmanCertificate,
    RepairmanExperimentalCertificate,
    RepairmanLightSportCertificate,
    RiggerCertificate,
    DispatcherCertificate,
    NavigatorCertificate,
    NavigatorLesseeCertificate,
]
