"""Unit tests for error collection."""

from __future__ import annotations

from core.errors import AirmenFileNotFoundError, LevelNotGivenError, MedicalWithoutDateError
from ingest.error_sink import ErrorCollector


def test_error_collector_keeps_arrival_order(tmp_path) -> None:
    """Collected errors should be returned in the order reported."""
    collector = ErrorCollector()
    first = LevelNotGivenError("A1")
    second = AirmenFileNotFoundError(tmp_path / "PILOT_CERT.csv")

    collector(first)
    collector(second)

    assert collector.errors == [first, second]
    assert collector.count == 2


def test_error_collector_filters_by_type() -> None:
    """of_type should select matching errors only."""
    collector = ErrorCollector()
    collector(LevelNotGivenError("A1"))
    collector(MedicalWithoutDateError("A2"))

    (error,) = collector.of_type(MedicalWithoutDateError)

    assert error.holder_id == "A2"


def test_error_collector_returns_copy() -> None:
    """Mutating the returned list should not affect the collector."""
    collector = ErrorCollector()
    collector(LevelNotGivenError("A1"))

    collector.errors.clear()

    assert collector.count == 1
