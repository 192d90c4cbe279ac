"""Unit tests for the ingest pipeline."""

from __future__ import annotations

import shutil
from dataclasses import replace
from pathlib import Path

from core.config import AirmenConfig
from core.errors import (
    AirmenFileNotFoundError,
    AirmenIngestError,
    LevelNotGivenError,
    UndecodableRowError,
)
from core.types import ParseOptions, RegistryFile
from ingest import pipeline
from ingest.error_sink import ErrorCollector
from ingest.pipeline import parse_registry, scan_registry_file
from ingest.progress import ProgressTracker
from store.holder_database import HolderDatabase
from tests.fixture_paths import fixture_path, registry_fixture_dir


def _config(**overrides) -> AirmenConfig:
    return replace(AirmenConfig.from_env(), **overrides)


def test_scan_registry_file_appends_holders_and_reports_rejects() -> None:
    """Scanning should keep good rows and report rejected ones."""
    database = HolderDatabase()
    collector = ErrorCollector()

    result = scan_registry_file(
        RegistryFile.NONPILOT_CERT,
        registry_fixture_dir(),
        database,
        error_sink=collector,
        batch_rows=2,
    )

    assert result.holder_count == 5
    assert result.rejected_count == 1
    assert result.failed is False
    assert len(database) == 5
    (error,) = collector.errors
    assert isinstance(error, LevelNotGivenError)
    assert error.holder_id == "B0000003"


def test_scan_registry_file_rejects_undecodable_row_and_continues(tmp_path: Path) -> None:
    """A row with invalid bytes should be rejected without ending the file."""
    header = "UNIQUE ID,FIRST NAME,LAST NAME,TYPE,LEVEL,EXPIRE DATE,RATING1\n"
    (tmp_path / "NONPILOT_CERT.csv").write_bytes(
        header.encode("utf-8")
        + b"A1,JO,DOE,D,,,\n"
        + b"A2,J\xffO,DOE,D,,,\n"
        + b"A3,AL,DOE,D,,,\n"
    )
    database = HolderDatabase()
    collector = ErrorCollector()

    result = scan_registry_file(
        RegistryFile.NONPILOT_CERT,
        tmp_path,
        database,
        encoding="utf-8",
        error_sink=collector,
    )

    assert sorted(database.merge()) == ["A1", "A3"]
    assert result.failed is False
    assert result.rejected_count == 1
    (error,) = collector.errors
    assert isinstance(error, UndecodableRowError)
    assert error.holder_id == "A2"
    assert error.line_number == 3


def test_scan_registry_file_reports_missing_file(tmp_path: Path) -> None:
    """A missing file should be reported once and end only that scan."""
    collector = ErrorCollector()
    tracker = ProgressTracker()

    result = scan_registry_file(
        RegistryFile.PILOT_CERT,
        tmp_path,
        HolderDatabase(),
        progress=tracker,
        error_sink=collector,
    )

    assert result.failed is True
    assert result.holder_count == 0
    assert collector.of_type(AirmenFileNotFoundError)
    assert tracker.is_registered("PILOT_CERT") is False


def test_scan_registry_file_finishes_progress(tmp_path: Path) -> None:
    """Progress for the scanned file should end at its size."""
    shutil.copy(fixture_path("registry/PILOT_BASIC.csv"), tmp_path / "PILOT_BASIC.csv")
    tracker = ProgressTracker()

    scan_registry_file(
        RegistryFile.PILOT_BASIC,
        tmp_path,
        HolderDatabase(),
        progress=tracker,
        batch_rows=1,
    )

    assert tracker.total == (tmp_path / "PILOT_BASIC.csv").stat().st_size
    assert tracker.is_finished is True


def test_scan_registry_file_reports_bad_header(tmp_path: Path) -> None:
    """A narrow header should fail the file with an ingest error."""
    (tmp_path / "PILOT_CERT.csv").write_text("UNIQUE ID\nA1\n", encoding="latin-1")
    collector = ErrorCollector()

    result = scan_registry_file(
        RegistryFile.PILOT_CERT, tmp_path, HolderDatabase(), error_sink=collector
    )

    assert result.failed is True
    (error,) = collector.errors
    assert isinstance(error, AirmenIngestError)


def test_parse_registry_merges_requested_files() -> None:
    """Parsing two files should merge their partials per holder."""
    options = ParseOptions.build(
        registry_fixture_dir(), [RegistryFile.NONPILOT_BASIC, RegistryFile.NONPILOT_CERT]
    )

    holders = parse_registry(options, _config(max_workers=2))

    assert holders["B0000001"].address is not None
    assert len(holders["B0000001"].certificates) == 2


def test_parse_registry_with_no_files_returns_empty_mapping() -> None:
    """An empty file selection should produce no holders."""
    options = ParseOptions.build(registry_fixture_dir(), [])

    assert dict(parse_registry(options, _config())) == {}


def test_parse_registry_registers_every_file_before_scanning(tmp_path: Path) -> None:
    """Missing files should count as zero bytes in the aggregate total."""
    shutil.copy(fixture_path("registry/PILOT_CERT.csv"), tmp_path / "PILOT_CERT.csv")
    tracker = ProgressTracker()
    options = ParseOptions.build(tmp_path, [RegistryFile.PILOT_BASIC, RegistryFile.PILOT_CERT])

    parse_registry(options, _config(), progress=tracker, error_sink=ErrorCollector())

    assert tracker.total == (tmp_path / "PILOT_CERT.csv").stat().st_size
    assert tracker.is_finished is True


def test_parse_registry_logs_completion(monkeypatch) -> None:
    """Run completion should be logged with per-file counts."""
    events: list[tuple[str, dict]] = []

    class _RecordingLogger:
        def info(self, event: str, **kwargs) -> None:
            events.append((event, kwargs))

        def debug(self, event: str, **kwargs) -> None:
            events.append((event, kwargs))

        def warning(self, event: str, **kwargs) -> None:
            events.append((event, kwargs))

        def error(self, event: str, **kwargs) -> None:
            events.append((event, kwargs))

    monkeypatch.setattr(pipeline, "_LOGGER", _RecordingLogger())
    options = ParseOptions.build(registry_fixture_dir(), [RegistryFile.PILOT_CERT])

    parse_registry(options, _config())

    completed = [fields for event, fields in events if event == "parse_completed"]
    assert completed[0]["rejected_count"] == 3
    assert completed[0]["failed_files"] == []
