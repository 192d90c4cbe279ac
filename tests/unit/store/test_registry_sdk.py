"""Unit tests for the registry SDK client."""

from __future__ import annotations

from dataclasses import replace

from core.certificate_types import PilotCertificate
from core.config import AirmenConfig
from core.errors import UnknownRatingError
from core.types import RegistryFile
from ingest.error_sink import ErrorCollector
from store.registry_sdk import RegistryClient
from tests.fixture_paths import registry_fixture_dir


def _client() -> RegistryClient:
    config = replace(AirmenConfig.from_env(), data_dir=registry_fixture_dir())
    return RegistryClient(config)


def test_registry_client_reads_config_from_env(monkeypatch, tmp_path) -> None:
    """A client without config should build it from the environment."""
    monkeypatch.setenv("AIRMEN_DATA_DIR", str(tmp_path))

    client = RegistryClient()

    assert client.config.data_dir == tmp_path.resolve()


def test_parse_file_returns_single_file_holders() -> None:
    """parse_file should merge rows from one file only."""
    collector = ErrorCollector()

    holders = _client().parse_file(RegistryFile.PILOT_CERT, error_sink=collector)

    assert sorted(holders) == ["A0000001", "A0000002", "A0000004", "A0000006"]
    assert holders["A0000002"].address is None
    assert len(holders["A0000002"].certificates) == 2
    (error,) = collector.of_type(UnknownRatingError)
    assert error.code == "XYZ"


def test_parse_deduplicates_requested_files() -> None:
    """Repeating a file should not duplicate its contributions."""
    holders = _client().parse([RegistryFile.PILOT_CERT, RegistryFile.PILOT_CERT])

    pilot_certificates = [
        certificate
        for certificate in holders["A0000001"].certificates
        if isinstance(certificate, PilotCertificate)
    ]
    assert len(pilot_certificates) == 1
