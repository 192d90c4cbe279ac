"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_AIRMEN_ENV_VARS = (
    "AIRMEN_DATA_DIR",
    "AIRMEN_MAX_WORKERS",
    "AIRMEN_PROGRESS_BATCH_ROWS",
    "AIRMEN_ENCODING",
    "AIRMEN_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def clear_airmen_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against default runtime configuration."""
    for variable_name in _AIRMEN_ENV_VARS:
        monkeypatch.delenv(variable_name, raising=False)
