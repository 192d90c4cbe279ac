"""Runtime configuration model for the registry parser.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_ENCODING,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PROGRESS_BATCH_ROWS,
)
from core.errors import AirmenConfigError


@dataclass(frozen=True)
class AirmenConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory holding the extracted registry CSV files.
        max_workers: Upper bound on concurrently scanned files.
        progress_batch_rows: Rows scanned between progress reports.
        encoding: Text encoding of the registry files.
    """

    data_dir: Path
    max_workers: int
    progress_batch_rows: int
    encoding: str

    @classmethod
    def from_env(cls) -> "AirmenConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            AirmenConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("AIRMEN_DATA_DIR", str(DEFAULT_DATA_DIR))
        max_workers = _parse_positive_int(
            "AIRMEN_MAX_WORKERS", os.getenv("AIRMEN_MAX_WORKERS", str(DEFAULT_MAX_WORKERS))
        )
        progress_batch_rows = _parse_positive_int(
            "AIRMEN_PROGRESS_BATCH_ROWS",
            os.getenv("AIRMEN_PROGRESS_BATCH_ROWS", str(DEFAULT_PROGRESS_BATCH_ROWS)),
        )
        encoding = os.getenv("AIRMEN_ENCODING", DEFAULT_ENCODING)
        return cls(
            data_dir=Path(data_dir_value).expanduser().resolve(),
            max_workers=max_workers,
            progress_batch_rows=progress_batch_rows,
            encoding=encoding,
        )


def _parse_positive_int(variable_name: str, raw_value: str) -> int:
    """Parse a positive integer environment value.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        AirmenConfigError: If value is not an integer of at least one.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise AirmenConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if value < 1:
        raise AirmenConfigError(
            f"Invalid {variable_name} value: expected at least 1, got {value}. "
            f"Set {variable_name} to a positive value."
        )
    return value
