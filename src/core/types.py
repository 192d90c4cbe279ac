"""Shared typed models.

This module defines immutable request and status models used by the
ingest, store and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from core.constants import (
    NONPILOT_BASIC_FILE_NAME,
    NONPILOT_CERT_FILE_NAME,
    PILOT_BASIC_FILE_NAME,
    PILOT_CERT_FILE_NAME,
)


class RegistryFile(Enum):
    """A CSV file within a registry distribution; value is the file name."""

    PILOT_BASIC = PILOT_BASIC_FILE_NAME
    NONPILOT_BASIC = NONPILOT_BASIC_FILE_NAME
    PILOT_CERT = PILOT_CERT_FILE_NAME
    NONPILOT_CERT = NONPILOT_CERT_FILE_NAME

    @property
    def file_name(self) -> str:
        """Return the on-disk file name."""
        return self.value


ALL_REGISTRY_FILES: tuple[RegistryFile, ...] = (
    RegistryFile.PILOT_BASIC,
    RegistryFile.NONPILOT_BASIC,
    RegistryFile.PILOT_CERT,
    RegistryFile.NONPILOT_CERT,
)


@dataclass(frozen=True)
class ParseOptions:
    """Registry parse request.

    Attributes:
        directory: Directory holding the extracted CSV files.
        files: Files to scan; their order is the merge contribution order.
    """

    directory: Path
    files: tuple[RegistryFile, ...] = field(default=ALL_REGISTRY_FILES)

    @classmethod
    def build(cls, directory: str | Path, files: Iterable[RegistryFile]) -> "ParseOptions":
        """Build options with duplicate files removed, keeping first order."""
        unique_files = tuple(dict.fromkeys(files))
        return cls(directory=Path(directory), files=unique_files)


@dataclass(frozen=True)
class ProgressSnapshot:
    """Point-in-time progress of a parse run.

    Attributes:
        completed: Work units consumed so far.
        total: Work units expected across all registered sources.
    """

    completed: int
    total: int

    @property
    def is_indeterminate(self) -> bool:
        """Return true while no source has reported its size."""
        return self.total == 0

    @property
    def is_finished(self) -> bool:
        """Return true once every registered unit is consumed."""
        return not self.is_indeterminate and self.completed >= self.total

    @property
    def fraction_done(self) -> float | None:
        """Return completed/total, or None while indeterminate."""
        if self.is_indeterminate:
            return None
        return self.completed / self.total

    @property
    def percent_done(self) -> float | None:
        """Return the fraction done expressed as a percentage."""
        fraction = self.fraction_done
        if fraction is None:
            return None
        return fraction * 100


@dataclass(frozen=True)
class FileScanResult:
    """Outcome of scanning one registry file.

    Attributes:
        registry_file: File that was scanned.
        holder_count: Partial holders appended to the database.
        rejected_count: Rows rejected with a record-level error.
        failed: True when a file-level error ended the scan.
    """

    registry_file: RegistryFile
    holder_count: int
    rejected_count: int
    failed: bool = False
