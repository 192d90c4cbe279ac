"""Public SDK surface for the airmen registry parser.

This module provides a stable import path for registry consumers.
It re-exports the client, options, domain types and errors.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable, Mapping

from core.certificate_types import (
    Certificate,
    CertificateKind,
    PilotCertificate,
    PilotLevel,
    RiggerCertificate,
    RiggerLevel,
)
from core.config import AirmenConfig
from core.errors import (
    AirmenError,
    AirmenFileNotFoundError,
    AirmenIngestError,
    AirmenRecordError,
)
from core.holder_types import Address, BasicMedMedical, FAAMedical, Holder, MedicalClass
from core.types import ALL_REGISTRY_FILES, ParseOptions, ProgressSnapshot, RegistryFile
from ingest.error_sink import ErrorCollector, ErrorSink
from ingest.progress import ProgressTracker
from store.registry_sdk import RegistryClient


def parse(
    directory: str | Path,
    files: Iterable[RegistryFile] = ALL_REGISTRY_FILES,
    progress: ProgressTracker | None = None,
    error_sink: ErrorSink | None = None,
) -> Mapping[str, Holder]:
    """Parse registry files from ``directory`` with environment defaults.

    Args:
        directory: Directory holding the extracted registry CSV files.
        files: Files to parse, in precedence order.
        progress: Optional progress tracker.
        error_sink: Optional callable receiving non-fatal errors.

    Returns:
        Read-only mapping from holder identifier to merged holder.
    """
    config = replace(AirmenConfig.from_env(), data_dir=Path(directory))
    return RegistryClient(config).parse(files, progress, error_sink)


__all__ = [
    "ALL_REGISTRY_FILES",
    "Address",
    "AirmenConfig",
    "AirmenError",
    "AirmenFileNotFoundError",
    "AirmenIngestError",
    "AirmenRecordError",
    "BasicMedMedical",
    "Certificate",
    "CertificateKind",
    "ErrorCollector",
    "ErrorSink",
    "FAAMedical",
    "Holder",
    "MedicalClass",
    "ParseOptions",
    "PilotCertificate",
    "PilotLevel",
    "ProgressSnapshot",
    "ProgressTracker",
    "RegistryClient",
    "RegistryFile",
    "RiggerCertificate",
    "RiggerLevel",
    "parse",
]
