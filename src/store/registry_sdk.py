"""Python SDK for registry parsing.

This module exposes the high-level client that resolves configuration,
builds parse requests and returns merged holders.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.config import AirmenConfig
from core.holder_types import Holder
from core.types import ALL_REGISTRY_FILES, ParseOptions, RegistryFile
from ingest.error_sink import ErrorSink
from ingest.pipeline import parse_registry, scan_registry_file
from ingest.progress import ProgressTracker
from store.holder_database import HolderDatabase


class RegistryClient:
    """Primary SDK entry point for registry parsing."""

    def __init__(self, config: AirmenConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or AirmenConfig.from_env()

    @property
    def config(self) -> AirmenConfig:
        """Return the runtime configuration in use."""
        return self._config

    def parse(
        self,
        files: Iterable[RegistryFile] = ALL_REGISTRY_FILES,
        progress: ProgressTracker | None = None,
        error_sink: ErrorSink | None = None,
    ) -> Mapping[str, Holder]:
        """Parse registry files from the configured data directory.

        Args:
            files: Files to parse; their order sets field precedence,
                later files winning.
            progress: Optional tracker receiving byte-weighted progress.
            error_sink: Optional callable receiving non-fatal errors.

        Returns:
            Read-only mapping from holder identifier to merged holder.
        """
        options = ParseOptions.build(self._config.data_dir, files)
        return parse_registry(options, self._config, progress, error_sink)

    def parse_file(
        self,
        registry_file: RegistryFile,
        error_sink: ErrorSink | None = None,
    ) -> Mapping[str, Holder]:
        """Parse a single registry file synchronously.

        Args:
            registry_file: File to parse.
            error_sink: Optional callable receiving non-fatal errors.

        Returns:
            Holders contributed by that file, merged per identifier.
        """
        database = HolderDatabase(source_order=[registry_file.name])
        scan_registry_file(
            registry_file,
            self._config.data_dir,
            database,
            encoding=self._config.encoding,
            error_sink=error_sink,
            batch_rows=self._config.progress_batch_rows,
        )
        return database.merge()
