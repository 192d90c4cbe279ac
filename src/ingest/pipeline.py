"""Registry ingest orchestration.

This module fans out one scan per requested registry file onto a
thread pool, streams each file through its row parser into a shared
holder database, and merges the partial holders once every scan ends.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Mapping

from core.config import AirmenConfig
from core.constants import DEFAULT_ENCODING, DEFAULT_PROGRESS_BATCH_ROWS
from core.errors import (
    AirmenError,
    AirmenFileNotFoundError,
    AirmenIngestError,
    AirmenRecordError,
    UndecodableRowError,
)
from core.holder_types import Holder
from core.logging_config import get_logger
from core.types import FileScanResult, ParseOptions, RegistryFile
from decode.field_coercion import trim
from ingest.csv_reader import RawRow, read_registry_rows, registry_file_size
from ingest.error_sink import ErrorSink
from ingest.progress import ProgressTracker
from mapping.row_parsers import ROW_PARSERS, parse_fields
from store.holder_database import HolderDatabase

_LOGGER = get_logger(__name__)


class IngestPipelineRunner:
    """Runner for one concurrent parse of a registry directory."""

    def __init__(
        self,
        options: ParseOptions,
        config: AirmenConfig,
        progress: ProgressTracker | None = None,
        error_sink: ErrorSink | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._progress = progress
        self._error_sink = error_sink
        self._database = HolderDatabase(
            source_order=[registry_file.name for registry_file in options.files]
        )

    def run(self) -> Mapping[str, Holder]:
        """Scan every requested file and return merged holders."""
        files = self._options.files
        self._register_progress(files)
        if files:
            worker_count = min(self._config.max_workers, len(files))
            with ThreadPoolExecutor(max_workers=worker_count) as executor:
                futures = [executor.submit(self._scan, registry_file) for registry_file in files]
                results = [future.result() for future in futures]
        else:
            results = []
        holders = self._database.merge()
        _log_parse_completion(self._options, results, len(holders))
        return holders

    def _scan(self, registry_file: RegistryFile) -> FileScanResult:
        return scan_registry_file(
            registry_file,
            self._options.directory,
            self._database,
            encoding=self._config.encoding,
            progress=self._progress,
            error_sink=self._error_sink,
            batch_rows=self._config.progress_batch_rows,
        )

    def _register_progress(self, files: tuple[RegistryFile, ...]) -> None:
        # Sizes are registered up front so the aggregate total never grows mid-run.
        if self._progress is None:
            return
        for registry_file in files:
            path = self._options.directory / registry_file.file_name
            try:
                size = registry_file_size(path)
            except AirmenIngestError:
                # The scan itself reports the missing or unreadable file.
                size = 0
            self._progress.register(registry_file.name, size)


def parse_registry(
    options: ParseOptions,
    config: AirmenConfig,
    progress: ProgressTracker | None = None,
    error_sink: ErrorSink | None = None,
) -> Mapping[str, Holder]:
    """Parse the requested registry files into merged holders.

    Args:
        options: Directory and files to parse.
        config: Runtime configuration.
        progress: Optional tracker receiving byte-weighted progress.
        error_sink: Optional callable receiving every non-fatal error.

    Returns:
        Read-only mapping from holder identifier to merged holder.
    """
    runner = IngestPipelineRunner(options, config, progress, error_sink)
    return runner.run()


def scan_registry_file(
    registry_file: RegistryFile,
    directory: Path,
    database: HolderDatabase,
    *,
    encoding: str = DEFAULT_ENCODING,
    progress: ProgressTracker | None = None,
    error_sink: ErrorSink | None = None,
    batch_rows: int = DEFAULT_PROGRESS_BATCH_ROWS,
) -> FileScanResult:
    """Scan one registry file into ``database``.

    Rejected rows are reported and skipped. A file-level failure is
    reported once and ends this scan only. Progress for the file is
    flushed to completion however the scan ends.

    Args:
        registry_file: File kind to scan.
        directory: Directory holding the registry files.
        database: Shared accumulator for partial holders.
        encoding: Text encoding of the file.
        progress: Optional tracker; the file is registered by size when
            the caller has not registered it.
        error_sink: Optional callable receiving non-fatal errors.
        batch_rows: Rows between database appends and progress reports.

    Returns:
        Counts describing the scan outcome.
    """
    path = directory / registry_file.file_name
    source = registry_file.name
    parser = ROW_PARSERS[registry_file]
    holder_count = 0
    rejected_count = 0
    rows_seen = 0
    pending: list[Holder] = []
    _LOGGER.info("file_scan_started", registry_file=source, path=str(path))
    try:
        if progress is not None and not progress.is_registered(source):
            progress.register(source, registry_file_size(path))
        for row in read_registry_rows(path, parser.schema, encoding):
            rows_seen += 1
            try:
                holder = _parse_row(registry_file, row, encoding)
            except AirmenRecordError as error:
                rejected_count += 1
                _LOGGER.debug(
                    "row_rejected",
                    registry_file=source,
                    line_number=row.line_number,
                    holder_id=error.holder_id,
                    error=str(error),
                )
                _report(error_sink, error)
            else:
                if holder is not None:
                    pending.append(holder)
            if rows_seen % batch_rows == 0:
                holder_count += _flush(database, pending, source)
                if progress is not None:
                    progress.advance_to(source, row.bytes_consumed)
    except AirmenFileNotFoundError as error:
        _LOGGER.warning("file_not_found", registry_file=source, path=str(path))
        _report(error_sink, error)
        return _finish(progress, source, registry_file, holder_count, rejected_count, failed=True)
    except AirmenIngestError as error:
        _LOGGER.error("file_scan_failed", registry_file=source, path=str(path), error=str(error))
        _report(error_sink, error)
        holder_count += _flush(database, pending, source)
        return _finish(progress, source, registry_file, holder_count, rejected_count, failed=True)
    holder_count += _flush(database, pending, source)
    _LOGGER.info(
        "file_scan_completed",
        registry_file=source,
        holder_count=holder_count,
        rejected_count=rejected_count,
    )
    return _finish(progress, source, registry_file, holder_count, rejected_count)


def _parse_row(registry_file: RegistryFile, row: RawRow, encoding: str) -> Holder | None:
    """Parse one raw row, rejecting rows with undecodable bytes."""
    if row.undecodable:
        raise UndecodableRowError(row.line_number, trim(row.fields[0]), encoding)
    return parse_fields(registry_file, row.fields)


def _flush(database: HolderDatabase, pending: list[Holder], source: str) -> int:
    """Append pending holders and clear the batch."""
    count = len(pending)
    database.append(pending, source=source)
    pending.clear()
    return count


def _finish(
    progress: ProgressTracker | None,
    source: str,
    registry_file: RegistryFile,
    holder_count: int,
    rejected_count: int,
    failed: bool = False,
) -> FileScanResult:
    """Flush file progress to completion and build the scan result."""
    if progress is not None:
        progress.finish(source)
    return FileScanResult(
        registry_file=registry_file,
        holder_count=holder_count,
        rejected_count=rejected_count,
        failed=failed,
    )


def _report(error_sink: ErrorSink | None, error: AirmenError) -> None:
    if error_sink is not None:
        error_sink(error)


def _log_parse_completion(
    options: ParseOptions,
    results: list[FileScanResult],
    holder_count: int,
) -> None:
    """Log run completion with per-file outcomes."""
    _LOGGER.info(
        "parse_completed",
        directory=str(options.directory),
        files=[result.registry_file.name for result in results],
        failed_files=[result.registry_file.name for result in results if result.failed],
        partial_count=sum(result.holder_count for result in results),
        rejected_count=sum(result.rejected_count for result in results),
        holder_count=holder_count,
    )
