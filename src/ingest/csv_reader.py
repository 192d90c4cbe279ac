"""Streaming reader for registry CSV files.

This module yields raw field rows with the byte offset reached after
each row so callers can weight progress by file size.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from core.constants import CSV_DELIMITER
from core.errors import AirmenFileNotFoundError, AirmenIngestError
from decode.row_schema import RowSchema, check_header


@dataclass(frozen=True)
class RawRow:
    """One physical CSV record.

    Attributes:
        line_number: Source line where the record ends.
        fields: Raw field texts.
        bytes_consumed: File bytes read up to the end of this record.
        undecodable: True when a line of this record held bytes invalid in
            the file encoding; that text carries replacement characters.
    """

    line_number: int
    fields: tuple[str, ...]
    bytes_consumed: int
    undecodable: bool = False


def registry_file_size(path: Path) -> int:
    """Return the size of a registry file in bytes.

    Raises:
        AirmenFileNotFoundError: If the file does not exist.
        AirmenIngestError: If the file cannot be inspected.
    """
    try:
        return path.stat().st_size
    except FileNotFoundError as error:
        raise AirmenFileNotFoundError(path) from error
    except OSError as error:
        raise AirmenIngestError(f"Failed to inspect registry file {path}: {error}") from error


def read_registry_rows(path: Path, schema: RowSchema, encoding: str) -> Iterator[RawRow]:
    """Stream data rows from one registry file.

    The header line is checked against ``schema`` and discarded. Blank
    lines are skipped. Bytes invalid in ``encoding`` flag only the record
    holding them, so one bad line never ends the file.

    Args:
        path: Registry CSV file.
        schema: Expected layout of the file.
        encoding: Text encoding of the file.

    Yields:
        Raw rows in file order.

    Raises:
        AirmenFileNotFoundError: If the file does not exist.
        AirmenIngestError: If the file cannot be read, the encoding is
            unknown, or its header does not fit ``schema``.
    """
    try:
        with path.open("rb") as handle:
            yield from _read_rows(handle, schema, encoding)
    except FileNotFoundError as error:
        raise AirmenFileNotFoundError(path) from error
    except (OSError, LookupError, csv.Error) as error:
        raise AirmenIngestError(f"Failed to read registry file {path}: {error}") from error


def _read_rows(handle: BinaryIO, schema: RowSchema, encoding: str) -> Iterator[RawRow]:
    """Parse CSV records from a binary handle while counting bytes."""
    consumed = 0
    undecodable = False

    def decoded_lines() -> Iterator[str]:
        nonlocal consumed, undecodable
        for raw_line in handle:
            consumed += len(raw_line)
            try:
                line = raw_line.decode(encoding)
            except UnicodeDecodeError:
                undecodable = True
                line = raw_line.decode(encoding, errors="replace")
            yield line

    reader = csv.reader(decoded_lines(), delimiter=CSV_DELIMITER)
    header = next(reader, None)
    if header is None:
        return
    check_header(schema, header)
    undecodable = False
    for fields in reader:
        row_undecodable, undecodable = undecodable, False
        if not fields:
            continue
        yield RawRow(
            line_number=reader.line_num,
            fields=tuple(fields),
            bytes_consumed=consumed,
            undecodable=row_undecodable,
        )
