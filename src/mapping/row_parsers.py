"""Per-file decode and map bindings.

Every registry file kind is bound to its column layout, its decoder and
its mapper. The ingest pipeline only ever calls ``parse_fields``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from core.holder_types import Holder
from core.types import RegistryFile
from decode.basic_row import decode_basic_row
from decode.field_coercion import trim
from decode.nonpilot_cert_row import decode_nonpilot_cert_row
from decode.pilot_cert_row import decode_pilot_cert_row
from decode.row_schema import BASIC_SCHEMA, NONPILOT_CERT_SCHEMA, PILOT_CERT_SCHEMA, RowSchema
from mapping.basic_mapper import map_basic_row
from mapping.nonpilot_cert_mapper import map_nonpilot_cert_row
from mapping.pilot_cert_mapper import map_pilot_cert_row


@dataclass(frozen=True)
class RowParser:
    """Decoder and mapper pair for one registry file kind."""

    schema: RowSchema
    decode: Callable[[Sequence[str]], Any]
    map_row: Callable[[Any], Holder]

    def parse(self, fields: Sequence[str]) -> Holder:
        """Decode then map one row of fields."""
        return self.map_row(self.decode(fields))


ROW_PARSERS: dict[RegistryFile, RowParser] = {
    RegistryFile.PILOT_BASIC: RowParser(BASIC_SCHEMA, decode_basic_row, map_basic_row),
    RegistryFile.NONPILOT_BASIC: RowParser(BASIC_SCHEMA, decode_basic_row, map_basic_row),
    RegistryFile.PILOT_CERT: RowParser(
        PILOT_CERT_SCHEMA, decode_pilot_cert_row, map_pilot_cert_row
    ),
    RegistryFile.NONPILOT_CERT: RowParser(
        NONPILOT_CERT_SCHEMA, decode_nonpilot_cert_row, map_nonpilot_cert_row
    ),
}


def parse_fields(registry_file: RegistryFile, fields: Sequence[str]) -> Holder | None:
    """Turn one physical row into a partial holder.

    Args:
        registry_file: File the row was read from.
        fields: Raw row fields.

    Returns:
        The partial holder, or None for a row with no content.

    Raises:
        AirmenRecordError: If the row fails decoding or mapping.
    """
    if all(trim(field) is None for field in fields):
        return None
    return ROW_PARSERS[registry_file].parse(fields)
