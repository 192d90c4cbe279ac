"""Column layouts for registry row kinds.

Each layout is an explicit, ordered table of fixed column names followed
by a variable-count rating section. Layouts are validated once at import
and file headers are checked against them before any row is decoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.constants import PILOT_RATING_FIELD_COUNT
from core.errors import AirmenConfigError, AirmenIngestError


@dataclass(frozen=True)
class RowSchema:
    """Positional layout of one registry row kind.

    Attributes:
        name: Layout name used in messages.
        fixed_columns: Ordered fixed-position column names.
        rating_field_count: Rating positions after the fixed columns;
            None when the rating section is unbounded.
        has_type_rating_tail: Whether an unbounded type-rating section
            follows the bounded rating positions.
    """

    name: str
    fixed_columns: tuple[str, ...]
    rating_field_count: int | None = 0
    has_type_rating_tail: bool = False

    @property
    def fixed_width(self) -> int:
        """Return the number of fixed-position columns."""
        return len(self.fixed_columns)

    def position(self, column: str) -> int:
        """Return the zero-based index of a fixed column."""
        return self.fixed_columns.index(column)

    def rating_slice(self) -> slice:
        """Return the slice covering the rating positions."""
        if self.rating_field_count is None:
            return slice(self.fixed_width, None)
        return slice(self.fixed_width, self.fixed_width + self.rating_field_count)

    def type_rating_slice(self) -> slice:
        """Return the slice covering the type-rating tail."""
        rating_end = self.rating_slice().stop
        if not self.has_type_rating_tail or rating_end is None:
            return slice(0, 0)
        return slice(rating_end, None)


_CERTIFICATE_COLUMNS = (
    "UNIQUE ID",
    "FIRST NAME",
    "LAST NAME",
    "TYPE",
    "LEVEL",
    "EXPIRE DATE",
)

BASIC_SCHEMA = RowSchema(
    name="basic",
    fixed_columns=(
        "UNIQUE ID",
        "FIRST NAME",
        "LAST NAME",
        "STREET 1",
        "STREET 2",
        "CITY",
        "STATE",
        "ZIP CODE",
        "COUNTRY",
        "REGION",
        "MED CLASS",
        "MED DATE",
        "MED EXP DATE",
        "BASIC MED COURSE DATE",
        "BASIC MED CMEC DATE",
    ),
)

PILOT_CERT_SCHEMA = RowSchema(
    name="pilot_cert",
    fixed_columns=_CERTIFICATE_COLUMNS,
    rating_field_count=PILOT_RATING_FIELD_COUNT,
    has_type_rating_tail=True,
)

NONPILOT_CERT_SCHEMA = RowSchema(
    name="nonpilot_cert",
    fixed_columns=_CERTIFICATE_COLUMNS,
    rating_field_count=None,
)


def check_header(schema: RowSchema, header: Sequence[str]) -> None:
    """Verify that a file header is wide enough for the fixed columns.

    Args:
        schema: Expected row layout.
        header: Header fields read from the file.

    Raises:
        AirmenIngestError: If the header has fewer columns than required.
    """
    if len(header) < schema.fixed_width:
        raise AirmenIngestError(
            f"Header for {schema.name} file has {len(header)} columns, "
            f"expected at least {schema.fixed_width}. "
            "Check that the file belongs to this registry edition."
        )


def _validate_schema(schema: RowSchema) -> None:
    """Fail fast on a malformed layout definition."""
    if not schema.fixed_columns or schema.fixed_columns[0] != "UNIQUE ID":
        raise AirmenConfigError(f"Layout {schema.name} must start with the UNIQUE ID column.")
    if len(set(schema.fixed_columns)) != schema.fixed_width:
        raise AirmenConfigError(f"Layout {schema.name} has duplicate column names.")
    if schema.has_type_rating_tail and schema.rating_field_count is None:
        raise AirmenConfigError(
            f"Layout {schema.name} cannot follow an unbounded rating section with type ratings."
        )


for _schema in (BASIC_SCHEMA, PILOT_CERT_SCHEMA, NONPILOT_CERT_SCHEMA):
    _validate_schema(_schema)
