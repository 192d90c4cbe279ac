"""Registry exception hierarchy.

This module defines traceable domain errors with clear boundaries.
File-level failures end one file scan; record-level failures reject
one row and are reported to the caller without halting the scan.
"""

from __future__ import annotations

from pathlib import Path


class AirmenError(Exception):
    """Base exception for all registry failures."""


class AirmenConfigError(AirmenError):
    """Raised for invalid runtime configuration."""


class AirmenIngestError(AirmenError):
    """Raised when a registry file cannot be scanned."""


class AirmenFileNotFoundError(AirmenIngestError):
    """Raised when a requested registry file is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Registry file not found at {path}. "
            "Extract the full distribution into the data directory."
        )


class AirmenRecordError(AirmenError):
    """Base class for errors that reject a single record."""

    def __init__(self, message: str, holder_id: str | None = None) -> None:
        self.holder_id = holder_id
        super().__init__(message)


class InvalidDateError(AirmenRecordError):
    """Raised for a date that is not MMDDYY or MMDDYYYY."""

    def __init__(self, raw: str, holder_id: str | None = None) -> None:
        self.raw = raw
        suffix = f" for record {holder_id}" if holder_id else ""
        super().__init__(f"Invalid date '{raw}'{suffix}", holder_id)


class IdentifierNotGivenError(AirmenRecordError):
    """Raised when a row with content has no registry identifier."""

    def __init__(self) -> None:
        super().__init__("No unique identifier for row with content")


class UndecodableRowError(AirmenRecordError):
    """Raised when a row holds bytes invalid in the configured encoding."""

    def __init__(self, line_number: int, holder_id: str | None = None, encoding: str = "") -> None:
        self.line_number = line_number
        suffix = f" for record {holder_id}" if holder_id else ""
        super().__init__(
            f"Row on line {line_number} is not valid {encoding or 'text'}{suffix}. "
            "Check AIRMEN_ENCODING against the distribution.",
            holder_id,
        )


class CertificateTypeNotGivenError(AirmenRecordError):
    """Raised when a certificate row has no type code."""

    def __init__(self, holder_id: str) -> None:
        super().__init__(f"No certificate type for record {holder_id}", holder_id)


class LevelNotGivenError(AirmenRecordError):
    """Raised when a level-requiring certificate has no level."""

    def __init__(self, holder_id: str) -> None:
        super().__init__(f"No certificate level for record {holder_id}", holder_id)


class ExpirationDateNotGivenError(AirmenRecordError):
    """Raised when an expiring certificate has no expiration date."""

    def __init__(self, holder_id: str) -> None:
        super().__init__(f"No certificate expiration date for record {holder_id}", holder_id)


class MedicalWithoutDateError(AirmenRecordError):
    """Raised when a medical class is given without an issue date."""

    def __init__(self, holder_id: str) -> None:
        super().__init__(f"No medical issue date for record {holder_id}", holder_id)


class _UnknownCodeError(AirmenRecordError):
    """Shared shape for unrecognized taxonomy codes."""

    label = "code"

    def __init__(self, code: str, holder_id: str) -> None:
        self.code = code
        super().__init__(f"Unknown {self.label} '{code}' for record {holder_id}", holder_id)


class UnknownMedicalClassError(_UnknownCodeError):
    """Raised for an unrecognized medical class code."""

    label = "medical class"


class UnknownCertificateTypeError(_UnknownCodeError):
    """Raised for an unrecognized certificate type code."""

    label = "certificate type"


class UnknownCertificateLevelError(_UnknownCodeError):
    """Raised for an unrecognized or misplaced certificate level code."""

    label = "certificate level"


class UnknownRatingError(_UnknownCodeError):
    """Raised for an unrecognized rating code."""

    label = "rating"


class UnknownRatingLevelError(_UnknownCodeError):
    """Raised when a rating's left part does not match its certificate."""

    label = "rating level"


class InvalidRatingError(AirmenRecordError):
    """Raised for a rating that is not exactly ``<left>/<right>``."""

    def __init__(self, raw: str, holder_id: str) -> None:
        self.raw = raw
        super().__init__(f"Improperly formatted rating '{raw}' for record {holder_id}", holder_id)
