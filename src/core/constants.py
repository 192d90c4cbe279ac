"""Core constants used across registry modules.

This module centralizes file names, grammar tokens and runtime defaults.
Keeping values here avoids magic literals in decoding and ingest logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path(".")
PILOT_BASIC_FILE_NAME = "PILOT_BASIC.csv"
NONPILOT_BASIC_FILE_NAME = "NONPILOT_BASIC.csv"
PILOT_CERT_FILE_NAME = "PILOT_CERT.csv"
NONPILOT_CERT_FILE_NAME = "NONPILOT_CERT.csv"
CSV_DELIMITER = ","
DEFAULT_ENCODING = "latin-1"
DEFAULT_MAX_WORKERS = 4
DEFAULT_PROGRESS_BATCH_ROWS = 1000
PILOT_RATING_FIELD_COUNT = 11
RATING_SEPARATOR = "/"
TWO_DIGIT_YEAR_PIVOT = 50
SHORT_DATE_LENGTH = 6
LONG_DATE_LENGTH = 8
DEFAULT_LOG_LEVEL = "info"
