"""Structured logging configuration.

This module initializes a structlog logger with a stable structured format.
The minimum level comes from ``AIRMEN_LOG_LEVEL`` so per-row debug events
stay silent unless requested.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL
from core.errors import AirmenConfigError


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with JSON output.

    Raises:
        AirmenConfigError: If ``AIRMEN_LOG_LEVEL`` names no known level.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(os.getenv("AIRMEN_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        ),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def resolve_log_level(raw_level: str) -> int:
    """Map a level name such as ``debug`` to its numeric value.

    Args:
        raw_level: Case-insensitive level name.

    Returns:
        Numeric stdlib logging level.

    Raises:
        AirmenConfigError: If the name is not a standard level.
    """
    level = logging.getLevelName(raw_level.strip().upper())
    if not isinstance(level, int):
        raise AirmenConfigError(
            f"Invalid AIRMEN_LOG_LEVEL value: got '{raw_level}'. "
            "Use one of debug, info, warning or error."
        )
    return level
