"""Error sinks for non-fatal parse failures."""

from __future__ import annotations

import threading
from typing import Callable, TypeVar

from core.errors import AirmenError

ErrorSink = Callable[[AirmenError], None]
ErrorT = TypeVar("ErrorT", bound=AirmenError)


class ErrorCollector:
    """Thread-safe error sink that keeps every reported error.

    Pass an instance as ``error_sink`` and inspect it after the run to
    decide whether partial results are acceptable.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._errors: list[AirmenError] = []

    def __call__(self, error: AirmenError) -> None:
        with self._lock:
            self._errors.append(error)

    @property
    def errors(self) -> list[AirmenError]:
        """Return a snapshot of reported errors in arrival order."""
        with self._lock:
            return list(self._errors)

    @property
    def count(self) -> int:
        """Return the number of reported errors."""
        with self._lock:
            return len(self._errors)

    def of_type(self, error_type: type[ErrorT]) -> list[ErrorT]:
        """Return reported errors that are instances of ``error_type``."""
        return [error for error in self.errors if isinstance(error, error_type)]
