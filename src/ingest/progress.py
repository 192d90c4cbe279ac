"""Thread-safe progress tracking across concurrent sources.

Each source registers the number of work units it expects (bytes for
registry files) and reports how many it has consumed. The tracker
aggregates all sources into one snapshot.
"""

from __future__ import annotations

import threading
from typing import Callable

from core.errors import AirmenIngestError
from core.types import ProgressSnapshot

ProgressCallback = Callable[[ProgressSnapshot], None]


class ProgressTracker:
    """Aggregate completed/total counters over named sources.

    Completed values are clamped to each source's total and never
    decrease. The optional callback receives a snapshot after every
    change, in the order the changes were applied.
    """

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self._lock = threading.RLock()
        self._totals: dict[str, int] = {}
        self._completed: dict[str, int] = {}
        self._callback = callback

    def register(self, source: str, total: int) -> None:
        """Register a source and the work units it expects.

        Registering a known source again replaces its total.
        """
        with self._lock:
            self._totals[source] = max(total, 0)
            current = self._completed.get(source, 0)
            self._completed[source] = min(current, self._totals[source])
            self._notify()

    def advance(self, source: str, amount: int) -> None:
        """Add ``amount`` consumed units to a registered source."""
        with self._lock:
            self._set_completed(source, self._completed_for(source) + amount)

    def advance_to(self, source: str, completed: int) -> None:
        """Raise a source's consumed units to an absolute position."""
        with self._lock:
            self._set_completed(source, completed)

    def finish(self, source: str) -> None:
        """Mark a source fully consumed; unknown sources are ignored."""
        with self._lock:
            if source not in self._totals:
                return
            self._set_completed(source, self._totals.get(source, 0))

    def is_registered(self, source: str) -> bool:
        """Return true if ``source`` has been registered."""
        with self._lock:
            return source in self._totals

    def snapshot(self) -> ProgressSnapshot:
        """Return the aggregate progress across all sources."""
        with self._lock:
            return ProgressSnapshot(
                completed=sum(self._completed.values()),
                total=sum(self._totals.values()),
            )

    @property
    def completed(self) -> int:
        """Return consumed units across all sources."""
        return self.snapshot().completed

    @property
    def total(self) -> int:
        """Return expected units across all sources."""
        return self.snapshot().total

    @property
    def fraction_done(self) -> float | None:
        """Return completed/total, or None while nothing is registered."""
        return self.snapshot().fraction_done

    @property
    def percent_done(self) -> float | None:
        """Return the fraction done as a percentage."""
        return self.snapshot().percent_done

    @property
    def is_finished(self) -> bool:
        """Return true once every registered unit is consumed."""
        return self.snapshot().is_finished

    def _completed_for(self, source: str) -> int:
        if source not in self._totals:
            raise AirmenIngestError(
                f"Progress source {source} is not registered. Call register() first."
            )
        return self._completed[source]

    def _set_completed(self, source: str, completed: int) -> None:
        current = self._completed_for(source)
        clamped = min(max(completed, current), self._totals[source])
        if clamped == current:
            return
        self._completed[source] = clamped
        self._notify()

    def _notify(self) -> None:
        # Called under the lock so callbacks observe changes in order.
        if self._callback is not None:
            self._callback(
                ProgressSnapshot(
                    completed=sum(self._completed.values()),
                    total=sum(self._totals.values()),
                )
            )
