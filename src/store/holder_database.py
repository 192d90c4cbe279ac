"""Concurrency-safe accumulator of partial holders.

Each registry file contributes partial holders under its own source
name. ``merge`` folds every partial sharing an identifier into one
holder, visiting sources in priority order and rows in append order so
the result does not depend on which file finished first.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Iterable, Mapping, TypeVar

from core.holder_types import Holder
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

ValueT = TypeVar("ValueT")


class HolderDatabase:
    """Lock-guarded store of partial holders awaiting merge."""

    def __init__(self, source_order: Iterable[str] = ()) -> None:
        """Create an empty database.

        Args:
            source_order: Source names from lowest to highest precedence.
                Sources not listed rank after these, in first-append order.
        """
        self._lock = threading.Lock()
        self._source_rank = {
            source: rank for rank, source in enumerate(dict.fromkeys(source_order))
        }
        self._partials: dict[str, list[Holder]] = {}

    def append(self, holders: Holder | Iterable[Holder], source: str = "") -> None:
        """Add one holder or a batch of holders from ``source``."""
        batch = [holders] if isinstance(holders, Holder) else list(holders)
        if not batch:
            return
        with self._lock:
            self._partials.setdefault(source, []).extend(batch)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(partials) for partials in self._partials.values())

    def merge(self) -> Mapping[str, Holder]:
        """Fold all partials into one holder per identifier.

        Returns:
            Read-only mapping from identifier to merged holder.
        """
        merged: dict[str, Holder] = {}
        for holder in self._ordered_partials():
            existing = merged.get(holder.holder_id)
            merged[holder.holder_id] = holder if existing is None else merge_holders(existing, holder)
        _LOGGER.info("holders_merged", partial_count=len(self), holder_count=len(merged))
        return MappingProxyType(merged)

    def _ordered_partials(self) -> list[Holder]:
        with self._lock:
            sources = list(self._partials)
            fallback_rank = len(self._source_rank)
            ordered_sources = sorted(
                sources,
                key=lambda source: (
                    self._source_rank.get(source, fallback_rank),
                    sources.index(source),
                ),
            )
            return [holder for source in ordered_sources for holder in self._partials[source]]


def merge_holders(earlier: Holder, later: Holder) -> Holder:
    """Combine two partials sharing an identifier.

    Scalar fields take the later value when it is present. Certificates
    from both sides are kept once each, earlier ones first.

    Args:
        earlier: Partial contributed first.
        later: Partial contributed second.

    Returns:
        A new merged holder.
    """
    return Holder(
        holder_id=earlier.holder_id,
        first_name=_later_present(earlier.first_name, later.first_name),
        last_name=_later_present(earlier.last_name, later.last_name),
        address=_later_present(earlier.address, later.address),
        medical=_later_present(earlier.medical, later.medical),
        certificates=tuple(dict.fromkeys(earlier.certificates + later.certificates)),
    )


def _later_present(earlier: ValueT | None, later: ValueT | None) -> ValueT | None:
    return earlier if later is None else later
