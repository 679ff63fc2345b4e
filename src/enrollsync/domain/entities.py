# SPDX-License-Identifier: Apache-2.0
"""Aggregate root base class.

Aggregates record domain events while they mutate and hand them over
exactly once through ``release_events``. The ``version`` counter is the
optimistic-concurrency token repositories compare on save.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from .events import DomainEvent


def utc_now() -> datetime:
    """Current time as an aware UTC datetime without microseconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


class AggregateRoot:
    """Base class for aggregate roots that record domain events."""

    def __init__(self, version: int = 0):
        self._events: List[DomainEvent] = []
        self._version = version

    @property
    def version(self) -> int:
        """Persisted version; 0 means the aggregate has never been saved."""
        return self._version

    @property
    def is_new(self) -> bool:
        return self._version == 0

    def mark_persisted(self, version: int) -> None:
        """Record the version assigned by the repository after a save."""
        if version < self._version:
            raise ValueError(
                f"Persisted version {version} is older than current version {self._version}"
            )
        self._version = version

    @property
    def pending_events(self) -> List[DomainEvent]:
        """Copy of the events recorded since the last release."""
        return list(self._events)

    def has_pending_events(self) -> bool:
        return bool(self._events)

    def release_events(self) -> List[DomainEvent]:
        """Return the recorded events in order and clear the queue."""
        released, self._events = self._events, []
        return released

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)
