# SPDX-License-Identifier: Apache-2.0
"""Domain event contract for EnrollSync.

Domain events are immutable facts recorded by an aggregate when a mutation
succeeds. They are the only coupling surface between the tenancy, learning
and records contexts, so their wire shape (``to_dict``) is kept stable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterable, Protocol, Union

if TYPE_CHECKING:
    from .entities import AggregateRoot

# Wire format for timestamps embedded in event payloads
EVENT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

EventHandler = Callable[["DomainEvent"], Union[None, Awaitable[None]]]


def format_event_timestamp(value: datetime) -> str:
    """Render a timestamp the way event payloads carry it, in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(EVENT_TIMESTAMP_FORMAT)


class IEventBus(Protocol):
    """Protocol for event bus implementations.

    Delivery is synchronous with respect to the publisher: ``publish``
    returns only after every subscriber has finished, and a subscriber
    failure propagates to the publisher unchanged.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Subscribe a handler to events of exactly ``event_type``.

        Args:
            event_type: The type of domain event to subscribe to
            handler: Sync or async callable invoked with each event
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers of its exact type.

        Args:
            event: The domain event to publish
        """
        ...

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one by one in input order."""
        ...

    async def publish_entity(self, aggregate: AggregateRoot) -> None:
        """Release and publish the pending events of one aggregate."""
        ...

    async def publish_entities(self, aggregates: Iterable[AggregateRoot]) -> None:
        """Release and publish the pending events of several aggregates."""
        ...


class DomainEvent(ABC):
    """Base class for all domain events.

    Concrete events are frozen dataclasses that declare ``event_id`` and
    ``occurred_at`` fields alongside their payload.
    """

    @property
    @abstractmethod
    def event_name(self) -> str:
        """Stable, dotted name identifying the event kind on the wire."""
        pass

    @property
    @abstractmethod
    def aggregate_id(self) -> str:
        """Identifier of the aggregate that generated this event."""
        pass

    @abstractmethod
    def _get_event_data(self) -> dict[str, Any]:
        """Get event-specific data for serialization.

        Returns:
            Dictionary of event payload fields
        """
        pass

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event payload using its wire field names."""
        return self._get_event_data()

    def __str__(self) -> str:
        return f"{self.event_name}(id={self.event_id}, aggregate={self.aggregate_id})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(event_id={self.event_id}, "
            f"occurred_at={self.occurred_at.isoformat()}, "
            f"aggregate_id={self.aggregate_id})"
        )
