# SPDX-License-Identifier: Apache-2.0
"""In-memory event bus implementation.

This module provides the concrete ``IEventBus`` used by every bounded
context. Delivery happens inside the publisher's call stack: subscribers
run one after another, coroutine subscribers are awaited before the next
one starts, and nothing is queued, retried or persisted.
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Type

from enrollsync.domain.entities import AggregateRoot
from enrollsync.domain.events import DomainEvent, EventHandler, IEventBus

logger = logging.getLogger(__name__)


class InMemoryEventBus(IEventBus):
    """Typed registry of event type -> ordered subscriber list.

    Subscriptions are held per instance so tests can build isolated buses;
    the process-wide instance is owned by ``enrollsync.bootstrap``.
    """

    def __init__(self) -> None:
        self._subs: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Subscribe a handler to events of exactly ``event_type``.

        Args:
            event_type: The type of domain event to subscribe to
            handler: Sync or async callable invoked with each event
        """
        if not (isinstance(event_type, type) and issubclass(event_type, DomainEvent)):
            raise TypeError(f"Cannot subscribe to non-event type: {event_type!r}")
        self._subs[event_type].append(handler)

    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Remove a previously registered handler; unknown handlers are ignored."""
        handlers = self._subs.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._subs.get(event_type, []))

    def clear_subscriptions(self) -> None:
        """Clear all subscriptions (useful for testing)."""
        self._subs.clear()

    async def publish(self, event: DomainEvent) -> None:
        """Deliver one event to every subscriber of its exact type.

        Subscriber failures are not caught: the first exception stops
        delivery and propagates to the caller.

        Args:
            event: The domain event to publish

        Raises:
            TypeError: If ``event`` is not a ``DomainEvent``
        """
        if not isinstance(event, DomainEvent):
            raise TypeError(f"Cannot publish non-event object: {event!r}")

        handlers = list(self._subs.get(type(event), []))
        logger.debug(f"Dispatching {event.event_name} to {len(handlers)} subscriber(s)")

        for handler in handlers:
            result = handler(event)
            if inspect.isawaitable(result):
                await result

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events in input order. Already delivered events are not undone."""
        for event in events:
            await self.publish(event)

    async def publish_entity(self, aggregate: AggregateRoot) -> None:
        """Release the aggregate's pending events and publish them in recorded order."""
        await self.publish_all(aggregate.release_events())

    async def publish_entities(self, aggregates: Iterable[AggregateRoot]) -> None:
        for aggregate in aggregates:
            await self.publish_entity(aggregate)


__all__ = ["InMemoryEventBus"]
