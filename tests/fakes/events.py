# SPDX-License-Identifier: Apache-2.0
"""Fake event bus implementation for testing."""

from __future__ import annotations

from typing import Iterable, List, Type

from enrollsync.domain.entities import AggregateRoot
from enrollsync.domain.events import DomainEvent, EventHandler, IEventBus


class FakeEventBus(IEventBus):
    """Event bus that only captures published events.

    Subscriptions are accepted and ignored, so handlers under test run
    without any listener reacting to their events.
    """

    def __init__(self):
        self._published_events: List[DomainEvent] = []

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        pass

    async def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)

    async def publish_entity(self, aggregate: AggregateRoot) -> None:
        await self.publish_all(aggregate.release_events())

    async def publish_entities(self, aggregates: Iterable[AggregateRoot]) -> None:
        for aggregate in aggregates:
            await self.publish_entity(aggregate)

    # Test helpers
    def get_published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def get_events_of_type(self, event_type: Type[DomainEvent]) -> List[DomainEvent]:
        return [event for event in self._published_events if isinstance(event, event_type)]

    def get_event_count(self) -> int:
        return len(self._published_events)

    def clear_events(self) -> None:
        self._published_events.clear()

    def assert_event_published(self, event_type: Type[DomainEvent]) -> None:
        if not self.get_events_of_type(event_type):
            published = [event.event_name for event in self._published_events]
            raise AssertionError(
                f"Expected event of type {event_type.__name__} to be published. "
                f"Published events: {published}"
            )

    def assert_no_events_published(self) -> None:
        if self._published_events:
            published = [event.event_name for event in self._published_events]
            raise AssertionError(f"Expected no events, but got: {published}")
