# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the in-memory event bus."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

import pytest

from enrollsync.domain.entities import AggregateRoot
from enrollsync.domain.events import DomainEvent
from enrollsync.infrastructure.messaging import InMemoryEventBus
from enrollsync.tenancy.domain.events import TenantCreated


@dataclass(frozen=True)
class ThingHappened(DomainEvent):
    label: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: UUID = field(default_factory=uuid4)

    @property
    def event_name(self) -> str:
        return "test.thing_happened"

    @property
    def aggregate_id(self) -> str:
        return self.label

    def _get_event_data(self) -> dict[str, Any]:
        return {"label": self.label}


@dataclass(frozen=True)
class SpecialThingHappened(ThingHappened):
    pass


class _Recorder(AggregateRoot):
    def happen(self, label: str) -> None:
        self._record_event(ThingHappened(label))


def tenant_created() -> TenantCreated:
    return TenantCreated(tenant_id="t-1", name="Acme University", slug="acme")


class TestSubscription:
    def test_subscribe_requires_event_type(self, event_bus):
        with pytest.raises(TypeError):
            event_bus.subscribe(dict, lambda event: None)

    def test_subscriber_count_and_unsubscribe(self, event_bus):
        def handler(event):
            pass

        event_bus.subscribe(ThingHappened, handler)
        assert event_bus.subscriber_count(ThingHappened) == 1

        event_bus.unsubscribe(ThingHappened, handler)
        event_bus.unsubscribe(ThingHappened, handler)
        assert event_bus.subscriber_count(ThingHappened) == 0

    def test_buses_do_not_share_subscriptions(self):
        first, second = InMemoryEventBus(), InMemoryEventBus()
        first.subscribe(ThingHappened, lambda event: None)

        assert second.subscriber_count(ThingHappened) == 0


class TestPublish:
    @pytest.mark.asyncio
    async def test_handlers_run_in_subscription_order(self, event_bus):
        calls = []
        event_bus.subscribe(ThingHappened, lambda event: calls.append(("first", event.label)))
        event_bus.subscribe(ThingHappened, lambda event: calls.append(("second", event.label)))

        await event_bus.publish(ThingHappened("a"))

        assert calls == [("first", "a"), ("second", "a")]

    @pytest.mark.asyncio
    async def test_async_handler_completes_before_next_handler(self, event_bus):
        calls = []

        async def slow(event):
            calls.append("async-start")
            calls.append("async-end")

        event_bus.subscribe(ThingHappened, slow)
        event_bus.subscribe(ThingHappened, lambda event: calls.append("sync"))

        await event_bus.publish(ThingHappened("a"))

        assert calls == ["async-start", "async-end", "sync"]

    @pytest.mark.asyncio
    async def test_dispatch_uses_exact_type(self, event_bus):
        calls = []
        event_bus.subscribe(ThingHappened, lambda event: calls.append("base"))

        await event_bus.publish(SpecialThingHappened("a"))

        assert calls == []

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_a_no_op(self, event_bus):
        await event_bus.publish(tenant_created())

    @pytest.mark.asyncio
    async def test_republishing_released_events_leaves_no_state(self):
        aggregate = _Recorder()
        aggregate.happen("a")
        aggregate.happen("b")
        released = aggregate.release_events()

        bus = InMemoryEventBus()
        await bus.publish_all(released)
        await bus.publish_all(released)

        assert bus.subscriber_count(ThingHappened) == 0
        assert [event.label for event in released] == ["a", "b"]
        assert not aggregate.has_pending_events()

    @pytest.mark.asyncio
    async def test_publish_rejects_non_events(self, event_bus):
        with pytest.raises(TypeError, match="non-event"):
            await event_bus.publish({"event_name": "tenant.created"})

    @pytest.mark.asyncio
    async def test_subscriber_failure_stops_delivery_and_propagates(self, event_bus):
        calls = []

        def boom(event):
            raise RuntimeError("subscriber exploded")

        event_bus.subscribe(ThingHappened, lambda event: calls.append("before"))
        event_bus.subscribe(ThingHappened, boom)
        event_bus.subscribe(ThingHappened, lambda event: calls.append("after"))

        with pytest.raises(RuntimeError, match="subscriber exploded"):
            await event_bus.publish(ThingHappened("a"))

        assert calls == ["before"]

    @pytest.mark.asyncio
    async def test_async_subscriber_failure_propagates_unchanged(self, event_bus):
        class CustomError(Exception):
            pass

        async def boom(event):
            raise CustomError("nope")

        event_bus.subscribe(ThingHappened, boom)

        with pytest.raises(CustomError):
            await event_bus.publish(ThingHappened("a"))

    @pytest.mark.asyncio
    async def test_handler_subscribed_during_dispatch_sees_next_event_only(self, event_bus):
        calls = []

        def late(event):
            calls.append(("late", event.label))

        def subscribing(event):
            calls.append(("subscribing", event.label))
            if event.label == "a":
                event_bus.subscribe(ThingHappened, late)

        event_bus.subscribe(ThingHappened, subscribing)

        await event_bus.publish(ThingHappened("a"))
        await event_bus.publish(ThingHappened("b"))

        assert calls == [("subscribing", "a"), ("subscribing", "b"), ("late", "b")]


class TestPublishAggregates:
    @pytest.mark.asyncio
    async def test_publish_all_keeps_input_order(self, event_bus):
        seen = []
        event_bus.subscribe(ThingHappened, lambda event: seen.append(event.label))

        await event_bus.publish_all([ThingHappened("a"), ThingHappened("b"), ThingHappened("c")])

        assert seen == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_publish_entity_releases_events_once(self, event_bus):
        seen = []
        event_bus.subscribe(ThingHappened, lambda event: seen.append(event.label))
        aggregate = _Recorder()
        aggregate.happen("a")
        aggregate.happen("b")

        await event_bus.publish_entity(aggregate)
        await event_bus.publish_entity(aggregate)

        assert seen == ["a", "b"]
        assert not aggregate.has_pending_events()

    @pytest.mark.asyncio
    async def test_publish_entities_preserves_aggregate_order(self, event_bus):
        seen = []
        event_bus.subscribe(ThingHappened, lambda event: seen.append(event.label))
        first, second = _Recorder(), _Recorder()
        first.happen("first")
        second.happen("second")

        await event_bus.publish_entities([first, second])

        assert seen == ["first", "second"]

    @pytest.mark.asyncio
    async def test_events_released_even_if_delivery_fails(self, event_bus):
        def boom(event):
            raise RuntimeError("down")

        event_bus.subscribe(ThingHappened, boom)
        aggregate = _Recorder()
        aggregate.happen("a")

        with pytest.raises(RuntimeError):
            await event_bus.publish_entity(aggregate)

        assert aggregate.release_events() == []
