# SPDX-License-Identifier: Apache-2.0
"""Domain events raised by the tenancy context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from enrollsync.domain.events import DomainEvent, format_event_timestamp


@dataclass(frozen=True)
class TenantCreated(DomainEvent):
    """Event raised when a new tenant is registered."""

    tenant_id: str
    name: str
    slug: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: UUID = field(default_factory=uuid4)

    @property
    def event_name(self) -> str:
        return "tenant.created"

    @property
    def aggregate_id(self) -> str:
        return self.tenant_id

    def _get_event_data(self) -> dict[str, Any]:
        return {
            "tenant_id": self.tenant_id,
            "name": self.name,
            "slug": self.slug,
            "occurred_at": format_event_timestamp(self.occurred_at),
        }
