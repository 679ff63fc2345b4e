# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects returned by tenancy handlers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from enrollsync.domain.events import format_event_timestamp

from ..domain.entities import Tenant


@dataclass(frozen=True)
class TenantDTO:
    """Flat, serializable view of a tenant."""

    id: str
    name: str
    slug: str
    contact_email: str
    contact_phone: Optional[str]
    status: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, tenant: Tenant) -> TenantDTO:
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            slug=str(tenant.slug),
            contact_email=str(tenant.contact_email),
            contact_phone=tenant.contact_phone,
            status=tenant.status.value,
            created_at=format_event_timestamp(tenant.created_at),
            updated_at=format_event_timestamp(tenant.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TenantPage:
    """One page of tenants plus the paging window that produced it."""

    data: List[TenantDTO] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [dto.to_dict() for dto in self.data],
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
        }
