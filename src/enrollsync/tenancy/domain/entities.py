# SPDX-License-Identifier: Apache-2.0
"""Tenant aggregate."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from enrollsync.domain.entities import AggregateRoot, utc_now
from enrollsync.domain.errors import InvalidStateTransitionError
from enrollsync.domain.value_objects import validate_text_length

from .events import TenantCreated
from .value_objects import ContactEmail, TenantId, TenantSlug, TenantStatus


class Tenant(AggregateRoot):
    """An isolated organization using the platform.

    Tenants start ``pending`` and move between statuses through
    ``activate``, ``suspend`` and ``deactivate``. Slug uniqueness is not
    the aggregate's concern; the repository and the create handler own it.
    """

    def __init__(
        self,
        tenant_id: TenantId,
        name: str,
        slug: TenantSlug,
        contact_email: ContactEmail,
        contact_phone: Optional[str],
        status: TenantStatus,
        created_at: datetime,
        updated_at: datetime,
        version: int = 0,
    ):
        super().__init__(version)
        self._validate_name(name)
        self._id = tenant_id
        self._name = name
        self._slug = slug
        self._contact_email = contact_email
        self._contact_phone = contact_phone
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        tenant_id: TenantId,
        name: str,
        slug: TenantSlug,
        contact_email: ContactEmail,
        contact_phone: Optional[str] = None,
        status: Optional[TenantStatus] = None,
    ) -> Tenant:
        """Register a new tenant and record ``TenantCreated``."""
        now = utc_now()
        tenant = cls(
            tenant_id=tenant_id,
            name=name,
            slug=slug,
            contact_email=contact_email,
            contact_phone=contact_phone,
            status=status or TenantStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        tenant._record_event(
            TenantCreated(
                tenant_id=str(tenant_id),
                name=name,
                slug=str(slug),
                occurred_at=now,
            )
        )
        return tenant

    @classmethod
    def reconstitute(
        cls,
        tenant_id: TenantId,
        name: str,
        slug: TenantSlug,
        contact_email: ContactEmail,
        contact_phone: Optional[str],
        status: TenantStatus,
        created_at: datetime,
        updated_at: datetime,
        version: int,
    ) -> Tenant:
        """Rebuild a tenant from storage without recording events."""
        return cls(
            tenant_id, name, slug, contact_email, contact_phone,
            status, created_at, updated_at, version,
        )

    @property
    def id(self) -> TenantId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> TenantSlug:
        return self._slug

    @property
    def contact_email(self) -> ContactEmail:
        return self._contact_email

    @property
    def contact_phone(self) -> Optional[str]:
        return self._contact_phone

    @property
    def status(self) -> TenantStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def activate(self) -> None:
        if self._status is TenantStatus.ACTIVE:
            raise InvalidStateTransitionError("Tenant is already active")
        self._set_status(TenantStatus.ACTIVE)

    def suspend(self) -> None:
        if self._status is TenantStatus.SUSPENDED:
            raise InvalidStateTransitionError("Tenant is already suspended")
        self._set_status(TenantStatus.SUSPENDED)

    def deactivate(self) -> None:
        """Set the tenant inactive from any status."""
        self._set_status(TenantStatus.INACTIVE)

    def update_info(
        self, name: str, contact_email: ContactEmail, contact_phone: Optional[str] = None
    ) -> None:
        self._validate_name(name)
        self._name = name
        self._contact_email = contact_email
        self._contact_phone = contact_phone
        self._touch()

    def is_active(self) -> bool:
        return self._status.is_active()

    def can_access_platform(self) -> bool:
        return self._status.can_access_platform()

    def _set_status(self, status: TenantStatus) -> None:
        self._status = status
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @staticmethod
    def _validate_name(name: str) -> None:
        validate_text_length(name, "Tenant name", 3, 255)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tenant):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Tenant(id={self._id}, slug={self._slug}, status={self._status.value})"
