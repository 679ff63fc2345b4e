# SPDX-License-Identifier: Apache-2.0
"""Tenancy application services.

Each handler orchestrates one use case: load, mutate through the
aggregate, save, then publish the aggregate's released events.
"""

from __future__ import annotations

import logging

from enrollsync.domain.errors import TenantNotFoundError, TenantSlugTakenError
from enrollsync.domain.events import IEventBus
from enrollsync.domain.repositories import DuplicateKeyError
from enrollsync.metrics import TENANT_STATUS_CHANGES

from ..domain.entities import Tenant
from ..domain.repositories import ITenantRepository
from ..domain.value_objects import ContactEmail, TenantId, TenantSlug
from .commands import ChangeTenantStatusCommand, CreateTenantCommand, UpdateTenantInfoCommand
from .dto import TenantDTO, TenantPage
from .queries import GetTenantQuery, ListTenantsQuery

logger = logging.getLogger(__name__)


class CreateTenantHandler:
    """Register a tenant under a globally unique slug."""

    def __init__(self, tenant_repository: ITenantRepository, event_bus: IEventBus):
        self._tenant_repository = tenant_repository
        self._event_bus = event_bus

    async def handle(self, command: CreateTenantCommand) -> TenantDTO:
        """Create the tenant and publish ``TenantCreated``.

        ``slug_exists`` rejects the common case early. Two concurrent
        requests can both pass it, so the unique constraint enforced by
        the repository is translated into the same error.

        Raises:
            DomainValidationError: If any field is invalid
            TenantSlugTakenError: If the slug is already in use
        """
        slug = TenantSlug(command.slug)
        contact_email = ContactEmail(command.contact_email)

        if await self._tenant_repository.slug_exists(slug):
            raise TenantSlugTakenError(str(slug))

        tenant = Tenant.create(
            tenant_id=TenantId.generate(),
            name=command.name,
            slug=slug,
            contact_email=contact_email,
            contact_phone=command.contact_phone,
        )

        try:
            await self._tenant_repository.save(tenant)
        except DuplicateKeyError as e:
            raise TenantSlugTakenError(str(slug)) from e

        await self._event_bus.publish_entity(tenant)

        logger.info(f"Tenant {tenant.id} created with slug '{slug}'")
        return TenantDTO.from_entity(tenant)


class ChangeTenantStatusHandler:
    """Apply activate, suspend or deactivate to an existing tenant."""

    def __init__(self, tenant_repository: ITenantRepository, event_bus: IEventBus):
        self._tenant_repository = tenant_repository
        self._event_bus = event_bus

    async def handle(self, command: ChangeTenantStatusCommand) -> TenantDTO:
        tenant = await _load_tenant(self._tenant_repository, command.tenant_id)

        getattr(tenant, command.action)()

        await self._tenant_repository.save(tenant)
        await self._event_bus.publish_entity(tenant)

        TENANT_STATUS_CHANGES.labels(action=command.action).inc()
        logger.info(f"Tenant {tenant.id} is now {tenant.status.value}")
        return TenantDTO.from_entity(tenant)


class UpdateTenantInfoHandler:
    def __init__(self, tenant_repository: ITenantRepository, event_bus: IEventBus):
        self._tenant_repository = tenant_repository
        self._event_bus = event_bus

    async def handle(self, command: UpdateTenantInfoCommand) -> TenantDTO:
        tenant = await _load_tenant(self._tenant_repository, command.tenant_id)

        tenant.update_info(
            name=command.name,
            contact_email=ContactEmail(command.contact_email),
            contact_phone=command.contact_phone,
        )

        await self._tenant_repository.save(tenant)
        await self._event_bus.publish_entity(tenant)
        return TenantDTO.from_entity(tenant)


class GetTenantHandler:
    def __init__(self, tenant_repository: ITenantRepository):
        self._tenant_repository = tenant_repository

    async def handle(self, query: GetTenantQuery) -> TenantDTO:
        tenant = await _load_tenant(self._tenant_repository, query.tenant_id)
        return TenantDTO.from_entity(tenant)


class ListTenantsHandler:
    def __init__(self, tenant_repository: ITenantRepository):
        self._tenant_repository = tenant_repository

    async def handle(self, query: ListTenantsQuery) -> TenantPage:
        tenants = await self._tenant_repository.find_all(query.limit, query.offset)
        total = await self._tenant_repository.count()
        return TenantPage(
            data=[TenantDTO.from_entity(tenant) for tenant in tenants],
            total=total,
            limit=query.limit,
            offset=query.offset,
        )


async def _load_tenant(repository: ITenantRepository, tenant_id: str) -> Tenant:
    tenant = await repository.find_by_id(TenantId(tenant_id))
    if tenant is None:
        raise TenantNotFoundError(tenant_id)
    return tenant
