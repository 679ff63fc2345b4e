# SPDX-License-Identifier: Apache-2.0
"""Repository interface for tenants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Tenant
from .value_objects import TenantId, TenantSlug


class ITenantRepository(ABC):
    """Persistence contract for the Tenant aggregate."""

    @abstractmethod
    async def save(self, tenant: Tenant) -> None:
        """Insert a new tenant or update an existing one.

        Args:
            tenant: Tenant aggregate to persist

        Raises:
            DuplicateKeyError: If the slug is already stored for another tenant
            ConcurrencyError: If the stored version no longer matches
            RepositoryError: If the save operation fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: TenantSlug) -> Optional[Tenant]:
        pass

    @abstractmethod
    async def slug_exists(self, slug: TenantSlug) -> bool:
        """Fast-path uniqueness check; the storage constraint remains authoritative."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Tenant]:
        """List tenants, newest first.

        Args:
            limit: Maximum number of tenants to return
            offset: Number of tenants to skip
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def delete(self, tenant_id: TenantId) -> bool:
        """Delete a tenant.

        Returns:
            True if a tenant was deleted, False if it did not exist
        """
        pass
