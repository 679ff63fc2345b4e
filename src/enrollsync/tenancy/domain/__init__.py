# SPDX-License-Identifier: Apache-2.0
"""Tenancy domain model."""

from .entities import Tenant
from .events import TenantCreated
from .repositories import ITenantRepository
from .value_objects import ContactEmail, TenantId, TenantSlug, TenantStatus

__all__ = [
    "Tenant",
    "TenantCreated",
    "ITenantRepository",
    "ContactEmail",
    "TenantId",
    "TenantSlug",
    "TenantStatus",
]
