# SPDX-License-Identifier: Apache-2.0
"""Tenancy application layer: commands, queries and their handlers."""

from .commands import ChangeTenantStatusCommand, CreateTenantCommand, UpdateTenantInfoCommand
from .dto import TenantDTO, TenantPage
from .queries import GetTenantQuery, ListTenantsQuery
from .services import (
    ChangeTenantStatusHandler,
    CreateTenantHandler,
    GetTenantHandler,
    ListTenantsHandler,
    UpdateTenantInfoHandler,
)

__all__ = [
    "CreateTenantCommand",
    "ChangeTenantStatusCommand",
    "UpdateTenantInfoCommand",
    "GetTenantQuery",
    "ListTenantsQuery",
    "TenantDTO",
    "TenantPage",
    "CreateTenantHandler",
    "ChangeTenantStatusHandler",
    "UpdateTenantInfoHandler",
    "GetTenantHandler",
    "ListTenantsHandler",
]
