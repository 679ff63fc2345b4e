# SPDX-License-Identifier: Apache-2.0
"""Tenancy application queries."""

from __future__ import annotations

from dataclasses import dataclass

from enrollsync.domain.errors import DomainValidationError


@dataclass(frozen=True)
class GetTenantQuery:
    """Query for a single tenant by ID."""

    tenant_id: str


@dataclass(frozen=True)
class ListTenantsQuery:
    """Query for a page of tenants, newest first."""

    limit: int = 20
    offset: int = 0

    def __post_init__(self):
        if self.limit < 1:
            raise DomainValidationError("limit must be at least 1")
        if self.offset < 0:
            raise DomainValidationError("offset cannot be negative")
