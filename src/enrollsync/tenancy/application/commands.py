# SPDX-License-Identifier: Apache-2.0
"""Tenancy application commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from enrollsync.domain.errors import DomainValidationError

TENANT_STATUS_ACTIONS = ("activate", "suspend", "deactivate")


@dataclass(frozen=True)
class CreateTenantCommand:
    """Command to register a new tenant."""

    name: str
    slug: str
    contact_email: str
    contact_phone: Optional[str] = None


@dataclass(frozen=True)
class ChangeTenantStatusCommand:
    """Command to move a tenant through its lifecycle."""

    tenant_id: str
    action: str

    def __post_init__(self):
        if self.action not in TENANT_STATUS_ACTIONS:
            raise DomainValidationError(
                f"Unknown tenant action: {self.action}. Valid actions: {', '.join(TENANT_STATUS_ACTIONS)}"
            )


@dataclass(frozen=True)
class UpdateTenantInfoCommand:
    """Command to change a tenant's name and contact details."""

    tenant_id: str
    name: str
    contact_email: str
    contact_phone: Optional[str] = None
