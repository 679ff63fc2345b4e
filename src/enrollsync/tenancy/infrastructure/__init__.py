# SPDX-License-Identifier: Apache-2.0
"""Tenancy infrastructure: persistence and event listeners."""

from .listeners import TenantCreatedListener
from .repositories import SqliteTenantRepository

__all__ = ["SqliteTenantRepository", "TenantCreatedListener"]
