# SPDX-License-Identifier: Apache-2.0
"""SQLite implementation of the tenant repository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

import aiosqlite

from enrollsync.domain.repositories import ConcurrencyError
from enrollsync.infrastructure.sqlite_async_mixin import SqliteAsyncMixin

from ..domain.entities import Tenant
from ..domain.repositories import ITenantRepository
from ..domain.value_objects import ContactEmail, TenantId, TenantSlug, TenantStatus


class SqliteTenantRepository(SqliteAsyncMixin, ITenantRepository):
    """SQLite-backed tenant storage.

    The ``UNIQUE`` constraint on ``tenants.slug`` is the authoritative
    uniqueness guard; a violating insert surfaces as ``DuplicateKeyError``.
    """

    def __init__(self, db_path: Union[str, Path] = "data/db/enrollsync.db"):
        self._init_storage(db_path)

    async def save(self, tenant: Tenant) -> None:
        next_version = tenant.version + 1

        with self._track("tenant_save"), self._translate_errors(f"save tenant {tenant.id}"):
            async with self._conn() as db:
                if tenant.is_new:
                    await db.execute(
                        """
                        INSERT INTO tenants
                        (id, name, slug, contact_email, contact_phone, status,
                         version, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                        (
                            str(tenant.id),
                            tenant.name,
                            str(tenant.slug),
                            str(tenant.contact_email),
                            tenant.contact_phone,
                            tenant.status.value,
                            next_version,
                            tenant.created_at.isoformat(),
                            tenant.updated_at.isoformat(),
                        ),
                    )
                else:
                    cursor = await db.execute(
                        """
                        UPDATE tenants
                        SET name = ?, slug = ?, contact_email = ?, contact_phone = ?,
                            status = ?, version = ?, updated_at = ?
                        WHERE id = ? AND version = ?
                    """,
                        (
                            tenant.name,
                            str(tenant.slug),
                            str(tenant.contact_email),
                            tenant.contact_phone,
                            tenant.status.value,
                            next_version,
                            tenant.updated_at.isoformat(),
                            str(tenant.id),
                            tenant.version,
                        ),
                    )
                    if cursor.rowcount == 0:
                        raise ConcurrencyError(
                            f"Tenant {tenant.id} was modified concurrently "
                            f"(expected version {tenant.version})"
                        )
                await db.commit()

        tenant.mark_persisted(next_version)

    async def find_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        with self._track("tenant_find_by_id"), self._translate_errors(f"load tenant {tenant_id}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT * FROM tenants WHERE id = ?", (str(tenant_id),))
                row = await cursor.fetchone()
        return self._row_to_tenant(row) if row else None

    async def find_by_slug(self, slug: TenantSlug) -> Optional[Tenant]:
        with self._track("tenant_find_by_slug"), self._translate_errors(f"load tenant by slug {slug}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT * FROM tenants WHERE slug = ?", (str(slug),))
                row = await cursor.fetchone()
        return self._row_to_tenant(row) if row else None

    async def slug_exists(self, slug: TenantSlug) -> bool:
        with self._track("tenant_slug_exists"), self._translate_errors(f"check slug {slug}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT 1 FROM tenants WHERE slug = ?", (str(slug),))
                row = await cursor.fetchone()
        return row is not None

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Tenant]:
        with self._track("tenant_find_all"), self._translate_errors("list tenants"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM tenants ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?",
                    (limit, offset),
                )
                rows = await cursor.fetchall()
        return [self._row_to_tenant(row) for row in rows]

    async def count(self) -> int:
        with self._track("tenant_count"), self._translate_errors("count tenants"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT COUNT(*) FROM tenants")
                row = await cursor.fetchone()
        return int(row[0])

    async def delete(self, tenant_id: TenantId) -> bool:
        with self._track("tenant_delete"), self._translate_errors(f"delete tenant {tenant_id}"):
            async with self._conn() as db:
                cursor = await db.execute("DELETE FROM tenants WHERE id = ?", (str(tenant_id),))
                await db.commit()
                return cursor.rowcount > 0

    @staticmethod
    def _row_to_tenant(row: aiosqlite.Row) -> Tenant:
        return Tenant.reconstitute(
            tenant_id=TenantId(row["id"]),
            name=row["name"],
            slug=TenantSlug(row["slug"]),
            contact_email=ContactEmail(row["contact_email"]),
            contact_phone=row["contact_phone"],
            status=TenantStatus.from_string(row["status"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            version=row["version"],
        )
