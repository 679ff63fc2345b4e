# SPDX-License-Identifier: Apache-2.0
"""Async SQLite mixin shared by all repository implementations.

Provides connection management, error translation and query metrics so
each repository only contains its SQL and row mapping.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
import weakref
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Union

import aiosqlite

from enrollsync.domain.repositories import DuplicateKeyError, RepositoryError
from enrollsync.metrics import REPO_LATENCY, REPO_QUERIES

# Per-event-loop locks to avoid "bound to different event loop" errors
_EVENT_LOOP_LOCKS: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock] = (
    weakref.WeakKeyDictionary()
)

BACKEND = "sqlite"


def _get_event_loop_lock() -> asyncio.Lock:
    """Get or create the connection lock for the running event loop."""
    loop = asyncio.get_running_loop()
    if loop not in _EVENT_LOOP_LOCKS:
        _EVENT_LOOP_LOCKS[loop] = asyncio.Lock()
    return _EVENT_LOOP_LOCKS[loop]


class SqliteAsyncMixin:
    """Mixin providing async SQLite connection management.

    Usage:
        class SqliteThingRepository(SqliteAsyncMixin, IThingRepository):
            def __init__(self, db_path):
                self._init_storage(db_path)

            async def find_by_id(self, thing_id):
                with self._track("thing_find_by_id"), self._translate_errors(f"load {thing_id}"):
                    async with self._conn() as db:
                        cursor = await db.execute("SELECT * FROM things WHERE id = ?", (thing_id,))
                        return await cursor.fetchone()

    Connections are never nested: a repository call opens, uses and
    closes its connection before returning, so handlers can call other
    handlers (through the event bus) between repository calls.
    """

    db_path: str

    def _init_storage(self, db_path: Union[str, Path]) -> None:
        """Remember the database path and bring its schema up to date."""
        from enrollsync.migrations import apply_pending

        self.db_path = str(db_path)
        apply_pending(Path(db_path))

    @contextlib.asynccontextmanager
    async def _conn(self) -> AsyncIterator[aiosqlite.Connection]:
        """Async context manager for SQLite connections.

        Provides a configured aiosqlite connection with:
        - WAL mode for better concurrent access
        - foreign key enforcement
        - rows returned as ``aiosqlite.Row``

        Yields:
            aiosqlite.Connection: Configured database connection
        """
        db_lock = _get_event_loop_lock()

        async with db_lock:
            async with aiosqlite.connect(self.db_path, timeout=30) as db:
                await db.execute("PRAGMA journal_mode=WAL;")
                await db.execute("PRAGMA synchronous=NORMAL;")
                await db.execute("PRAGMA foreign_keys=ON;")
                db.row_factory = aiosqlite.Row
                yield db

    @contextlib.contextmanager
    def _track(self, operation: str) -> Iterator[None]:
        """Count and time one repository operation."""
        REPO_QUERIES.labels(operation, BACKEND).inc()
        started = time.perf_counter()
        try:
            yield
        finally:
            REPO_LATENCY.labels(operation, BACKEND).observe(time.perf_counter() - started)

    @contextlib.contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        """Map driver errors onto repository errors.

        Unique-constraint violations become ``DuplicateKeyError``; every
        other driver error becomes ``RepositoryError``.
        """
        try:
            yield
        except aiosqlite.IntegrityError as e:
            if "UNIQUE constraint failed" in str(e):
                raise DuplicateKeyError(f"Failed to {action}: {e}") from e
            raise RepositoryError(f"Failed to {action}: {e}") from e
        except aiosqlite.Error as e:
            raise RepositoryError(f"Failed to {action}: {e}") from e
