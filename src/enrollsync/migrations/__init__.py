# SPDX-License-Identifier: Apache-2.0
"""SQLite migration system for EnrollSync.

Provides automatic schema migration management with version tracking
and idempotent execution of SQL migration files.
"""

from __future__ import annotations

import logging
import sqlite3
import time
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "versions"


def apply_pending(db_path: Path) -> List[str]:
    """Apply any pending migrations to the database.

    Args:
        db_path: Path to SQLite database file

    Returns:
        Versions applied by this call, in order

    This function:
    1. Creates the schema_version table if it doesn't exist
    2. Scans migrations/versions/*.sql files in lexicographic order
    3. Executes scripts whose filename prefix is not yet in schema_version
    4. Uses one transaction per file with rollback on failure
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    _ensure_schema_version_table(db_path)
    applied_versions = set(_get_applied_versions(db_path))
    pending = [
        (version, migration_file)
        for version, migration_file in _discover_migrations()
        if version not in applied_versions
    ]

    if not pending:
        logger.debug(f"No pending migrations for {db_path}")
        return []

    logger.info(f"Applying {len(pending)} pending migrations to {db_path}...")

    for version, migration_file in pending:
        try:
            _apply_migration(db_path, version, migration_file)
            logger.info(f"Applied migration {version}: {migration_file.name}")
        except RuntimeError as e:
            logger.error(f"Failed to apply migration {version}: {e}")
            raise

    return [version for version, _ in pending]


def _discover_migrations() -> List[Tuple[str, Path]]:
    migration_files = sorted(MIGRATIONS_DIR.glob("*.sql"))
    return [(path.stem.split("_")[0], path) for path in migration_files]


def _ensure_schema_version_table(db_path: Path) -> None:
    """Create schema_version table if it doesn't exist."""
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_version (
                version TEXT PRIMARY KEY,
                applied_ts INTEGER NOT NULL
            )
        """
        )
        conn.commit()


def _get_applied_versions(db_path: Path) -> List[str]:
    """Get list of applied migration versions."""
    with sqlite3.connect(db_path) as conn:
        cursor = conn.execute("SELECT version FROM schema_version ORDER BY version")
        return [row[0] for row in cursor.fetchall()]


def _apply_migration(db_path: Path, version: str, migration_file: Path) -> None:
    """Apply a single migration file within a transaction."""
    migration_sql = migration_file.read_text(encoding="utf-8")

    with sqlite3.connect(db_path) as conn:
        try:
            conn.executescript(migration_sql)
            conn.execute(
                "INSERT OR IGNORE INTO schema_version (version, applied_ts) VALUES (?, ?)",
                (version, int(time.time())),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {version} failed: {e}") from e
