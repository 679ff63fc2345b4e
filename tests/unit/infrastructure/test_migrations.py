# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the SQLite migration system."""

from __future__ import annotations

import sqlite3
from unittest.mock import patch

import pytest

from enrollsync.migrations import apply_pending


def _tables(db) -> set:
    with sqlite3.connect(db) as conn:
        cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        return {row[0] for row in cursor.fetchall()}


def test_migrations_apply_once(tmp_path):
    """Migrations are applied in order and a second run is a no-op."""
    db = tmp_path / "enrollsync.db"

    assert apply_pending(db) == ["0001", "0002", "0003"]
    assert apply_pending(db) == []

    with sqlite3.connect(db) as conn:
        cursor = conn.execute("SELECT version FROM schema_version ORDER BY version")
        assert [row[0] for row in cursor.fetchall()] == ["0001", "0002", "0003"]


def test_migrations_create_context_tables(tmp_path):
    db = tmp_path / "enrollsync.db"

    apply_pending(db)

    assert {"schema_version", "tenants", "students", "learning_courses",
            "admin_courses", "enrollments"} <= _tables(db)


def test_missing_parent_directory_is_created(tmp_path):
    db = tmp_path / "nested" / "dir" / "enrollsync.db"

    apply_pending(db)

    assert db.exists()


def test_tenant_slug_is_unique(tmp_path):
    db = tmp_path / "enrollsync.db"
    apply_pending(db)
    row = (None, "Acme", "acme", "a@acme.edu", None, "pending", 1, "t", "t")
    insert = "INSERT INTO tenants VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)"

    with sqlite3.connect(db) as conn:
        conn.execute(insert, ("t-1",) + row[1:])
        with pytest.raises(sqlite3.IntegrityError, match="UNIQUE"):
            conn.execute(insert, ("t-2",) + row[1:])


def test_enrollment_status_is_constrained(tmp_path):
    db = tmp_path / "enrollsync.db"
    apply_pending(db)

    with sqlite3.connect(db) as conn:
        conn.execute(
            "INSERT INTO admin_courses (id, title, created_at, updated_at) VALUES ('c', 'Algebra', 't', 't')"
        )
        with pytest.raises(sqlite3.IntegrityError, match="CHECK"):
            conn.execute(
                """
                INSERT INTO enrollments
                (course_id, student_id, student_name, student_email, status, enrolled_at, updated_at)
                VALUES ('c', 's', 'Ada', 'ada@example.com', 'paused', 't', 't')
            """
            )


def test_failed_migration_is_not_recorded(tmp_path):
    """A broken script raises and leaves its version unrecorded."""
    db = tmp_path / "enrollsync.db"
    apply_pending(db)
    broken = tmp_path / "0004_broken.sql"
    broken.write_text("CREATE TABLE broken (id TEXT PRIMARY KEY); THIS IS NOT SQL;")

    with patch(
        "enrollsync.migrations._discover_migrations",
        return_value=[("0004", broken)],
    ):
        with pytest.raises(RuntimeError, match="Migration 0004 failed"):
            apply_pending(db)

    with sqlite3.connect(db) as conn:
        cursor = conn.execute("SELECT version FROM schema_version WHERE version = '0004'")
        assert cursor.fetchone() is None
