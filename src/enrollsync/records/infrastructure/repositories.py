# SPDX-License-Identifier: Apache-2.0
"""SQLite repository for administrative courses and enrollments."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

import aiosqlite

from enrollsync.domain.repositories import ConcurrencyError
from enrollsync.infrastructure.sqlite_async_mixin import SqliteAsyncMixin

from ..domain.entities import Course, Enrollment
from ..domain.repositories import IAdminCourseRepository
from ..domain.value_objects import CourseId, EnrollmentStatus, StudentId


def _to_db(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _from_db(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


class SqliteAdminCourseRepository(SqliteAsyncMixin, IAdminCourseRepository):
    """SQLite-backed administrative courses.

    A course and its enrollments are written in one transaction. The
    course row carries the optimistic-concurrency version for the whole
    aggregate.
    """

    def __init__(self, db_path: Union[str, Path] = "data/db/enrollsync.db"):
        self._init_storage(db_path)

    async def save(self, course: Course) -> None:
        next_version = course.version + 1

        with self._track("admin_course_save"), self._translate_errors(f"save course {course.id}"):
            async with self._conn() as db:
                if course.is_new:
                    await db.execute(
                        """
                        INSERT INTO admin_courses
                        (id, title, description, max_capacity, instructor_id,
                         version, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                        (
                            str(course.id),
                            course.title,
                            course.description,
                            course.max_capacity,
                            course.instructor_id,
                            next_version,
                            course.created_at.isoformat(),
                            course.updated_at.isoformat(),
                        ),
                    )
                else:
                    cursor = await db.execute(
                        """
                        UPDATE admin_courses
                        SET title = ?, description = ?, max_capacity = ?, instructor_id = ?,
                            version = ?, updated_at = ?
                        WHERE id = ? AND version = ?
                    """,
                        (
                            course.title,
                            course.description,
                            course.max_capacity,
                            course.instructor_id,
                            next_version,
                            course.updated_at.isoformat(),
                            str(course.id),
                            course.version,
                        ),
                    )
                    if cursor.rowcount == 0:
                        raise ConcurrencyError(
                            f"Course {course.id} was modified concurrently "
                            f"(expected version {course.version})"
                        )

                await db.executemany(
                    """
                    INSERT INTO enrollments
                    (course_id, student_id, student_name, student_email, status,
                     enrolled_at, completed_at, dropped_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT (course_id, student_id) DO UPDATE SET
                        student_name = excluded.student_name,
                        student_email = excluded.student_email,
                        status = excluded.status,
                        completed_at = excluded.completed_at,
                        dropped_at = excluded.dropped_at,
                        updated_at = excluded.updated_at
                """,
                    [
                        (
                            str(course.id),
                            str(e.student_id),
                            e.student_name,
                            e.student_email,
                            e.status.value,
                            e.enrolled_at.isoformat(),
                            _to_db(e.completed_at),
                            _to_db(e.dropped_at),
                            e.updated_at.isoformat(),
                        )
                        for e in course.enrollments
                    ],
                )
                await db.commit()

        course.mark_persisted(next_version)

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        with self._track("admin_course_find_by_id"), self._translate_errors(f"load course {course_id}"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM admin_courses WHERE id = ?", (str(course_id),)
                )
                row = await cursor.fetchone()
                if row is None:
                    return None
                return await self._load_course(db, row)

    async def exists(self, course_id: CourseId) -> bool:
        with self._track("admin_course_exists"), self._translate_errors(f"check course {course_id}"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT 1 FROM admin_courses WHERE id = ?", (str(course_id),)
                )
                row = await cursor.fetchone()
        return row is not None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Course]:
        with self._track("admin_course_find_all"), self._translate_errors("list courses"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM admin_courses ORDER BY created_at, rowid LIMIT ? OFFSET ?",
                    (limit, offset),
                )
                rows = await cursor.fetchall()
                return [await self._load_course(db, row) for row in rows]

    async def delete(self, course_id: CourseId) -> bool:
        """Delete enrollments first, then the course, in one transaction."""
        with self._track("admin_course_delete"), self._translate_errors(f"delete course {course_id}"):
            async with self._conn() as db:
                await db.execute("DELETE FROM enrollments WHERE course_id = ?", (str(course_id),))
                cursor = await db.execute(
                    "DELETE FROM admin_courses WHERE id = ?", (str(course_id),)
                )
                await db.commit()
                return cursor.rowcount > 0

    async def _load_course(self, db: aiosqlite.Connection, row: aiosqlite.Row) -> Course:
        course_id = CourseId(row["id"])
        cursor = await db.execute(
            "SELECT * FROM enrollments WHERE course_id = ? ORDER BY enrolled_at, rowid",
            (str(course_id),),
        )
        enrollment_rows = await cursor.fetchall()

        return Course.reconstitute(
            course_id=course_id,
            title=row["title"],
            description=row["description"],
            max_capacity=row["max_capacity"],
            instructor_id=row["instructor_id"],
            enrollments=[self._row_to_enrollment(course_id, r) for r in enrollment_rows],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            version=row["version"],
        )

    @staticmethod
    def _row_to_enrollment(course_id: CourseId, row: aiosqlite.Row) -> Enrollment:
        return Enrollment.reconstitute(
            student_id=StudentId(row["student_id"]),
            course_id=course_id,
            student_name=row["student_name"],
            student_email=row["student_email"],
            status=EnrollmentStatus.from_string(row["status"]),
            enrolled_at=datetime.fromisoformat(row["enrolled_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            completed_at=_from_db(row["completed_at"]),
            dropped_at=_from_db(row["dropped_at"]),
        )
