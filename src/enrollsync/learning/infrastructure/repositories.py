# SPDX-License-Identifier: Apache-2.0
"""SQLite repositories for the learning-access context."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

import aiosqlite

from enrollsync.domain.repositories import ConcurrencyError
from enrollsync.infrastructure.sqlite_async_mixin import SqliteAsyncMixin

from ..domain.entities import Course, Student
from ..domain.repositories import ILearningCourseRepository, IStudentRepository
from ..domain.value_objects import CourseId, LearnerAccess, StudentId


class SqliteStudentRepository(SqliteAsyncMixin, IStudentRepository):
    """SQLite-backed learner storage; ``students.email`` is unique."""

    def __init__(self, db_path: Union[str, Path] = "data/db/enrollsync.db"):
        self._init_storage(db_path)

    async def save(self, student: Student) -> None:
        next_version = student.version + 1

        with self._track("student_save"), self._translate_errors(f"save student {student.id}"):
            async with self._conn() as db:
                if student.is_new:
                    await db.execute(
                        """
                        INSERT INTO students (id, name, email, version, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?, ?)
                    """,
                        (
                            str(student.id),
                            student.name,
                            student.email,
                            next_version,
                            student.created_at.isoformat(),
                            student.updated_at.isoformat(),
                        ),
                    )
                else:
                    cursor = await db.execute(
                        """
                        UPDATE students SET name = ?, email = ?, version = ?, updated_at = ?
                        WHERE id = ? AND version = ?
                    """,
                        (
                            student.name,
                            student.email,
                            next_version,
                            student.updated_at.isoformat(),
                            str(student.id),
                            student.version,
                        ),
                    )
                    if cursor.rowcount == 0:
                        raise ConcurrencyError(
                            f"Student {student.id} was modified concurrently "
                            f"(expected version {student.version})"
                        )
                await db.commit()

        student.mark_persisted(next_version)

    async def find_by_id(self, student_id: StudentId) -> Optional[Student]:
        with self._track("student_find_by_id"), self._translate_errors(f"load student {student_id}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT * FROM students WHERE id = ?", (str(student_id),))
                row = await cursor.fetchone()
        return self._row_to_student(row) if row else None

    async def find_by_email(self, email: str) -> Optional[Student]:
        with self._track("student_find_by_email"), self._translate_errors(f"load student by email {email}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT * FROM students WHERE email = ?", (email,))
                row = await cursor.fetchone()
        return self._row_to_student(row) if row else None

    async def exists(self, student_id: StudentId) -> bool:
        with self._track("student_exists"), self._translate_errors(f"check student {student_id}"):
            async with self._conn() as db:
                cursor = await db.execute("SELECT 1 FROM students WHERE id = ?", (str(student_id),))
                row = await cursor.fetchone()
        return row is not None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Student]:
        with self._track("student_find_all"), self._translate_errors("list students"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM students ORDER BY created_at, rowid LIMIT ? OFFSET ?",
                    (limit, offset),
                )
                rows = await cursor.fetchall()
        return [self._row_to_student(row) for row in rows]

    @staticmethod
    def _row_to_student(row: aiosqlite.Row) -> Student:
        return Student.reconstitute(
            student_id=StudentId(row["id"]),
            name=row["name"],
            email=row["email"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            version=row["version"],
        )


class SqliteLearningCourseRepository(SqliteAsyncMixin, ILearningCourseRepository):
    """SQLite-backed learning courses.

    The roster is stored as a JSON object keyed by student id. Saves
    compare the ``version`` column, so of two requests that granted access
    to the same loaded course only the first one persists.
    """

    def __init__(self, db_path: Union[str, Path] = "data/db/enrollsync.db"):
        self._init_storage(db_path)

    async def save(self, course: Course) -> None:
        next_version = course.version + 1
        roster = self._serialize_roster(course)

        with self._track("learning_course_save"), self._translate_errors(f"save course {course.id}"):
            async with self._conn() as db:
                if course.is_new:
                    await db.execute(
                        """
                        INSERT INTO learning_courses
                        (id, title, max_students, enrolled_students, version, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                        (
                            str(course.id),
                            course.title,
                            course.max_students,
                            roster,
                            next_version,
                            course.created_at.isoformat(),
                            course.updated_at.isoformat(),
                        ),
                    )
                else:
                    cursor = await db.execute(
                        """
                        UPDATE learning_courses
                        SET title = ?, max_students = ?, enrolled_students = ?,
                            version = ?, updated_at = ?
                        WHERE id = ? AND version = ?
                    """,
                        (
                            course.title,
                            course.max_students,
                            roster,
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
                await db.commit()

        course.mark_persisted(next_version)

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        with self._track("learning_course_find_by_id"), self._translate_errors(f"load course {course_id}"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM learning_courses WHERE id = ?", (str(course_id),)
                )
                row = await cursor.fetchone()
        return self._row_to_course(row) if row else None

    async def exists(self, course_id: CourseId) -> bool:
        with self._track("learning_course_exists"), self._translate_errors(f"check course {course_id}"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT 1 FROM learning_courses WHERE id = ?", (str(course_id),)
                )
                row = await cursor.fetchone()
        return row is not None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Course]:
        with self._track("learning_course_find_all"), self._translate_errors("list courses"):
            async with self._conn() as db:
                cursor = await db.execute(
                    "SELECT * FROM learning_courses ORDER BY created_at, rowid LIMIT ? OFFSET ?",
                    (limit, offset),
                )
                rows = await cursor.fetchall()
        return [self._row_to_course(row) for row in rows]

    @staticmethod
    def _serialize_roster(course: Course) -> str:
        return json.dumps(
            {str(access.student_id): access.to_dict() for access in course.students_with_access()}
        )

    @staticmethod
    def _row_to_course(row: aiosqlite.Row) -> Course:
        roster = json.loads(row["enrolled_students"] or "{}")
        return Course.reconstitute(
            course_id=CourseId(row["id"]),
            title=row["title"],
            max_students=row["max_students"],
            learners=[LearnerAccess.from_dict(entry) for entry in roster.values()],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            version=row["version"],
        )
