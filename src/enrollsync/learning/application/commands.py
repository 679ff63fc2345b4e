# SPDX-License-Identifier: Apache-2.0
"""Learning-access application commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EnrollStudentCommand:
    """Command to grant a student learning access to a course."""

    course_id: str
    student_id: str


@dataclass(frozen=True)
class RegisterStudentCommand:
    """Command to register a learner."""

    name: str
    email: str
    student_id: Optional[str] = None


@dataclass(frozen=True)
class CreateCourseCommand:
    """Command to open a course for learning access.

    ``course_id`` lets callers reuse the identifier of a course that
    already exists in the records context.
    """

    title: str
    max_students: int = 100
    course_id: Optional[str] = None
