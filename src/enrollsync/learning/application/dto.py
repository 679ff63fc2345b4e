# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects returned by learning-access handlers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from enrollsync.domain.events import format_event_timestamp

from ..domain.entities import Course, Student
from ..domain.value_objects import CourseId, LearnerAccess


@dataclass(frozen=True)
class StudentDTO:
    id: str
    name: str
    email: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, student: Student) -> StudentDTO:
        return cls(
            id=str(student.id),
            name=student.name,
            email=student.email,
            created_at=format_event_timestamp(student.created_at),
            updated_at=format_event_timestamp(student.updated_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CourseDTO:
    id: str
    title: str
    max_students: int
    learner_count: int
    available_slots: int

    @classmethod
    def from_entity(cls, course: Course) -> CourseDTO:
        return cls(
            id=str(course.id),
            title=course.title,
            max_students=course.max_students,
            learner_count=course.learner_count(),
            available_slots=course.available_learning_slots(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LearnerAccessDTO:
    """Result of a successful enrollment."""

    course_id: str
    student_id: str
    student_name: str
    student_email: str
    enrolled_at: str

    @classmethod
    def from_access(cls, course_id: CourseId, access: LearnerAccess) -> LearnerAccessDTO:
        return cls(
            course_id=str(course_id),
            student_id=str(access.student_id),
            student_name=access.student_name,
            student_email=access.student_email,
            enrolled_at=access.enrolled_at.format(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
