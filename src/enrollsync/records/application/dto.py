# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects returned by administrative-records handlers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from enrollsync.domain.events import format_event_timestamp

from ..domain.entities import Course, Enrollment


def _format_optional(value) -> Optional[str]:
    return format_event_timestamp(value) if value is not None else None


@dataclass(frozen=True)
class EnrollmentDTO:
    course_id: str
    student_id: str
    student_name: str
    student_email: str
    status: str
    enrolled_at: str
    completed_at: Optional[str] = None
    dropped_at: Optional[str] = None

    @classmethod
    def from_entity(cls, enrollment: Enrollment) -> EnrollmentDTO:
        return cls(
            course_id=str(enrollment.course_id),
            student_id=str(enrollment.student_id),
            student_name=enrollment.student_name,
            student_email=enrollment.student_email,
            status=enrollment.status.value,
            enrolled_at=format_event_timestamp(enrollment.enrolled_at),
            completed_at=_format_optional(enrollment.completed_at),
            dropped_at=_format_optional(enrollment.dropped_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AdminCourseDTO:
    id: str
    title: str
    description: str
    max_capacity: int
    instructor_id: Optional[str]

    @classmethod
    def from_entity(cls, course: Course) -> AdminCourseDTO:
        return cls(
            id=str(course.id),
            title=course.title,
            description=course.description,
            max_capacity=course.max_capacity,
            instructor_id=course.instructor_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CourseStatisticsDTO:
    """Enrollment counts by status plus remaining capacity."""

    course_id: str
    title: str
    max_capacity: int
    available_capacity: int
    is_placeholder: bool
    statistics: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_entity(cls, course: Course) -> CourseStatisticsDTO:
        return cls(
            course_id=str(course.id),
            title=course.title,
            max_capacity=course.max_capacity,
            available_capacity=course.available_capacity(),
            is_placeholder=course.is_placeholder,
            statistics=course.enrollment_statistics(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
