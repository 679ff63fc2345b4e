# SPDX-License-Identifier: Apache-2.0
"""Aggregates of the administrative-records context."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from enrollsync.domain.entities import AggregateRoot, utc_now
from enrollsync.domain.errors import (
    CapacityExceededError,
    DomainValidationError,
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
    InvalidStateTransitionError,
)
from enrollsync.domain.value_objects import validate_text_length

from .value_objects import CourseId, EnrollmentStatus, StudentId

MAX_CAPACITY_LIMIT = 1000
DEFAULT_MAX_CAPACITY = 100

PLACEHOLDER_TITLE = "Course Placeholder"
PLACEHOLDER_DESCRIPTION = "Course created from enrollment event"


class Enrollment:
    """One student's administrative record for one course.

    Name and email are copied at enrollment time and are not kept in sync
    with the learner's profile afterwards.

    Transitions::

        active -> completed
        active -> dropped
        active <-> suspended
        suspended -> dropped
    """

    def __init__(
        self,
        student_id: StudentId,
        course_id: CourseId,
        student_name: str,
        student_email: str,
        status: EnrollmentStatus,
        enrolled_at: datetime,
        updated_at: datetime,
        completed_at: Optional[datetime] = None,
        dropped_at: Optional[datetime] = None,
    ):
        self._student_id = student_id
        self._course_id = course_id
        self._student_name = student_name
        self._student_email = student_email
        self._status = status
        self._enrolled_at = enrolled_at
        self._updated_at = updated_at
        self._completed_at = completed_at
        self._dropped_at = dropped_at

    @classmethod
    def create(
        cls,
        student_id: StudentId,
        course_id: CourseId,
        student_name: str,
        student_email: str,
        enrolled_at: datetime,
    ) -> Enrollment:
        return cls(
            student_id=student_id,
            course_id=course_id,
            student_name=student_name,
            student_email=student_email,
            status=EnrollmentStatus.ACTIVE,
            enrolled_at=enrolled_at,
            updated_at=utc_now(),
        )

    @classmethod
    def reconstitute(
        cls,
        student_id: StudentId,
        course_id: CourseId,
        student_name: str,
        student_email: str,
        status: EnrollmentStatus,
        enrolled_at: datetime,
        updated_at: datetime,
        completed_at: Optional[datetime],
        dropped_at: Optional[datetime],
    ) -> Enrollment:
        return cls(
            student_id, course_id, student_name, student_email, status,
            enrolled_at, updated_at, completed_at, dropped_at,
        )

    @property
    def student_id(self) -> StudentId:
        return self._student_id

    @property
    def course_id(self) -> CourseId:
        return self._course_id

    @property
    def student_name(self) -> str:
        return self._student_name

    @property
    def student_email(self) -> str:
        return self._student_email

    @property
    def status(self) -> EnrollmentStatus:
        return self._status

    @property
    def enrolled_at(self) -> datetime:
        return self._enrolled_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def completed_at(self) -> Optional[datetime]:
        return self._completed_at

    @property
    def dropped_at(self) -> Optional[datetime]:
        return self._dropped_at

    def complete(self) -> None:
        if not self._status.is_active():
            raise InvalidStateTransitionError("Only active enrollments can be completed")
        now = utc_now()
        self._status = EnrollmentStatus.COMPLETED
        self._completed_at = now
        self._updated_at = now

    def drop(self) -> None:
        if self._status.is_completed():
            raise InvalidStateTransitionError("Cannot drop a completed enrollment")
        if self._status.is_dropped():
            raise InvalidStateTransitionError("Enrollment is already dropped")
        now = utc_now()
        self._status = EnrollmentStatus.DROPPED
        self._dropped_at = now
        self._updated_at = now

    def suspend(self) -> None:
        if not self._status.is_active():
            raise InvalidStateTransitionError("Only active enrollments can be suspended")
        self._status = EnrollmentStatus.SUSPENDED
        self._updated_at = utc_now()

    def reactivate(self) -> None:
        if not self._status.is_suspended():
            raise InvalidStateTransitionError("Only suspended enrollments can be reactivated")
        self._status = EnrollmentStatus.ACTIVE
        self._updated_at = utc_now()

    def __repr__(self) -> str:
        return (
            f"Enrollment(course={self._course_id}, student={self._student_id}, "
            f"status={self._status.value})"
        )


class Course(AggregateRoot):
    """Reporting and tracking boundary for one course.

    Owns its ``Enrollment`` records by student id. The number of active
    records never exceeds ``max_capacity``; completed, dropped and
    suspended records do not count against it.
    """

    def __init__(
        self,
        course_id: CourseId,
        title: str,
        description: str,
        max_capacity: int,
        instructor_id: Optional[str],
        enrollments: Iterable[Enrollment],
        created_at: datetime,
        updated_at: datetime,
        version: int = 0,
    ):
        super().__init__(version)
        self._validate_title(title)
        self._validate_max_capacity(max_capacity)
        self._id = course_id
        self._title = title
        self._description = description
        self._max_capacity = max_capacity
        self._instructor_id = instructor_id
        self._enrollments: Dict[StudentId, Enrollment] = {
            enrollment.student_id: enrollment for enrollment in enrollments
        }
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        course_id: CourseId,
        title: str,
        description: str,
        max_capacity: int = DEFAULT_MAX_CAPACITY,
        instructor_id: Optional[str] = None,
    ) -> Course:
        now = utc_now()
        return cls(course_id, title, description, max_capacity, instructor_id, [], now, now)

    @classmethod
    def placeholder(cls, course_id: CourseId) -> Course:
        """Stand-in course for an enrollment that arrived before the course itself."""
        return cls.create(
            course_id=course_id,
            title=PLACEHOLDER_TITLE,
            description=PLACEHOLDER_DESCRIPTION,
            max_capacity=DEFAULT_MAX_CAPACITY,
        )

    @classmethod
    def reconstitute(
        cls,
        course_id: CourseId,
        title: str,
        description: str,
        max_capacity: int,
        instructor_id: Optional[str],
        enrollments: Iterable[Enrollment],
        created_at: datetime,
        updated_at: datetime,
        version: int,
    ) -> Course:
        return cls(
            course_id, title, description, max_capacity, instructor_id,
            enrollments, created_at, updated_at, version,
        )

    @property
    def id(self) -> CourseId:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def instructor_id(self) -> Optional[str]:
        return self._instructor_id

    @property
    def enrollments(self) -> List[Enrollment]:
        return list(self._enrollments.values())

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_placeholder(self) -> bool:
        return self._title == PLACEHOLDER_TITLE and self._description == PLACEHOLDER_DESCRIPTION

    def record_enrollment(
        self,
        student_id: StudentId,
        student_name: str,
        student_email: str,
        enrolled_at: datetime,
    ) -> Enrollment:
        """Create the administrative record for a newly enrolled student.

        Raises:
            DuplicateEnrollmentError: If a record for the student exists,
                whatever its status
            CapacityExceededError: If active records already fill the course
        """
        if self.has_enrollment_record(student_id):
            raise DuplicateEnrollmentError(
                f"Enrollment record for student {student_id} already exists"
            )
        if self.is_at_max_capacity():
            raise CapacityExceededError(
                "Course is at maximum capacity. Cannot record more enrollments "
                f"(max: {self._max_capacity})"
            )

        enrollment = Enrollment.create(
            student_id=student_id,
            course_id=self._id,
            student_name=student_name,
            student_email=student_email,
            enrolled_at=enrolled_at,
        )
        self._enrollments[student_id] = enrollment
        self._touch()
        return enrollment

    def complete_enrollment(self, student_id: StudentId) -> Enrollment:
        enrollment = self._require_enrollment(student_id)
        enrollment.complete()
        self._touch()
        return enrollment

    def drop_enrollment(self, student_id: StudentId) -> Enrollment:
        enrollment = self._require_enrollment(student_id)
        enrollment.drop()
        self._touch()
        return enrollment

    def suspend_enrollment(self, student_id: StudentId) -> Enrollment:
        enrollment = self._require_enrollment(student_id)
        enrollment.suspend()
        self._touch()
        return enrollment

    def reactivate_enrollment(self, student_id: StudentId) -> Enrollment:
        """Return a suspended record to active.

        Reactivation counts against capacity like a new record does.
        """
        enrollment = self._require_enrollment(student_id)
        if enrollment.status.is_suspended() and self.is_at_max_capacity():
            raise CapacityExceededError(
                "Course is at maximum capacity. Cannot reactivate enrollment "
                f"(max: {self._max_capacity})"
            )
        enrollment.reactivate()
        self._touch()
        return enrollment

    def update_info(
        self, title: str, description: str, instructor_id: Optional[str] = None
    ) -> None:
        self._validate_title(title)
        self._title = title
        self._description = description
        self._instructor_id = instructor_id
        self._touch()

    def change_max_capacity(self, max_capacity: int) -> None:
        """Resize the course without dropping below its active records."""
        self._validate_max_capacity(max_capacity)
        if max_capacity < self.count_active_enrollments():
            raise CapacityExceededError(
                f"Max capacity {max_capacity} is below the "
                f"{self.count_active_enrollments()} active enrollments"
            )
        self._max_capacity = max_capacity
        self._touch()

    def has_enrollment_record(self, student_id: StudentId) -> bool:
        return student_id in self._enrollments

    def get_enrollment_record(self, student_id: StudentId) -> Optional[Enrollment]:
        return self._enrollments.get(student_id)

    def is_at_max_capacity(self) -> bool:
        return self.count_active_enrollments() >= self._max_capacity

    def count_active_enrollments(self) -> int:
        return self._count(EnrollmentStatus.ACTIVE)

    def count_completed_enrollments(self) -> int:
        return self._count(EnrollmentStatus.COMPLETED)

    def count_dropped_enrollments(self) -> int:
        return self._count(EnrollmentStatus.DROPPED)

    def count_suspended_enrollments(self) -> int:
        return self._count(EnrollmentStatus.SUSPENDED)

    def total_enrollment_count(self) -> int:
        return len(self._enrollments)

    def enrollment_statistics(self) -> Dict[str, int]:
        """Summary of records by status for reporting."""
        return {
            "active": self.count_active_enrollments(),
            "completed": self.count_completed_enrollments(),
            "dropped": self.count_dropped_enrollments(),
            "suspended": self.count_suspended_enrollments(),
            "total": self.total_enrollment_count(),
        }

    def available_capacity(self) -> int:
        return max(0, self._max_capacity - self.count_active_enrollments())

    def active_enrollments(self) -> List[Enrollment]:
        return self._with_status(EnrollmentStatus.ACTIVE)

    def completed_enrollments(self) -> List[Enrollment]:
        return self._with_status(EnrollmentStatus.COMPLETED)

    def dropped_enrollments(self) -> List[Enrollment]:
        return self._with_status(EnrollmentStatus.DROPPED)

    def _require_enrollment(self, student_id: StudentId) -> Enrollment:
        enrollment = self._enrollments.get(student_id)
        if enrollment is None:
            raise EnrollmentNotFoundError(str(self._id), str(student_id))
        return enrollment

    def _with_status(self, status: EnrollmentStatus) -> List[Enrollment]:
        return [e for e in self._enrollments.values() if e.status is status]

    def _count(self, status: EnrollmentStatus) -> int:
        return len(self._with_status(status))

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @staticmethod
    def _validate_title(title: str) -> None:
        validate_text_length(title, "Course title", 3, 255)

    @staticmethod
    def _validate_max_capacity(max_capacity: int) -> None:
        if max_capacity <= 0:
            raise DomainValidationError("Max capacity must be greater than 0")
        if max_capacity > MAX_CAPACITY_LIMIT:
            raise DomainValidationError(f"Max capacity cannot exceed {MAX_CAPACITY_LIMIT}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Course(id={self._id}, title={self._title!r}, "
            f"active={self.count_active_enrollments()}/{self._max_capacity})"
        )
