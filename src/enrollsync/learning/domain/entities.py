# SPDX-License-Identifier: Apache-2.0
"""Aggregates of the learning-access context."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from enrollsync.domain.entities import AggregateRoot, utc_now
from enrollsync.domain.errors import (
    CapacityExceededError,
    DomainValidationError,
    DuplicateEnrollmentError,
)
from enrollsync.domain.value_objects import is_valid_email, validate_text_length

from .events import StudentEnrolled
from .value_objects import CourseId, EnrollmentDate, LearnerAccess, StudentId

MAX_STUDENTS_LIMIT = 1000
DEFAULT_MAX_STUDENTS = 100


class Student(AggregateRoot):
    """A learner identity.

    The identity never changes; name and email can be corrected through
    ``update_info``. Courses keep their own snapshot of these fields.
    """

    def __init__(
        self,
        student_id: StudentId,
        name: str,
        email: str,
        created_at: datetime,
        updated_at: datetime,
        version: int = 0,
    ):
        super().__init__(version)
        self._validate_name(name)
        email = self._validate_email(email)
        self._id = student_id
        self._name = name
        self._email = email
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(cls, student_id: StudentId, name: str, email: str) -> Student:
        now = utc_now()
        return cls(student_id, name, email, now, now)

    @classmethod
    def reconstitute(
        cls,
        student_id: StudentId,
        name: str,
        email: str,
        created_at: datetime,
        updated_at: datetime,
        version: int,
    ) -> Student:
        return cls(student_id, name, email, created_at, updated_at, version)

    @property
    def id(self) -> StudentId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_info(self, name: str, email: str) -> None:
        self._validate_name(name)
        email = self._validate_email(email)
        self._name = name
        self._email = email
        self._updated_at = utc_now()

    @staticmethod
    def _validate_name(name: str) -> None:
        validate_text_length(name, "Student name", 2, 255)

    @staticmethod
    def _validate_email(email: str) -> str:
        if not email or not email.strip():
            raise DomainValidationError("Student email cannot be empty")
        email = email.strip()
        if not is_valid_email(email):
            raise DomainValidationError("Invalid email format")
        return email

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Student(id={self._id}, name={self._name!r})"


class Course(AggregateRoot):
    """Access-control boundary for course material.

    Holds one ``LearnerAccess`` snapshot per student. The roster only
    grows: access is granted through ``grant_learning_access`` and never
    revoked by this context.
    """

    def __init__(
        self,
        course_id: CourseId,
        title: str,
        max_students: int,
        learners: Iterable[LearnerAccess],
        created_at: datetime,
        updated_at: datetime,
        version: int = 0,
    ):
        super().__init__(version)
        self._validate_title(title)
        self._validate_max_students(max_students)
        self._id = course_id
        self._title = title
        self._max_students = max_students
        self._learners: Dict[StudentId, LearnerAccess] = {
            access.student_id: access for access in learners
        }
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls, course_id: CourseId, title: str, max_students: int = DEFAULT_MAX_STUDENTS
    ) -> Course:
        now = utc_now()
        return cls(course_id, title, max_students, [], now, now)

    @classmethod
    def reconstitute(
        cls,
        course_id: CourseId,
        title: str,
        max_students: int,
        learners: Iterable[LearnerAccess],
        created_at: datetime,
        updated_at: datetime,
        version: int,
    ) -> Course:
        return cls(course_id, title, max_students, learners, created_at, updated_at, version)

    @property
    def id(self) -> CourseId:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def max_students(self) -> int:
        return self._max_students

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def grant_learning_access(
        self, student: Student, enrolled_at: Optional[EnrollmentDate] = None
    ) -> LearnerAccess:
        """Give a student access to this course's material.

        The duplicate check runs before the capacity check, so a student
        who already has access to a full course gets the duplicate error.
        On success a ``StudentEnrolled`` event is recorded; publishing it
        is the caller's job.

        Raises:
            DuplicateEnrollmentError: If the student already has access
            CapacityExceededError: If the course is full
        """
        if self.has_learning_access(student.id):
            raise DuplicateEnrollmentError(
                f"Student {student.id} already has learning access to this course"
            )
        if self.is_at_capacity():
            raise CapacityExceededError(
                "Course is at capacity. No more learners can be accepted "
                f"(max: {self._max_students})"
            )

        access = LearnerAccess(
            student_id=student.id,
            student_name=student.name,
            student_email=student.email,
            enrolled_at=enrolled_at or EnrollmentDate.now(),
        )
        self._learners[student.id] = access
        self._updated_at = utc_now()

        self._record_event(
            StudentEnrolled(
                course_id=str(self._id),
                student_id=str(student.id),
                student_name=student.name,
                student_email=student.email,
                enrolled_at=access.enrolled_at.value,
            )
        )
        return access

    def has_learning_access(self, student_id: StudentId) -> bool:
        return student_id in self._learners

    def enrollment_date_for(self, student_id: StudentId) -> Optional[EnrollmentDate]:
        access = self._learners.get(student_id)
        return access.enrolled_at if access else None

    def is_at_capacity(self) -> bool:
        return self.learner_count() >= self._max_students

    def learner_count(self) -> int:
        return len(self._learners)

    def available_learning_slots(self) -> int:
        return max(0, self._max_students - self.learner_count())

    def students_with_access(self) -> List[LearnerAccess]:
        return list(self._learners.values())

    @staticmethod
    def _validate_title(title: str) -> None:
        validate_text_length(title, "Course title", 3, 255)

    @staticmethod
    def _validate_max_students(max_students: int) -> None:
        if max_students <= 0:
            raise DomainValidationError("Max students must be greater than 0")
        if max_students > MAX_STUDENTS_LIMIT:
            raise DomainValidationError(f"Max students cannot exceed {MAX_STUDENTS_LIMIT}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Course(id={self._id}, title={self._title!r}, learners={self.learner_count()})"
