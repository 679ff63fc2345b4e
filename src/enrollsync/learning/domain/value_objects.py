# SPDX-License-Identifier: Apache-2.0
"""Value objects for the learning-access context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from enrollsync.domain.errors import DomainValidationError
from enrollsync.domain.events import EVENT_TIMESTAMP_FORMAT
from enrollsync.domain.value_objects import UuidIdentifier


class StudentId(UuidIdentifier):
    """Identity of a learner."""


class CourseId(UuidIdentifier):
    """Identity of a course as seen by the learning context."""


@dataclass(frozen=True)
class EnrollmentDate:
    """Moment a learner was granted access to a course.

    Always held in UTC (naive input is taken as UTC) and never in the
    future relative to the clock at construction time.
    """

    value: datetime

    def __post_init__(self):
        if not isinstance(self.value, datetime):
            raise DomainValidationError(
                f"Enrollment date must be a datetime, got {type(self.value).__name__}"
            )
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))
        else:
            object.__setattr__(self, "value", self.value.astimezone(timezone.utc))
        if self.value > datetime.now(timezone.utc):
            raise DomainValidationError("Enrollment date cannot be in the future")

    @classmethod
    def now(cls) -> EnrollmentDate:
        return cls(datetime.now(timezone.utc).replace(microsecond=0))

    @classmethod
    def from_datetime(cls, value: datetime) -> EnrollmentDate:
        return cls(value)

    @classmethod
    def from_string(cls, value: str) -> EnrollmentDate:
        """Parse ISO-8601 or ``YYYY-MM-DD HH:MM:SS`` text."""
        try:
            parsed = datetime.fromisoformat(value.strip())
        except (ValueError, AttributeError) as e:
            raise DomainValidationError(f"Invalid enrollment date: {value}") from e
        return cls(parsed)

    def is_before(self, other: EnrollmentDate) -> bool:
        return self.value < other.value

    def is_after(self, other: EnrollmentDate) -> bool:
        return self.value > other.value

    def format(self, fmt: str = EVENT_TIMESTAMP_FORMAT) -> str:
        return self.value.strftime(fmt)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class LearnerAccess:
    """Snapshot of a student at the moment access to a course was granted."""

    student_id: StudentId
    student_name: str
    student_email: str
    enrolled_at: EnrollmentDate

    def to_dict(self) -> Dict[str, Any]:
        return {
            "student": {
                "id": str(self.student_id),
                "name": self.student_name,
                "email": self.student_email,
            },
            "enrolled_at": self.enrolled_at.value.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LearnerAccess:
        student = data["student"]
        return cls(
            student_id=StudentId(student["id"]),
            student_name=student["name"],
            student_email=student["email"],
            enrolled_at=EnrollmentDate.from_string(data["enrolled_at"]),
        )
