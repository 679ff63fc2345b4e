# SPDX-License-Identifier: Apache-2.0
"""Administrative-records application commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from enrollsync.domain.errors import DomainValidationError

ENROLLMENT_STATUS_ACTIONS = ("complete", "drop", "suspend", "reactivate")


@dataclass(frozen=True)
class EnrollStudentCommand:
    """Command to record an enrollment in the administrative system.

    Built from a ``student_learning.student_enrolled`` payload, so every
    field is a plain string; ``enrolled_at`` uses ``YYYY-MM-DD HH:MM:SS``
    or ISO-8601.
    """

    course_id: str
    student_id: str
    student_name: str
    student_email: str
    enrolled_at: str


@dataclass(frozen=True)
class CreateCourseCommand:
    """Command to register a course in the administrative system."""

    title: str
    description: str = ""
    max_capacity: int = 100
    instructor_id: Optional[str] = None
    course_id: Optional[str] = None


@dataclass(frozen=True)
class ChangeEnrollmentStatusCommand:
    """Command to move an enrollment record through its lifecycle."""

    course_id: str
    student_id: str
    action: str

    def __post_init__(self):
        if self.action not in ENROLLMENT_STATUS_ACTIONS:
            raise DomainValidationError(
                f"Unknown enrollment action: {self.action}. "
                f"Valid actions: {', '.join(ENROLLMENT_STATUS_ACTIONS)}"
            )
