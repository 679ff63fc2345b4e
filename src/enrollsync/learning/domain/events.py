# SPDX-License-Identifier: Apache-2.0
"""Domain events raised by the learning-access context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from enrollsync.domain.events import DomainEvent, format_event_timestamp


@dataclass(frozen=True)
class StudentEnrolled(DomainEvent):
    """Event raised when a student is granted learning access to a course.

    The records context consumes this event to create the matching
    administrative enrollment, so the payload carries a snapshot of the
    student rather than a reference.
    """

    course_id: str
    student_id: str
    student_name: str
    student_email: str
    enrolled_at: datetime
    event_id: UUID = field(default_factory=uuid4)

    @property
    def event_name(self) -> str:
        return "student_learning.student_enrolled"

    @property
    def aggregate_id(self) -> str:
        return self.course_id

    @property
    def occurred_at(self) -> datetime:
        return self.enrolled_at

    def _get_event_data(self) -> dict[str, Any]:
        return {
            "course_id": self.course_id,
            "student_id": self.student_id,
            "student_name": self.student_name,
            "student_email": self.student_email,
            "enrolled_at": format_event_timestamp(self.enrolled_at),
        }
