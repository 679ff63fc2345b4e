# SPDX-License-Identifier: Apache-2.0
"""Value objects for the administrative-records context.

Identifiers are declared here rather than imported from the learning
context; the two contexts only share identifier strings carried by events.
"""

from __future__ import annotations

from enum import Enum

from enrollsync.domain.errors import DomainValidationError
from enrollsync.domain.value_objects import UuidIdentifier


class CourseId(UuidIdentifier):
    """Identity of a course as seen by the records context."""


class StudentId(UuidIdentifier):
    """Identity of an enrolled student as seen by the records context."""


class EnrollmentStatus(Enum):
    """Administrative status of one enrollment record."""

    ACTIVE = "active"
    COMPLETED = "completed"
    DROPPED = "dropped"
    SUSPENDED = "suspended"

    @classmethod
    def from_string(cls, value: str) -> EnrollmentStatus:
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as e:
            raise DomainValidationError(f"Invalid enrollment status: {value}") from e

    def is_active(self) -> bool:
        return self is EnrollmentStatus.ACTIVE

    def is_completed(self) -> bool:
        return self is EnrollmentStatus.COMPLETED

    def is_dropped(self) -> bool:
        return self is EnrollmentStatus.DROPPED

    def is_suspended(self) -> bool:
        return self is EnrollmentStatus.SUSPENDED

    def can_attend_classes(self) -> bool:
        return self is EnrollmentStatus.ACTIVE

    def __str__(self) -> str:
        return self.value
