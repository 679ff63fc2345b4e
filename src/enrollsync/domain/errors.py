# SPDX-License-Identifier: Apache-2.0
"""Domain error taxonomy.

Two families of errors leave the domain and application layers:

* ``DomainValidationError`` - the input was malformed or the requested
  mutation breaks an invariant (format, range, duplicate, capacity,
  illegal state transition).
* ``NotFoundError`` - the input was well formed but the referenced
  entity does not exist.

Adapters map the two families to different outcomes, so they never share
a base class other than ``DomainError``.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised by the domain and application layers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DomainValidationError(DomainError, ValueError):
    """Raised when a value object or aggregate invariant is violated."""


class CapacityExceededError(DomainValidationError):
    """Raised when a course cannot accept another learner or record."""


class DuplicateEnrollmentError(DomainValidationError):
    """Raised when a student already holds access or a record for a course."""


class InvalidStateTransitionError(DomainValidationError):
    """Raised when a lifecycle transition is not legal from the current state."""


class TenantSlugTakenError(DomainValidationError):
    """Raised when a tenant slug is already claimed by another tenant."""

    def __init__(self, slug: str):
        super().__init__(f"Tenant with slug '{slug}' already exists")
        self.slug = slug


class NotFoundError(DomainError, LookupError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str, message: str | None = None):
        super().__init__(message or f"{entity_type} {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class TenantNotFoundError(NotFoundError):
    def __init__(self, tenant_id: str):
        super().__init__("Tenant", str(tenant_id), f"Tenant with ID '{tenant_id}' not found")


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_id: str):
        super().__init__("Student", str(student_id))


class CourseNotFoundError(NotFoundError):
    def __init__(self, course_id: str):
        super().__init__("Course", str(course_id))


class EnrollmentNotFoundError(NotFoundError):
    def __init__(self, course_id: str, student_id: str):
        super().__init__(
            "Enrollment",
            f"{course_id}/{student_id}",
            f"Enrollment record for student {student_id} not found in course {course_id}",
        )
        self.course_id = str(course_id)
        self.student_id = str(student_id)
