# SPDX-License-Identifier: Apache-2.0
"""Shared kernel for the EnrollSync bounded contexts.

Holds the building blocks every context depends on: the domain event
contract, the aggregate root base, UUID-backed identifiers and the
error taxonomy used to separate malformed input from missing entities.
"""

from .entities import AggregateRoot
from .errors import (
    CapacityExceededError,
    CourseNotFoundError,
    DomainError,
    DomainValidationError,
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
    InvalidStateTransitionError,
    NotFoundError,
    StudentNotFoundError,
    TenantNotFoundError,
    TenantSlugTakenError,
)
from .events import DomainEvent, IEventBus
from .value_objects import UuidIdentifier

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "IEventBus",
    "UuidIdentifier",
    "DomainError",
    "DomainValidationError",
    "CapacityExceededError",
    "DuplicateEnrollmentError",
    "InvalidStateTransitionError",
    "TenantSlugTakenError",
    "NotFoundError",
    "TenantNotFoundError",
    "StudentNotFoundError",
    "CourseNotFoundError",
    "EnrollmentNotFoundError",
]
