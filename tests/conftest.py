# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the EnrollSync test suite.

FIXTURES PROVIDED:
- event_bus: a fresh InMemoryEventBus with no subscribers
- fake repositories for every aggregate
- wired_app: handlers and listeners wired around the fakes, as bootstrap does
- domain_objects: factory for valid domain objects with reasonable defaults
"""

from __future__ import annotations

from typing import Optional

import pytest

from enrollsync.bootstrap import reset_bootstrap_state, wire_application
from enrollsync.config import EnrollSyncConfig
from enrollsync.infrastructure.messaging import InMemoryEventBus
from enrollsync.learning.domain.entities import Course as LearningCourse
from enrollsync.learning.domain.entities import Student
from enrollsync.learning.domain.value_objects import CourseId as LearningCourseId
from enrollsync.learning.domain.value_objects import StudentId
from enrollsync.records.domain.entities import Course as AdminCourse
from enrollsync.records.domain.value_objects import CourseId as AdminCourseId
from enrollsync.tenancy.domain.entities import Tenant
from enrollsync.tenancy.domain.value_objects import ContactEmail, TenantId, TenantSlug
from tests.fakes.repositories import (
    FakeAdminCourseRepository,
    FakeLearningCourseRepository,
    FakeStudentRepository,
    FakeTenantRepository,
)


class DomainObjectFactory:
    """Factory for creating valid domain objects with sensible defaults."""

    def __init__(self):
        self._counter = 0

    def _next(self) -> int:
        self._counter += 1
        return self._counter

    def tenant(self, name: str = "Acme University", slug: Optional[str] = None) -> Tenant:
        n = self._next()
        return Tenant.create(
            tenant_id=TenantId.generate(),
            name=name,
            slug=TenantSlug(slug or f"tenant-{n}"),
            contact_email=ContactEmail(f"admin{n}@example.edu"),
        )

    def student(self, name: Optional[str] = None, email: Optional[str] = None) -> Student:
        n = self._next()
        return Student.create(
            StudentId.generate(),
            name or f"Student {n}",
            email or f"student{n}@example.edu",
        )

    def learning_course(
        self, max_students: int = 100, course_id: Optional[str] = None
    ) -> LearningCourse:
        cid = LearningCourseId(course_id) if course_id else LearningCourseId.generate()
        return LearningCourse.create(cid, f"Course {self._next()}", max_students)

    def admin_course(self, course_id: str, max_capacity: int = 100) -> AdminCourse:
        return AdminCourse.create(
            course_id=AdminCourseId(course_id),
            title="Distributed Systems",
            description="Administrative record",
            max_capacity=max_capacity,
        )


@pytest.fixture
def domain_objects() -> DomainObjectFactory:
    return DomainObjectFactory()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def tenant_repository() -> FakeTenantRepository:
    return FakeTenantRepository()


@pytest.fixture
def student_repository() -> FakeStudentRepository:
    return FakeStudentRepository()


@pytest.fixture
def learning_course_repository() -> FakeLearningCourseRepository:
    return FakeLearningCourseRepository()


@pytest.fixture
def admin_course_repository() -> FakeAdminCourseRepository:
    return FakeAdminCourseRepository()


@pytest.fixture
def wired_app(
    event_bus,
    tenant_repository,
    student_repository,
    learning_course_repository,
    admin_course_repository,
    tmp_path,
):
    """Application wired around in-memory fakes and a real event bus."""
    return wire_application(
        config=EnrollSyncConfig(database_path=str(tmp_path / "unused.db")),
        event_bus=event_bus,
        tenant_repository=tenant_repository,
        student_repository=student_repository,
        learning_course_repository=learning_course_repository,
        admin_course_repository=admin_course_repository,
    )


@pytest.fixture
def clean_bootstrap():
    """Reset process-wide bootstrap state around a test."""
    reset_bootstrap_state()
    yield
    reset_bootstrap_state()
