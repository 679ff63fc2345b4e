# SPDX-License-Identifier: Apache-2.0
"""Fake implementations of EnrollSync ports for testing."""

from __future__ import annotations

from .events import FakeEventBus
from .repositories import (
    FakeAdminCourseRepository,
    FakeLearningCourseRepository,
    FakeStudentRepository,
    FakeTenantRepository,
)

__all__ = [
    "FakeEventBus",
    "FakeAdminCourseRepository",
    "FakeLearningCourseRepository",
    "FakeStudentRepository",
    "FakeTenantRepository",
]
