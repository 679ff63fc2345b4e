# SPDX-License-Identifier: Apache-2.0
"""Administrative-records domain model."""

from .entities import Course, Enrollment
from .repositories import IAdminCourseRepository
from .value_objects import CourseId, EnrollmentStatus, StudentId

__all__ = [
    "Course",
    "Enrollment",
    "IAdminCourseRepository",
    "CourseId",
    "EnrollmentStatus",
    "StudentId",
]
