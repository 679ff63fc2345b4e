# SPDX-License-Identifier: Apache-2.0
"""Learning-access domain model."""

from .entities import Course, Student
from .events import StudentEnrolled
from .repositories import ILearningCourseRepository, IStudentRepository
from .value_objects import CourseId, EnrollmentDate, LearnerAccess, StudentId

__all__ = [
    "Course",
    "Student",
    "StudentEnrolled",
    "ILearningCourseRepository",
    "IStudentRepository",
    "CourseId",
    "EnrollmentDate",
    "LearnerAccess",
    "StudentId",
]
