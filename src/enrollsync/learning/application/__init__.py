# SPDX-License-Identifier: Apache-2.0
"""Learning-access application layer."""

from .commands import CreateCourseCommand, EnrollStudentCommand, RegisterStudentCommand
from .dto import CourseDTO, LearnerAccessDTO, StudentDTO
from .services import CreateCourseHandler, EnrollStudentHandler, RegisterStudentHandler

__all__ = [
    "CreateCourseCommand",
    "EnrollStudentCommand",
    "RegisterStudentCommand",
    "CourseDTO",
    "LearnerAccessDTO",
    "StudentDTO",
    "CreateCourseHandler",
    "EnrollStudentHandler",
    "RegisterStudentHandler",
]
