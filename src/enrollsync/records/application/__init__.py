# SPDX-License-Identifier: Apache-2.0
"""Administrative-records application layer."""

from .commands import ChangeEnrollmentStatusCommand, CreateCourseCommand, EnrollStudentCommand
from .dto import AdminCourseDTO, CourseStatisticsDTO, EnrollmentDTO
from .queries import GetCourseStatisticsQuery
from .services import (
    ChangeEnrollmentStatusHandler,
    CreateCourseHandler,
    EnrollStudentHandler,
    GetCourseStatisticsHandler,
)

__all__ = [
    "ChangeEnrollmentStatusCommand",
    "CreateCourseCommand",
    "EnrollStudentCommand",
    "GetCourseStatisticsQuery",
    "AdminCourseDTO",
    "CourseStatisticsDTO",
    "EnrollmentDTO",
    "ChangeEnrollmentStatusHandler",
    "CreateCourseHandler",
    "EnrollStudentHandler",
    "GetCourseStatisticsHandler",
]
