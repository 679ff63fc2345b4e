# SPDX-License-Identifier: Apache-2.0
"""Administrative-records application services."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from enrollsync.domain.errors import CourseNotFoundError, DomainValidationError
from enrollsync.metrics import ENROLLMENT_RECORDS, ENROLLMENT_TRANSITIONS, PLACEHOLDER_COURSES

from ..domain.entities import Course
from ..domain.repositories import IAdminCourseRepository
from ..domain.value_objects import CourseId, StudentId
from .commands import ChangeEnrollmentStatusCommand, CreateCourseCommand, EnrollStudentCommand
from .dto import AdminCourseDTO, CourseStatisticsDTO, EnrollmentDTO
from .queries import GetCourseStatisticsQuery

logger = logging.getLogger(__name__)


def _parse_enrolled_at(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (ValueError, AttributeError) as e:
        raise DomainValidationError(f"Invalid enrollment timestamp: {value}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class EnrollStudentHandler:
    """Record an enrollment that was granted in the learning context.

    A course unknown to this context is created on the fly as a
    placeholder (title "Course Placeholder", capacity 100) so enrollments
    are never rejected because the two contexts were set up out of order.
    """

    def __init__(self, course_repository: IAdminCourseRepository):
        self._course_repository = course_repository

    async def handle(self, command: EnrollStudentCommand) -> EnrollmentDTO:
        """Record the enrollment and persist the course.

        Raises:
            DuplicateEnrollmentError: If the student already has a record
            CapacityExceededError: If active records already fill the course
        """
        course_id = CourseId(command.course_id)
        student_id = StudentId(command.student_id)
        enrolled_at = _parse_enrolled_at(command.enrolled_at)

        course = await self._course_repository.find_by_id(course_id)
        if course is None:
            course = Course.placeholder(course_id)
            PLACEHOLDER_COURSES.inc()
            logger.info(f"Created course placeholder {course_id} from enrollment event")

        try:
            enrollment = course.record_enrollment(
                student_id=student_id,
                student_name=command.student_name,
                student_email=command.student_email,
                enrolled_at=enrolled_at,
            )
            await self._course_repository.save(course)
        except DomainValidationError as e:
            logger.error(
                f"Failed to record enrollment of student {student_id} "
                f"in course {course_id}: {e}"
            )
            raise

        ENROLLMENT_RECORDS.inc()
        logger.info(
            f"Enrollment recorded in administrative system: course={course_id} "
            f"student={student_id} name={command.student_name} "
            f"enrolled_at={enrolled_at.strftime('%Y-%m-%d %H:%M:%S')}"
        )
        return EnrollmentDTO.from_entity(enrollment)


class CreateCourseHandler:
    """Register a course in the administrative system.

    A placeholder left behind by an early enrollment is taken over: it
    receives the real title, description, instructor and capacity and
    keeps the records it already holds.
    """

    def __init__(self, course_repository: IAdminCourseRepository):
        self._course_repository = course_repository

    async def handle(self, command: CreateCourseCommand) -> AdminCourseDTO:
        course_id = CourseId(command.course_id) if command.course_id else CourseId.generate()
        existing = await self._course_repository.find_by_id(course_id)
        if existing is not None:
            if not existing.is_placeholder:
                raise DomainValidationError(f"Course {course_id} already exists")
            existing.change_max_capacity(command.max_capacity)
            existing.update_info(command.title, command.description, command.instructor_id)
            await self._course_repository.save(existing)
            logger.info(
                f"Course placeholder {course_id} replaced by '{existing.title}' "
                f"({existing.total_enrollment_count()} records kept)"
            )
            return AdminCourseDTO.from_entity(existing)

        course = Course.create(
            course_id=course_id,
            title=command.title,
            description=command.description,
            max_capacity=command.max_capacity,
            instructor_id=command.instructor_id,
        )
        await self._course_repository.save(course)

        logger.info(f"Administrative course {course_id} created (capacity: {course.max_capacity})")
        return AdminCourseDTO.from_entity(course)


class ChangeEnrollmentStatusHandler:
    """Complete, drop, suspend or reactivate one enrollment record."""

    def __init__(self, course_repository: IAdminCourseRepository):
        self._course_repository = course_repository

    async def handle(self, command: ChangeEnrollmentStatusCommand) -> EnrollmentDTO:
        course_id = CourseId(command.course_id)
        student_id = StudentId(command.student_id)

        course = await self._course_repository.find_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(str(course_id))

        transition = getattr(course, f"{command.action}_enrollment")
        enrollment = transition(student_id)
        await self._course_repository.save(course)

        ENROLLMENT_TRANSITIONS.labels(action=command.action).inc()
        logger.info(
            f"Enrollment of student {student_id} in course {course_id} "
            f"is now {enrollment.status.value}"
        )
        return EnrollmentDTO.from_entity(enrollment)


class GetCourseStatisticsHandler:
    def __init__(self, course_repository: IAdminCourseRepository):
        self._course_repository = course_repository

    async def handle(self, query: GetCourseStatisticsQuery) -> CourseStatisticsDTO:
        course = await self._course_repository.find_by_id(CourseId(query.course_id))
        if course is None:
            raise CourseNotFoundError(query.course_id)
        return CourseStatisticsDTO.from_entity(course)
