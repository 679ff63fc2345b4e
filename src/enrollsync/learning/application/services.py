# SPDX-License-Identifier: Apache-2.0
"""Learning-access application services.

``EnrollStudentHandler`` is the entry point of the enrollment saga: it
persists the learning-side grant first and then publishes
``StudentEnrolled``. Subscribers (the records context among them) run
inside that publish call, so their failures surface here after the
grant is already stored.
"""

from __future__ import annotations

import logging

from enrollsync.domain.errors import (
    CourseNotFoundError,
    DomainValidationError,
    StudentNotFoundError,
)
from enrollsync.domain.events import IEventBus
from enrollsync.domain.repositories import DuplicateKeyError

from ..domain.entities import Course, Student
from ..domain.repositories import ILearningCourseRepository, IStudentRepository
from ..domain.value_objects import CourseId, StudentId
from .commands import CreateCourseCommand, EnrollStudentCommand, RegisterStudentCommand
from .dto import CourseDTO, LearnerAccessDTO, StudentDTO

logger = logging.getLogger(__name__)


class EnrollStudentHandler:
    """Grant learning access and start the cross-context enrollment."""

    def __init__(
        self,
        student_repository: IStudentRepository,
        course_repository: ILearningCourseRepository,
        event_bus: IEventBus,
    ):
        self._student_repository = student_repository
        self._course_repository = course_repository
        self._event_bus = event_bus

    async def handle(self, command: EnrollStudentCommand) -> LearnerAccessDTO:
        """Enroll a student into a course.

        Steps run strictly in order: load student, load course, grant
        access, save the course, publish its events. The records context
        reacts during the publish step.

        Raises:
            StudentNotFoundError: If the student does not exist
            CourseNotFoundError: If the course does not exist
            DomainValidationError: If access is duplicated or the course is full
            Exception: Any failure raised by an event subscriber, unchanged
        """
        try:
            student_id = StudentId(command.student_id)
            course_id = CourseId(command.course_id)

            student = await self._student_repository.find_by_id(student_id)
            if student is None:
                raise StudentNotFoundError(str(student_id))

            course = await self._course_repository.find_by_id(course_id)
            if course is None:
                raise CourseNotFoundError(str(course_id))

            access = course.grant_learning_access(student)

            await self._course_repository.save(course)
            await self._event_bus.publish_entity(course)

            logger.info(
                f"Student {student_id} enrolled in course {course_id} "
                f"({course.learner_count()}/{course.max_students})"
            )
            return LearnerAccessDTO.from_access(course_id, access)

        except Exception as e:
            logger.error(
                f"Failed to enroll student {command.student_id} "
                f"in course {command.course_id}: {e}"
            )
            raise


class RegisterStudentHandler:
    """Register a learner with a unique email address."""

    def __init__(self, student_repository: IStudentRepository):
        self._student_repository = student_repository

    async def handle(self, command: RegisterStudentCommand) -> StudentDTO:
        student_id = StudentId(command.student_id) if command.student_id else StudentId.generate()
        student = Student.create(student_id, command.name, command.email)

        if await self._student_repository.exists(student_id):
            raise DomainValidationError(f"Student {student_id} already exists")
        if await self._student_repository.find_by_email(student.email) is not None:
            raise DomainValidationError(f"Student with email '{student.email}' already exists")

        try:
            await self._student_repository.save(student)
        except DuplicateKeyError as e:
            raise DomainValidationError(
                f"Student with email '{student.email}' already exists"
            ) from e

        logger.info(f"Student {student.id} registered")
        return StudentDTO.from_entity(student)


class CreateCourseHandler:
    """Open a course for learning access."""

    def __init__(self, course_repository: ILearningCourseRepository):
        self._course_repository = course_repository

    async def handle(self, command: CreateCourseCommand) -> CourseDTO:
        course_id = CourseId(command.course_id) if command.course_id else CourseId.generate()
        if await self._course_repository.exists(course_id):
            raise DomainValidationError(f"Course {course_id} already exists")

        course = Course.create(course_id, command.title, command.max_students)
        await self._course_repository.save(course)

        logger.info(f"Learning course {course_id} created (max students: {course.max_students})")
        return CourseDTO.from_entity(course)
