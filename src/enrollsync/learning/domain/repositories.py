# SPDX-License-Identifier: Apache-2.0
"""Repository interfaces for the learning-access context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Course, Student
from .value_objects import CourseId, StudentId


class IStudentRepository(ABC):
    """Persistence contract for learners."""

    @abstractmethod
    async def save(self, student: Student) -> None:
        """Insert or update a student.

        Raises:
            DuplicateKeyError: If another student already uses the email
            ConcurrencyError: If the stored version no longer matches
        """
        pass

    @abstractmethod
    async def find_by_id(self, student_id: StudentId) -> Optional[Student]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Student]:
        pass

    @abstractmethod
    async def exists(self, student_id: StudentId) -> bool:
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Student]:
        pass


class ILearningCourseRepository(ABC):
    """Persistence contract for learning-context courses and their rosters."""

    @abstractmethod
    async def save(self, course: Course) -> None:
        """Insert or update a course together with its roster.

        Raises:
            ConcurrencyError: If the course was saved by someone else since
                it was loaded; this is what prevents two concurrent grants
                from overshooting capacity
        """
        pass

    @abstractmethod
    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        pass

    @abstractmethod
    async def exists(self, course_id: CourseId) -> bool:
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Course]:
        pass
