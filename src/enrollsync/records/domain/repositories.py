# SPDX-License-Identifier: Apache-2.0
"""Repository interface for administrative courses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Course
from .value_objects import CourseId


class IAdminCourseRepository(ABC):
    """Persistence contract for administrative courses and their enrollments."""

    @abstractmethod
    async def save(self, course: Course) -> None:
        """Persist the course row and upsert every enrollment it owns.

        Raises:
            ConcurrencyError: If the course was saved by someone else since
                it was loaded
            RepositoryError: If the save operation fails
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

    @abstractmethod
    async def delete(self, course_id: CourseId) -> bool:
        """Delete a course and all of its enrollment records.

        Returns:
            True if the course existed
        """
        pass
