# SPDX-License-Identifier: Apache-2.0
"""Administrative-records infrastructure."""

from .listeners import StudentEnrolledListener
from .repositories import SqliteAdminCourseRepository

__all__ = ["SqliteAdminCourseRepository", "StudentEnrolledListener"]
