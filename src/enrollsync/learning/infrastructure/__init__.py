# SPDX-License-Identifier: Apache-2.0
"""Learning-access infrastructure."""

from .repositories import SqliteLearningCourseRepository, SqliteStudentRepository

__all__ = ["SqliteLearningCourseRepository", "SqliteStudentRepository"]
