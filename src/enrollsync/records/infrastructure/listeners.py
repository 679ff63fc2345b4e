# SPDX-License-Identifier: Apache-2.0
"""Cross-context listener: learning access -> administrative record."""

from __future__ import annotations

import logging

from enrollsync.learning.domain.events import StudentEnrolled
from enrollsync.metrics import SAGA_FAILURES

from ..application.commands import EnrollStudentCommand
from ..application.services import EnrollStudentHandler

logger = logging.getLogger(__name__)


class StudentEnrolledListener:
    """Translate ``StudentEnrolled`` into an administrative enroll command.

    Runs inside the learning handler's publish call. When the
    administrative step fails the learning grant is already stored; the
    failure is logged, counted and re-raised unchanged so the original
    request fails.
    """

    def __init__(self, enroll_handler: EnrollStudentHandler):
        self._enroll_handler = enroll_handler

    async def __call__(self, event: StudentEnrolled) -> None:
        payload = event.to_dict()
        logger.info(
            f"Processing StudentEnrolled event: course={payload['course_id']} "
            f"student={payload['student_id']}"
        )

        command = EnrollStudentCommand(
            course_id=payload["course_id"],
            student_id=payload["student_id"],
            student_name=payload["student_name"],
            student_email=payload["student_email"],
            enrolled_at=payload["enrolled_at"],
        )

        try:
            await self._enroll_handler.handle(command)
        except Exception as e:
            SAGA_FAILURES.labels(error=type(e).__name__).inc()
            logger.error(
                f"Failed to record enrollment for student {payload['student_id']} "
                f"in course {payload['course_id']}; learning access was already granted: {e}"
            )
            raise

        logger.info(
            f"StudentEnrolled event processed: course={payload['course_id']} "
            f"student={payload['student_id']}"
        )
