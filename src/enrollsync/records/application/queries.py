# SPDX-License-Identifier: Apache-2.0
"""Administrative-records application queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetCourseStatisticsQuery:
    """Query for the enrollment summary of one course."""

    course_id: str
