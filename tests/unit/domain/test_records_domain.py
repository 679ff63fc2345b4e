# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the administrative-records aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from enrollsync.domain.errors import (
    CapacityExceededError,
    DomainValidationError,
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
    InvalidStateTransitionError,
    NotFoundError,
)
from enrollsync.records.domain.entities import Course, Enrollment
from enrollsync.records.domain.value_objects import CourseId, EnrollmentStatus, StudentId

ENROLLED_AT = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_course(max_capacity: int = 3) -> Course:
    return Course.create(CourseId.generate(), "Algebra I", "Intro course", max_capacity)


def enroll(course: Course, name: str = "Ada Lovelace") -> StudentId:
    student_id = StudentId.generate()
    course.record_enrollment(student_id, name, "ada@example.com", ENROLLED_AT)
    return student_id


class TestEnrollmentStatus:
    def test_from_string(self):
        assert EnrollmentStatus.from_string("Suspended") is EnrollmentStatus.SUSPENDED

    def test_unknown_status_rejected(self):
        with pytest.raises(DomainValidationError, match="Invalid enrollment status: paused"):
            EnrollmentStatus.from_string("paused")

    def test_only_active_can_attend(self):
        assert EnrollmentStatus.ACTIVE.can_attend_classes()
        assert not EnrollmentStatus.SUSPENDED.can_attend_classes()


class TestEnrollmentTransitions:
    def _enrollment(self) -> Enrollment:
        return Enrollment.create(
            StudentId.generate(), CourseId.generate(), "Ada", "ada@example.com", ENROLLED_AT
        )

    def test_new_enrollment_is_active(self):
        enrollment = self._enrollment()

        assert enrollment.status is EnrollmentStatus.ACTIVE
        assert enrollment.completed_at is None
        assert enrollment.dropped_at is None

    def test_complete_sets_timestamp(self):
        enrollment = self._enrollment()

        enrollment.complete()

        assert enrollment.status is EnrollmentStatus.COMPLETED
        assert enrollment.completed_at is not None

    def test_completed_enrollment_cannot_be_dropped(self):
        enrollment = self._enrollment()
        enrollment.complete()

        with pytest.raises(InvalidStateTransitionError, match="Cannot drop a completed enrollment"):
            enrollment.drop()

    def test_drop_twice_fails(self):
        enrollment = self._enrollment()
        enrollment.drop()

        with pytest.raises(InvalidStateTransitionError, match="already dropped"):
            enrollment.drop()
        assert enrollment.dropped_at is not None

    def test_suspended_enrollment_can_be_dropped(self):
        enrollment = self._enrollment()
        enrollment.suspend()

        enrollment.drop()

        assert enrollment.status is EnrollmentStatus.DROPPED

    def test_suspend_then_reactivate(self):
        enrollment = self._enrollment()
        enrollment.suspend()

        enrollment.reactivate()

        assert enrollment.status is EnrollmentStatus.ACTIVE

    @pytest.mark.parametrize(
        "setup, action, message",
        [
            ("complete", "complete", "Only active enrollments can be completed"),
            ("suspend", "complete", "Only active enrollments can be completed"),
            ("suspend", "suspend", "Only active enrollments can be suspended"),
            (None, "reactivate", "Only suspended enrollments can be reactivated"),
            ("drop", "reactivate", "Only suspended enrollments can be reactivated"),
        ],
    )
    def test_illegal_transitions(self, setup, action, message):
        enrollment = self._enrollment()
        if setup:
            getattr(enrollment, setup)()
        status_before = enrollment.status

        with pytest.raises(InvalidStateTransitionError, match=message):
            getattr(enrollment, action)()

        assert enrollment.status is status_before


class TestRecordEnrollment:
    def test_record_creates_active_enrollment(self):
        course = make_course()

        student_id = enroll(course)

        record = course.get_enrollment_record(student_id)
        assert record is not None
        assert record.status is EnrollmentStatus.ACTIVE
        assert record.course_id == course.id
        assert record.enrolled_at == ENROLLED_AT

    def test_duplicate_record_rejected_even_when_dropped(self):
        course = make_course()
        student_id = enroll(course)
        course.drop_enrollment(student_id)

        with pytest.raises(DuplicateEnrollmentError, match="already exists"):
            course.record_enrollment(student_id, "Ada", "ada@example.com", ENROLLED_AT)

    def test_capacity_counts_only_active_records(self):
        course = make_course(max_capacity=1)
        first = enroll(course)

        with pytest.raises(CapacityExceededError, match="max: 1"):
            enroll(course)

        course.complete_enrollment(first)
        second = enroll(course)

        assert course.has_enrollment_record(second)
        assert course.count_active_enrollments() == 1

    def test_duplicate_checked_before_capacity(self):
        course = make_course(max_capacity=1)
        student_id = enroll(course)

        with pytest.raises(DuplicateEnrollmentError):
            course.record_enrollment(student_id, "Ada", "ada@example.com", ENROLLED_AT)

    @pytest.mark.parametrize(
        "capacity, message",
        [(0, "Max capacity must be greater than 0"), (1001, "Max capacity cannot exceed 1000")],
    )
    def test_invalid_capacity_rejected(self, capacity, message):
        with pytest.raises(DomainValidationError, match=message):
            make_course(capacity)

    def test_capacity_can_change_down_to_active_count(self):
        course = make_course(max_capacity=3)
        enroll(course)
        enroll(course)

        course.change_max_capacity(2)

        assert course.max_capacity == 2
        assert course.is_at_max_capacity()
        with pytest.raises(CapacityExceededError, match="below the 2 active enrollments"):
            course.change_max_capacity(1)
        with pytest.raises(DomainValidationError, match="cannot exceed 1000"):
            course.change_max_capacity(1001)
        assert course.max_capacity == 2


class TestCourseTransitions:
    def test_unknown_student_raises_not_found(self):
        course = make_course()
        missing = StudentId.generate()

        with pytest.raises(EnrollmentNotFoundError) as exc_info:
            course.complete_enrollment(missing)

        assert isinstance(exc_info.value, NotFoundError)
        assert str(missing) in str(exc_info.value)
        assert str(course.id) in str(exc_info.value)

    def test_reactivate_respects_capacity(self):
        course = make_course(max_capacity=1)
        first = enroll(course)
        course.suspend_enrollment(first)
        enroll(course)

        with pytest.raises(CapacityExceededError, match="Cannot reactivate"):
            course.reactivate_enrollment(first)

        assert course.get_enrollment_record(first).status is EnrollmentStatus.SUSPENDED

    def test_reactivate_non_suspended_reports_transition_error(self):
        course = make_course(max_capacity=1)
        student_id = enroll(course)

        with pytest.raises(InvalidStateTransitionError):
            course.reactivate_enrollment(student_id)


class TestStatistics:
    def test_enrollment_statistics(self):
        course = make_course(max_capacity=5)
        active = enroll(course)
        completed = enroll(course)
        dropped = enroll(course)
        suspended = enroll(course)
        course.complete_enrollment(completed)
        course.drop_enrollment(dropped)
        course.suspend_enrollment(suspended)

        assert course.enrollment_statistics() == {
            "active": 1,
            "completed": 1,
            "dropped": 1,
            "suspended": 1,
            "total": 4,
        }
        assert course.available_capacity() == 4
        assert [e.student_id for e in course.active_enrollments()] == [active]
        assert [e.student_id for e in course.completed_enrollments()] == [completed]
        assert [e.student_id for e in course.dropped_enrollments()] == [dropped]

    def test_empty_course_statistics(self):
        course = make_course()

        assert course.total_enrollment_count() == 0
        assert course.available_capacity() == 3
        assert not course.is_at_max_capacity()


class TestPlaceholder:
    def test_placeholder_defaults(self):
        course = Course.placeholder(CourseId.generate())

        assert course.title == "Course Placeholder"
        assert course.description == "Course created from enrollment event"
        assert course.max_capacity == 100
        assert course.is_placeholder

    def test_update_info_turns_placeholder_into_real_course(self):
        course = Course.placeholder(CourseId.generate())

        course.update_info("Algebra I", "Intro course", "instructor-1")

        assert not course.is_placeholder
        assert course.instructor_id == "instructor-1"
