# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the learning-access aggregates and value objects."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from enrollsync.domain.errors import (
    CapacityExceededError,
    DomainValidationError,
    DuplicateEnrollmentError,
)
from enrollsync.learning.domain.entities import Course, Student
from enrollsync.learning.domain.events import StudentEnrolled
from enrollsync.learning.domain.value_objects import (
    CourseId,
    EnrollmentDate,
    LearnerAccess,
    StudentId,
)


def make_student(name: str = "Ada Lovelace", email: str = "ada@example.com") -> Student:
    return Student.create(StudentId.generate(), name, email)


class TestIdentifiers:
    def test_ids_are_canonicalized(self):
        raw = "A1B2C3D4-0000-4000-8000-00000000000F"

        assert str(StudentId(raw)) == raw.lower()
        assert StudentId(raw) == StudentId(raw.lower())

    def test_invalid_uuid_names_the_identifier_type(self):
        with pytest.raises(DomainValidationError, match="Invalid UUID format for CourseId"):
            CourseId("not-a-uuid")

    def test_ids_of_different_types_are_not_equal(self):
        raw = str(StudentId.generate())

        assert StudentId(raw) != CourseId(raw)


class TestEnrollmentDate:
    def test_naive_datetime_is_taken_as_utc(self):
        date = EnrollmentDate(datetime(2024, 1, 15, 10, 30))

        assert date.value.tzinfo is timezone.utc

    def test_offset_datetime_is_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        date = EnrollmentDate(datetime(2024, 1, 15, 5, 30, tzinfo=eastern))

        assert date.value == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert date.value.utcoffset() == timedelta(0)
        assert date.format() == "2024-01-15 10:30:00"

    def test_future_date_rejected(self):
        with pytest.raises(DomainValidationError, match="cannot be in the future"):
            EnrollmentDate(datetime.now(timezone.utc) + timedelta(days=1))

    def test_from_string_accepts_space_separated_format(self):
        date = EnrollmentDate.from_string("2024-01-15 10:30:00")

        assert date.format() == "2024-01-15 10:30:00"

    def test_from_string_rejects_garbage(self):
        with pytest.raises(DomainValidationError, match="Invalid enrollment date"):
            EnrollmentDate.from_string("yesterday")

    def test_ordering_helpers(self):
        earlier = EnrollmentDate(datetime(2024, 1, 1, tzinfo=timezone.utc))
        later = EnrollmentDate(datetime(2024, 6, 1, tzinfo=timezone.utc))

        assert earlier.is_before(later)
        assert later.is_after(earlier)
        assert not earlier.is_after(later)


class TestLearnerAccess:
    def test_dict_round_trip_preserves_snapshot(self):
        access = LearnerAccess(
            student_id=StudentId.generate(),
            student_name="Ada Lovelace",
            student_email="ada@example.com",
            enrolled_at=EnrollmentDate(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
        )

        assert LearnerAccess.from_dict(access.to_dict()) == access


class TestStudent:
    def test_email_is_trimmed(self):
        student = make_student(email="  ada@example.com ")

        assert student.email == "ada@example.com"

    @pytest.mark.parametrize(
        "name, email, message",
        [
            ("A", "ada@example.com", "Student name must be at least 2 characters long"),
            ("  ", "ada@example.com", "Student name cannot be empty"),
            ("Ada", "", "Student email cannot be empty"),
            ("Ada", "ada.example.com", "Invalid email format"),
        ],
    )
    def test_invalid_student_rejected(self, name, email, message):
        with pytest.raises(DomainValidationError, match=message):
            make_student(name=name, email=email)

    def test_update_info(self):
        student = make_student()

        student.update_info("Ada King", "ada.king@example.com")

        assert student.name == "Ada King"
        assert student.email == "ada.king@example.com"


class TestCourseCapacity:
    @pytest.mark.parametrize(
        "max_students, message",
        [
            (0, "Max students must be greater than 0"),
            (-5, "Max students must be greater than 0"),
            (1001, "Max students cannot exceed 1000"),
        ],
    )
    def test_invalid_max_students_rejected(self, max_students, message):
        with pytest.raises(DomainValidationError, match=message):
            Course.create(CourseId.generate(), "Algebra", max_students)

    def test_boundary_values_accepted(self):
        assert Course.create(CourseId.generate(), "Algebra", 1).max_students == 1
        assert Course.create(CourseId.generate(), "Algebra", 1000).max_students == 1000

    def test_short_title_rejected(self):
        with pytest.raises(DomainValidationError, match="Course title must be at least 3"):
            Course.create(CourseId.generate(), "AB")


class TestGrantLearningAccess:
    def test_grant_records_access_and_event(self):
        course = Course.create(CourseId.generate(), "Algebra", 2)
        student = make_student()

        access = course.grant_learning_access(student)

        assert course.has_learning_access(student.id)
        assert course.learner_count() == 1
        assert course.available_learning_slots() == 1
        assert course.enrollment_date_for(student.id) == access.enrolled_at
        assert access.student_name == "Ada Lovelace"

        events = course.release_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, StudentEnrolled)
        assert event.course_id == str(course.id)
        assert event.student_id == str(student.id)
        assert event.student_email == "ada@example.com"
        assert event.enrolled_at == access.enrolled_at.value
        assert event.aggregate_id == str(course.id)

    def test_explicit_enrollment_date_is_used(self):
        course = Course.create(CourseId.generate(), "Algebra")
        date = EnrollmentDate(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))

        access = course.grant_learning_access(make_student(), enrolled_at=date)

        assert access.enrolled_at == date

    def test_full_course_rejects_new_learner(self):
        course = Course.create(CourseId.generate(), "Algebra", 1)
        course.grant_learning_access(make_student())
        course.release_events()

        with pytest.raises(CapacityExceededError, match="max: 1"):
            course.grant_learning_access(make_student("Grace Hopper", "grace@example.com"))

        assert course.learner_count() == 1
        assert course.is_at_capacity()
        assert not course.has_pending_events()

    def test_duplicate_checked_before_capacity(self):
        course = Course.create(CourseId.generate(), "Algebra", 1)
        student = make_student()
        course.grant_learning_access(student)
        course.release_events()

        with pytest.raises(DuplicateEnrollmentError, match="already has learning access"):
            course.grant_learning_access(student)

        assert course.learner_count() == 1
        assert course.release_events() == []

    def test_snapshot_is_not_affected_by_later_profile_changes(self):
        course = Course.create(CourseId.generate(), "Algebra")
        student = make_student()
        course.grant_learning_access(student)

        student.update_info("Ada King", "ada.king@example.com")

        snapshot = course.students_with_access()[0]
        assert snapshot.student_name == "Ada Lovelace"
        assert snapshot.student_email == "ada@example.com"

    def test_enrollment_date_for_unknown_student_is_none(self):
        course = Course.create(CourseId.generate(), "Algebra")

        assert course.enrollment_date_for(StudentId.generate()) is None
