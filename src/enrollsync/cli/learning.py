# SPDX-License-Identifier: Apache-2.0
"""Learning-access commands: students, courses and enrollment."""

from __future__ import annotations

from typing import Optional

import typer

from enrollsync.learning.application.commands import (
    CreateCourseCommand,
    EnrollStudentCommand,
    RegisterStudentCommand,
)

from .common import echo_fields, execute

student_app = typer.Typer(name="student", help="Learner commands", add_completion=False)
course_app = typer.Typer(name="course", help="Learning-access course commands", add_completion=False)


@student_app.command()
def register(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Student name"),
    email: str = typer.Option(..., "--email", "-e", help="Student email (unique)"),
    student_id: Optional[str] = typer.Option(None, "--id", help="Use this UUID instead of generating one"),
):
    """Register a learner."""
    student = execute(
        ctx,
        lambda app: app.register_student.handle(
            RegisterStudentCommand(name=name, email=email, student_id=student_id)
        ),
    )
    typer.echo(f"✅ Student registered: {student.id}")


@course_app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Course title (3-255 characters)"),
    max_students: int = typer.Option(100, "--max-students", "-m", help="Learner capacity (1-1000)"),
    course_id: Optional[str] = typer.Option(None, "--id", help="Use this UUID instead of generating one"),
):
    """Open a course for learning access."""
    course = execute(
        ctx,
        lambda app: app.create_learning_course.handle(
            CreateCourseCommand(title=title, max_students=max_students, course_id=course_id)
        ),
    )
    typer.echo(f"✅ Course created: {course.id}")


@course_app.command()
def enroll(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Course ID"),
    student_id: str = typer.Argument(..., help="Student ID"),
):
    """Grant a student learning access and record the administrative enrollment.

    Examples:
        enrollsync course enroll <course-id> <student-id>
    """
    access = execute(
        ctx,
        lambda app: app.enroll_student.handle(EnrollStudentCommand(course_id, student_id)),
    )
    typer.echo(f"✅ Student {access.student_id} enrolled in course {access.course_id}")
    echo_fields("", access.to_dict())
