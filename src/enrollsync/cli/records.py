# SPDX-License-Identifier: Apache-2.0
"""Administrative-records commands."""

from __future__ import annotations

from typing import Optional

import typer

from enrollsync.records.application.commands import (
    ChangeEnrollmentStatusCommand,
    CreateCourseCommand,
)
from enrollsync.records.application.queries import GetCourseStatisticsQuery

from .common import echo_fields, execute

records_app = typer.Typer(
    name="records", help="Administrative enrollment record commands", add_completion=False
)


@records_app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Course title (3-255 characters)"),
    description: str = typer.Option("", "--description", "-d", help="Course description"),
    max_capacity: int = typer.Option(100, "--max-capacity", "-m", help="Active enrollment capacity (1-1000)"),
    instructor_id: Optional[str] = typer.Option(None, "--instructor", help="Instructor identifier"),
    course_id: Optional[str] = typer.Option(None, "--id", help="Use this UUID instead of generating one"),
):
    """Register a course in the administrative system."""
    course = execute(
        ctx,
        lambda app: app.create_admin_course.handle(
            CreateCourseCommand(
                title=title,
                description=description,
                max_capacity=max_capacity,
                instructor_id=instructor_id,
                course_id=course_id,
            )
        ),
    )
    typer.echo(f"✅ Administrative course created: {course.id}")


@records_app.command()
def stats(ctx: typer.Context, course_id: str = typer.Argument(..., help="Course ID")):
    """Show enrollment counts by status."""
    summary = execute(
        ctx, lambda app: app.get_course_statistics.handle(GetCourseStatisticsQuery(course_id))
    )
    label = " (placeholder)" if summary.is_placeholder else ""
    echo_fields(f"📊 {summary.title}{label}", summary.statistics)
    typer.echo(f"  available capacity: {summary.available_capacity}/{summary.max_capacity}")


def _transition(ctx: typer.Context, course_id: str, student_id: str, action: str) -> None:
    enrollment = execute(
        ctx,
        lambda app: app.change_enrollment_status.handle(
            ChangeEnrollmentStatusCommand(course_id, student_id, action)
        ),
    )
    typer.echo(f"✅ Enrollment of {enrollment.student_id} is now {enrollment.status}")


@records_app.command()
def complete(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Course ID"),
    student_id: str = typer.Argument(..., help="Student ID"),
):
    """Mark an active enrollment as completed."""
    _transition(ctx, course_id, student_id, "complete")


@records_app.command()
def drop(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Course ID"),
    student_id: str = typer.Argument(..., help="Student ID"),
):
    """Drop an active or suspended enrollment."""
    _transition(ctx, course_id, student_id, "drop")


@records_app.command()
def suspend(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Course ID"),
    student_id: str = typer.Argument(..., help="Student ID"),
):
    """Suspend an active enrollment."""
    _transition(ctx, course_id, student_id, "suspend")


@records_app.command()
def reactivate(
    ctx: typer.Context,
    course_id: str = typer.Argument(..., help="Course ID"),
    student_id: str = typer.Argument(..., help="Student ID"),
):
    """Return a suspended enrollment to active."""
    _transition(ctx, course_id, student_id, "reactivate")
