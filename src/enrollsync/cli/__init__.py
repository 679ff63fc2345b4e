# SPDX-License-Identifier: Apache-2.0
"""EnrollSync CLI package with modular command structure."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .learning import course_app, student_app
from .records import records_app
from .tenant import tenant_app

app = typer.Typer(
    name="enrollsync",
    add_completion=False,
    help="EnrollSync commands for multi-tenant course enrollment",
)
app.add_typer(tenant_app)
app.add_typer(student_app)
app.add_typer(course_app)
app.add_typer(records_app)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file"
    ),
    db: Optional[str] = typer.Option(
        None, "--db", help="SQLite database path (overrides configuration and ENROLLSYNC_DB)"
    ),
):
    """EnrollSync commands for multi-tenant course enrollment."""
    ctx.obj = {"config_path": config, "db": db}


__all__ = ["app"]
