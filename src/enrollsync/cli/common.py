# SPDX-License-Identifier: Apache-2.0
"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import typer

from enrollsync.bootstrap import Application, bootstrap
from enrollsync.config import ConfigVersionError, resolve_config
from enrollsync.domain.errors import NotFoundError
from enrollsync.domain.repositories import RepositoryError

T = TypeVar("T")

EXIT_VALIDATION = 1
EXIT_NOT_FOUND = 2
EXIT_STORAGE = 3


def get_application(ctx: typer.Context) -> Application:
    """Load configuration from the root options and bootstrap once."""
    options = ctx.obj or {}
    config = resolve_config(options.get("config_path")).merge_overrides(
        database_path=options.get("db")
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return bootstrap(config)


def execute(ctx: typer.Context, action: Callable[[Application], Awaitable[T]]) -> T:
    """Run one use case and turn domain errors into exit codes.

    Validation errors exit with 1, missing entities with 2 and storage
    failures with 3.
    """
    try:
        application = get_application(ctx)
        return asyncio.run(action(application))
    except NotFoundError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(EXIT_NOT_FOUND) from None
    except (ValueError, ConfigVersionError, FileNotFoundError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(EXIT_VALIDATION) from None
    except RepositoryError as e:
        typer.echo(f"❌ Storage error: {e}")
        raise typer.Exit(EXIT_STORAGE) from None


def echo_fields(title: str, fields: dict) -> None:
    typer.echo(title)
    width = max((len(key) for key in fields), default=0)
    for key, value in fields.items():
        typer.echo(f"  {key:<{width}}  {value if value is not None else '-'}")
