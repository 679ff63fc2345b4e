# SPDX-License-Identifier: Apache-2.0
"""Tenant management commands."""

from __future__ import annotations

from typing import Optional

import typer

from enrollsync.tenancy.application.commands import (
    ChangeTenantStatusCommand,
    CreateTenantCommand,
)
from enrollsync.tenancy.application.queries import GetTenantQuery, ListTenantsQuery

from .common import echo_fields, execute

tenant_app = typer.Typer(name="tenant", help="Tenant management commands", add_completion=False)


@tenant_app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Organization name (3-255 characters)"),
    slug: str = typer.Option(..., "--slug", "-s", help="Unique URL handle, e.g. acme-university"),
    email: str = typer.Option(..., "--email", "-e", help="Contact email address"),
    phone: Optional[str] = typer.Option(None, "--phone", help="Contact phone number"),
):
    """Register a new tenant (starts in pending status).

    Examples:
        enrollsync tenant create --name "Acme University" --slug acme-university --email admin@acme.edu
    """
    tenant = execute(
        ctx,
        lambda app: app.create_tenant.handle(
            CreateTenantCommand(name=name, slug=slug, contact_email=email, contact_phone=phone)
        ),
    )
    typer.echo(f"✅ Tenant created: {tenant.id}")
    echo_fields("", tenant.to_dict())


@tenant_app.command()
def get(
    ctx: typer.Context,
    tenant_id: str = typer.Argument(..., help="Tenant ID"),
):
    """Show one tenant."""
    tenant = execute(ctx, lambda app: app.get_tenant.handle(GetTenantQuery(tenant_id)))
    echo_fields(f"Tenant {tenant.id}", tenant.to_dict())


@tenant_app.command(name="list")
def list_tenants(
    ctx: typer.Context,
    limit: int = typer.Option(20, "--limit", "-l", help="Number of tenants to show"),
    offset: int = typer.Option(0, "--offset", help="Number of tenants to skip"),
):
    """List tenants, newest first."""
    page = execute(ctx, lambda app: app.list_tenants.handle(ListTenantsQuery(limit, offset)))

    if not page.data:
        typer.echo("📭 No tenants found")
        return

    typer.echo(f"\n📊 Tenants ({len(page.data)} of {page.total})")
    typer.echo("=" * 100)
    typer.echo(f"{'ID':<38} {'Slug':<24} {'Status':<10} {'Created':<20}")
    typer.echo("-" * 100)
    for tenant in page.data:
        typer.echo(f"{tenant.id:<38} {tenant.slug:<24} {tenant.status:<10} {tenant.created_at:<20}")
    typer.echo("=" * 100)


def _change_status(ctx: typer.Context, tenant_id: str, action: str) -> None:
    tenant = execute(
        ctx,
        lambda app: app.change_tenant_status.handle(ChangeTenantStatusCommand(tenant_id, action)),
    )
    typer.echo(f"✅ Tenant {tenant.id} is now {tenant.status}")


@tenant_app.command()
def activate(ctx: typer.Context, tenant_id: str = typer.Argument(..., help="Tenant ID")):
    """Activate a tenant."""
    _change_status(ctx, tenant_id, "activate")


@tenant_app.command()
def suspend(ctx: typer.Context, tenant_id: str = typer.Argument(..., help="Tenant ID")):
    """Suspend a tenant."""
    _change_status(ctx, tenant_id, "suspend")


@tenant_app.command()
def deactivate(ctx: typer.Context, tenant_id: str = typer.Argument(..., help="Tenant ID")):
    """Deactivate a tenant, whatever its current status."""
    _change_status(ctx, tenant_id, "deactivate")
