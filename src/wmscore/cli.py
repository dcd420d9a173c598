"""Command-line interface for wmscore.

This module provides commands to initialize the database and to manage
roles from a shell.
"""

import asyncio
from typing import Any, Awaitable, Callable, NoReturn

import click

from wmscore.core.config import get_settings
from wmscore.core.logging import configure_logging, get_logger
from wmscore.domain.entities import Role
from wmscore.domain.services import RoleService, ServiceError


def _run_with_db(operation: Callable[[Any], Awaitable[Any]]) -> Any:
    """Run an async operation against a fresh database manager.

    The engine is disposed afterwards. Service errors are printed to
    stderr and end the process with exit code 1.
    """
    from wmscore.infrastructure.persistence.database import DatabaseManager

    settings = get_settings()
    configure_logging(settings)
    db = DatabaseManager(settings)

    async def run() -> Any:
        try:
            return await operation(db)
        finally:
            await db.disconnect()

    try:
        return asyncio.run(run())
    except ServiceError as e:
        get_logger(__name__).error("Command failed", error=e.message)
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)


def _format_role(role: Role) -> str:
    return f"{role.id:>5}  {role.name:<24}  {role.description or ''}".rstrip()


@click.group()
@click.version_option(version="0.1.0", prog_name="wmscore")
def cli() -> None:
    """wmscore - Core services of a warehouse management system."""


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Create the database tables and seed the default roles."""
    from wmscore.infrastructure.persistence.database import init_database

    settings = get_settings()

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Pass --force to initialize anyway.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    seeded = _run_with_db(init_database)
    click.echo("Database initialized successfully.")
    for name in seeded:
        click.echo(f"  Seeded role: {name}")


@cli.command()
def info() -> None:
    """Display wmscore configuration."""
    settings = get_settings()

    click.echo(f"""
wmscore v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Roles:
  Defaults:     {', '.join(settings.default_roles)}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


@cli.group()
def roles() -> None:
    """Manage roles."""


@roles.command("list")
def list_roles() -> None:
    """List all roles."""

    async def fetch(db: Any) -> list[Role]:
        async with db.session() as session:
            return await RoleService(session).find_all()

    found = _run_with_db(fetch)
    if not found:
        click.echo("No roles found.")
        return
    for role in found:
        click.echo(_format_role(role))


@roles.command("show")
@click.argument("name")
def show_role(name: str) -> None:
    """Show the role called NAME."""

    async def fetch(db: Any) -> Role | None:
        async with db.session() as session:
            return await RoleService(session).find_by_name(name)

    role = _run_with_db(fetch)
    if role is None:
        click.echo(f"Error: Role '{name}' not found", err=True)
        raise SystemExit(1)
    click.echo(_format_role(role))


@roles.command("save")
@click.argument("name")
@click.option("--description", type=str, default=None, help="Role description")
@click.option(
    "--id",
    "role_id",
    type=int,
    default=None,
    help="ID of a persisted role to update (omit to create)",
)
def save_role(name: str, description: str | None, role_id: int | None) -> None:
    """Create the role NAME, or update it when --id is given."""
    try:
        role = Role(name=name, description=description, id=role_id)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    async def save(db: Any) -> Role:
        async with db.session() as session:
            return await RoleService(session).save(role)

    saved = _run_with_db(save)
    click.echo(f"Role saved: {_format_role(saved)}")


@roles.command("remove")
@click.argument("role_id", type=int)
def remove_role(role_id: int) -> None:
    """Remove the role with ROLE_ID. Unknown IDs are ignored."""

    async def remove(db: Any) -> None:
        async with db.session() as session:
            await RoleService(session).remove(role_id)

    _run_with_db(remove)
    click.echo(f"Role {role_id} removed.")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
