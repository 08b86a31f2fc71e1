"""Passgate CLI application using Typer.

Operator commands for running the API and provisioning what the auth
service only reads: the database schema, applications and admin flags.
"""

import asyncio
import secrets
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from passgate.domain.exceptions import AppExistsError, UserNotFoundError
from passgate.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyStorage,
    build_engine,
    build_session_maker,
    create_schema,
)
from passgate_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="passgate",
    help="Passgate - multi-application authentication service CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(name="db", help="Database management", no_args_is_help=True)
apps_app = typer.Typer(name="apps", help="Application provisioning", no_args_is_help=True)
users_app = typer.Typer(name="users", help="User administration", no_args_is_help=True)
app.add_typer(db_app)
app.add_typer(apps_app)
app.add_typer(users_app)


def _run_with_storage(action: Callable[[SQLAlchemyStorage], Awaitable[T]]) -> T:
    """Run an async storage action against the configured database."""

    async def runner() -> T:
        engine = build_engine(get_settings().database_url)
        try:
            await create_schema(engine)
            return await action(SQLAlchemyStorage(build_session_maker(engine)))
        finally:
            await engine.dispose()

    return asyncio.run(runner())


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)"),
) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "passgate.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_config=None,
    )


@db_app.command("init")
def init_db() -> None:
    """Create database tables."""

    async def noop(_: SQLAlchemyStorage) -> None:
        return None

    _run_with_storage(noop)
    console.print("[bold green]Database schema is up to date.[/bold green]")


@apps_app.command("add")
def add_app(
    name: str = typer.Argument(..., help="Unique application name"),
    secret: Optional[str] = typer.Option(
        None,
        help="Signing secret; generated when omitted",
    ),
    app_id: Optional[int] = typer.Option(None, "--id", min=1, help="Explicit application id"),
) -> None:
    """Provision an application and print its signing secret."""
    signing_secret = secret or secrets.token_urlsafe(32)

    try:
        created = _run_with_storage(
            lambda storage: storage.save_app(name, signing_secret, app_id=app_id),
        )
    except AppExistsError as e:
        console.print(f"[red]Application already exists:[/red] {name}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Created application[/green] {created.name} (id: {created.id})")
    if secret is None:
        console.print(f"[cyan]SECRET[/cyan]={signing_secret}")
        console.print("[yellow]Store this secret now; it is not shown again.[/yellow]")


@apps_app.command("list")
def list_apps() -> None:
    """List provisioned applications."""
    apps = _run_with_storage(lambda storage: storage.list_apps())

    table = Table(title="Applications")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    for item in apps:
        table.add_row(str(item.id), item.name)
    console.print(table)


@users_app.command("grant-admin")
def grant_admin(
    email: str = typer.Argument(..., help="Email of the user"),
    revoke: bool = typer.Option(False, "--revoke", help="Clear the flag instead"),
) -> None:
    """Set or clear a user's admin flag."""
    try:
        _run_with_storage(lambda storage: storage.set_admin(email, not revoke))
    except UserNotFoundError as e:
        console.print(f"[red]User not found:[/red] {email}")
        raise typer.Exit(code=1) from e

    state = "revoked" if revoke else "granted"
    console.print(f"[green]Admin {state}[/green] for {email}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
