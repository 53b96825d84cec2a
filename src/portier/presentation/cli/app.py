"""Portier CLI application using Typer.

Provides the ``serve`` command for running the API, secret generation for
deployment configuration, and client commands that talk to a running
server while keeping the session in a local file.
"""

import asyncio
import secrets
from typing import Awaitable, Callable, NoReturn, TypeVar

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from portier.client import (
    ClientError,
    FileSessionStorage,
    PortierClient,
    SessionManager,
    UserSnapshot,
)
from portier_config.settings import get_client_settings, get_settings

T = TypeVar("T")

app = typer.Typer(
    name="portier",
    help="Portier - account registration, login and profiles",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_client() -> PortierClient:
    """Create a client bound to the configured server and session file."""
    settings = get_client_settings()
    session = SessionManager(FileSessionStorage(settings.session_file))
    session.hydrate()
    return PortierClient(
        base_url=settings.base_url,
        session=session,
        timeout=settings.timeout,
    )


def _run(action: Callable[[PortierClient], Awaitable[T]]) -> T:
    """Run one client call, printing failures inline and exiting with 1."""

    async def _main() -> T:
        async with _build_client() as client:
            return await action(client)

    try:
        return asyncio.run(_main())
    except ClientError as e:
        _fail(e)


def _fail(error: ClientError) -> NoReturn:
    console.print(f"[red]{escape(error.message)}[/red]")
    raise typer.Exit(1) from None


def _print_user(user: UserSnapshot) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Name", user.name)
    table.add_row("Email", user.email)
    table.add_row("ID", str(user.id))
    if user.created_at:
        table.add_row("Member since", user.created_at.strftime("%Y-%m-%d"))
    console.print(table)


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the Portier API server."""
    settings = get_settings()
    uvicorn.run(
        "portier.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a secure JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Portier Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secret for your [bold].env[/bold] configuration file:\n"
    )

    # 64 random bytes, url-safe encoded, for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


@app.command()
def register(
    name: str = typer.Option(..., prompt=True, help="Display name"),
    email: str = typer.Option(..., prompt=True, help="Email address"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (at least 6 characters)",
    ),
) -> None:
    """Create an account and log in."""
    user = _run(lambda client: client.register(name, email, password))
    console.print(f"[green]Welcome, {user.name}! You are now logged in.[/green]")


@app.command()
def login(
    email: str = typer.Option(..., prompt=True, help="Email address"),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and store the session locally."""
    user = _run(lambda client: client.login(email, password))
    console.print(f"[green]Logged in as {user.email}[/green]")


@app.command()
def logout() -> None:
    """Forget the stored session."""
    client = _build_client()
    if not client.session.is_authenticated:
        console.print("[dim]Not logged in.[/dim]")
        return
    try:
        client.logout()
    except ClientError as e:
        _fail(e)
    console.print("[green]Logged out.[/green]")


@app.command()
def whoami() -> None:
    """Show the user of the stored session without contacting the server."""
    session = _build_client().session
    user = session.current_user
    if user is None:
        console.print("[red]Not logged in[/red]")
        raise typer.Exit(1)
    console.print(f"{user.name} <{user.email}>")


@app.command()
def profile() -> None:
    """Fetch and show your profile from the server."""
    user = _run(lambda client: client.get_profile())
    _print_user(user)


@app.command()
def update(
    name: str | None = typer.Option(None, help="New display name"),
    email: str | None = typer.Option(None, help="New email address"),
    password: str | None = typer.Option(None, help="New password"),
) -> None:
    """Update your profile. Only the given options are changed."""
    if name is None and email is None and password is None:
        console.print(
            "[yellow]Nothing to update. Pass --name, --email or --password.[/yellow]"
        )
        raise typer.Exit(1)

    user = _run(
        lambda client: client.update_profile(name=name, email=email, password=password)
    )
    console.print("[green]Profile updated successfully![/green]")
    _print_user(user)


@app.command()
def users() -> None:
    """List all registered users."""
    all_users = _run(lambda client: client.list_users())

    table = Table(title="Users")
    table.add_column("Name")
    table.add_column("Email", style="cyan")
    table.add_column("Joined")
    for user in all_users:
        joined = user.created_at.strftime("%Y-%m-%d") if user.created_at else ""
        table.add_row(user.name, user.email, joined)
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
