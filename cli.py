"""
CLI tool for bookstore account management.

Provides commands for creating accounts with explicit roles (for example
the first Administrator) and for listing the registered accounts.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bookstore.constants import DEFAULT_ROLES, DEFAULT_USER_ROLE
from bookstore.container import Container, build_container
from bookstore.models.user import User
from bookstore.repositories.user_repository import UserRepository

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="bookstore-cli",
    help="Bookstore CLI - Manage user accounts and roles",
    add_completion=False,
)
console = Console()


async def create_user(
    container: Container, email: str, password: str, roles: list[str]
) -> User:
    """
    Store a new user with the given roles.

    Args:
        container: Application container (database and password hasher).
        email: Email address, stored lower-cased.
        password: Clear text password, checked against the password policy.
        roles: Role names to grant; missing roles are created.

    Returns:
        The persisted user.

    Raises:
        ValueError: If the email is taken or the password breaks the policy.
    """
    errors = container.password_policy.validate(password)
    if errors:
        raise ValueError("; ".join(e.message for e in errors))

    async with container.session_factory() as session:
        repo = UserRepository(session)
        if await repo.find_by_email(email) is not None:
            raise ValueError(f"Email '{email}' is already taken.")

        user = User(
            email=email.strip().lower(),
            password_hash=await container.passwords.hash_password(password),
            roles=await repo.ensure_roles(roles),
        )
        await repo.create(user)
        await session.commit()
        return user


async def list_users(container: Container) -> list[User]:
    async with container.session_factory() as session:
        return await UserRepository(session).find_all()


async def run_and_dispose(container: Container, coro):
    """Await a CLI coroutine, then close the engine's pooled connections."""
    try:
        return await coro
    finally:
        await container.engine.dispose()


@typer_app.command(name="create-user")
def create_user_command(
    email: str = typer.Argument(..., help="Email address used to log in"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
    roles: list[str] = typer.Option(
        None,
        "--role",
        "-r",
        help=f"Roles to grant (can specify multiple: -r {' -r '.join(DEFAULT_ROLES)})",
    ),
):
    """
    Create a user account.

    Example:
        python cli.py create-user admin@example.com -r Administrator
    """
    roles = roles or [DEFAULT_USER_ROLE]
    unknown = [role for role in roles if role not in DEFAULT_ROLES]
    if unknown:
        console.print(f"[red]✗ Unknown role(s):[/red] {', '.join(unknown)}")
        raise typer.Exit(code=1)

    container = build_container()
    try:
        user = asyncio.run(
            run_and_dispose(
                container, create_user(container, email, password, roles)
            )
        )
    except ValueError as ex:
        console.print(f"[red]✗ Could not create user:[/red] {ex}")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[green]✓ Created user[/green] [cyan]{user.email}[/cyan]\n\n"
            f"Roles: {', '.join(roles)}",
            border_style="green",
            title="Success",
        )
    )


@typer_app.command(name="list-users")
def list_users_command():
    """
    Display a table of all registered users and their roles.

    Example:
        python cli.py list-users
    """
    container = build_container()
    users = asyncio.run(run_and_dispose(container, list_users(container)))

    table = Table("ID", "Email", "Roles", title="Users", show_lines=True)
    for user in users:
        table.add_row(str(user.id), user.email, ", ".join(user.role_names))

    console.print()
    console.print(table)
    console.print(f"[bold]Total:[/bold] {len(users)} user(s)")
    console.print()


if __name__ == "__main__":
    typer_app()
