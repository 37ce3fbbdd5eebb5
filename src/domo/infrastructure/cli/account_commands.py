"""CLI commands for signing in and managing one's password."""

from __future__ import annotations

import click

from domo.application.reset_password import ResetPasswordHandler
from domo.application.set_password import SetPasswordHandler
from domo.application.sign_in import SignInHandler
from domo.domain.exceptions import DomainException
from domo.infrastructure import bootstrap


@click.command("login")
@click.option("--email", required=True, help="Account e-mail.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
def login(email: str, password: str) -> None:
    """Sign in to the store."""
    handler = SignInHandler(auth=bootstrap.auth_gateway())

    try:
        session = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {session.email}")


@click.command("logout")
def logout() -> None:
    """Sign out of the store."""
    bootstrap.auth_gateway().sign_out()
    click.echo("Signed out.")


@click.command("forget-password")
@click.option("--email", required=True, help="Account e-mail.")
def forget_password(email: str) -> None:
    """Request a password-reset e-mail."""
    handler = ResetPasswordHandler(auth=bootstrap.auth_gateway())

    try:
        message = handler.handle(email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(message)


@click.command("set-password")
@click.option("--password", prompt=True, hide_input=True, help="New password.")
@click.option(
    "--confirm-password", prompt="Confirm password", hide_input=True,
    help="New password again.",
)
def set_password(password: str, confirm_password: str) -> None:
    """Set a new password for the signed-in account."""
    handler = SetPasswordHandler(auth=bootstrap.auth_gateway())

    try:
        handler.handle(password=password, confirm_password=confirm_password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Password updated.")
