"""CLI commands for seeding accounts in the local backend."""

from __future__ import annotations

import click

from domo.domain.exceptions import DomainException
from domo.domain.model.principal import Role
from domo.infrastructure import bootstrap


@click.command("add")
@click.option("--email", required=True, help="Account e-mail.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option(
    "--role", required=True,
    type=click.Choice([Role.ADMIN.value, Role.CASHIER.value]),
    help="What the account may do.",
)
def user_add(email: str, password: str, role: str) -> None:
    """Create an account and assign its role."""
    auth = bootstrap.auth_gateway()

    try:
        user_id = auth.create_user(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    bootstrap.user_role_repository().set_role(user_id, Role(role))
    click.echo(f"User {email} added as {role}.")
