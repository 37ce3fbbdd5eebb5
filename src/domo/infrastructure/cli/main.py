import logging

import click

from domo.infrastructure.cli.account_commands import (
    forget_password,
    login,
    logout,
    set_password,
)
from domo.infrastructure.cli.audit_commands import audit_logs
from domo.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
)
from domo.infrastructure.cli.user_commands import user_add


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Domo store: product stock management."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage accounts in the local backend."""


# Register subcommands
cli.add_command(login)
cli.add_command(logout)
cli.add_command(forget_password)
cli.add_command(set_password)
cli.add_command(audit_logs)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
user.add_command(user_add)
