"""CLI command for the audit log (administrators only)."""

from __future__ import annotations

import click

from domo.application.show_audit_logs import ShowAuditLogsHandler
from domo.domain.exceptions import DomainException
from domo.infrastructure import bootstrap
from domo.infrastructure.cli.context import build_guard


@click.command("audit-logs")
def audit_logs() -> None:
    """Show every product change, newest first."""
    auth = bootstrap.auth_gateway()
    handler = ShowAuditLogsHandler(bootstrap.audit_log_repository(), build_guard(auth))

    try:
        entries = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No audit logs found.")
        return

    click.echo(f"{'Datetime':<26} {'User':<24} {'Operation':<10} Data")
    click.echo("-" * 80)
    for e in entries:
        click.echo(f"{e.datetime:<26} {e.user:<24} {e.operation:<10} {e.data}")
