"""Shared plumbing for CLI commands: navigator and guard construction."""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from domo.application import routes
from domo.application.auth_guard import AuthGuard, Navigator
from domo.application.product_form import ProductForm
from domo.infrastructure import bootstrap
from domo.infrastructure.persistence.json_auth_gateway import JsonAuthGateway

logger = logging.getLogger(__name__)

_HINTS = {
    routes.LOGIN: 'Run "domo login" to sign in.',
    routes.HOME: 'Run "domo product list" to see the catalog.',
}


class ClickNavigator(Navigator):
    """A terminal has no pages: navigating prints the matching command."""

    def __init__(self) -> None:
        self.route: str | None = None

    def push(self, route: str) -> None:
        logger.debug("Navigate to %s", route)
        self.route = route
        hint = _HINTS.get(route)
        if hint:
            click.echo(hint, err=True)


def build_guard(auth: JsonAuthGateway) -> AuthGuard:
    return AuthGuard(bootstrap.session_provider(auth), ClickNavigator())


def raise_form_errors(form: ProductForm) -> NoReturn:
    """Turn a failed form submission into a ClickException."""
    messages = []
    if form.error_message:
        messages.append(form.error_message)
    messages.extend(form.field_errors.values())
    raise click.ClickException("\n".join(messages) or "Submission failed.")
