"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from domo.application.product_list import ProductListView
from domo.domain.exceptions import DomainException
from domo.infrastructure import bootstrap
from domo.infrastructure.cli.context import build_guard, raise_form_errors


def _view() -> ProductListView:
    auth = bootstrap.auth_gateway()
    return ProductListView(bootstrap.product_repository(auth), build_guard(auth))


@click.command("list")
def product_list() -> None:
    """List all products, newest first."""
    view = _view()

    try:
        products = view.refresh()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Qty':>6} {'Price':>10}")
    click.echo("-" * 73)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.quantity:>6} {str(p.price):>10}")


@click.command("add")
@click.option("--name", required=True, help="Product name (must be unique).")
@click.option("--price", default="0", show_default=True, help="Price (e.g. 15.00).")
@click.option("--quantity", default="0", show_default=True, help="Initial quantity.")
def product_add(name: str, price: str, quantity: str) -> None:
    """Create a product (administrators only)."""
    view = _view()

    try:
        form = view.open_create_form()
        form.set_field("name", name)
        form.set_field("price", price)
        form.set_field("quantity", quantity)
        product = view.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise_form_errors(form)
    click.echo(f"Product '{product.name}' created: {product.quantity} at {product.price}")


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name (administrators only).")
@click.option("--price", default=None, help="New price (administrators only).")
@click.option("--quantity", default=None, help="New quantity.")
@click.option("--decrement", default=0, type=click.IntRange(min=0), help="Press '-' this many times.")
@click.option("--increment", default=0, type=click.IntRange(min=0), help="Press '+' this many times.")
def product_edit(
    product_id: str,
    name: str | None,
    price: str | None,
    quantity: str | None,
    decrement: int,
    increment: int,
) -> None:
    """Edit a product. Cashiers may only lower the quantity."""
    view = _view()

    try:
        view.refresh()
        form = view.open_edit_form(product_id)
        if name is not None:
            form.set_field("name", name)
        if price is not None:
            form.set_field("price", price)
        if quantity is not None:
            form.set_field("quantity", quantity)
        for _ in range(decrement):
            form.decrement()
        for _ in range(increment):
            form.increment()
        label = form.delta_label
        product = view.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise_form_errors(form)
    suffix = f" {label}" if label else ""
    click.echo(
        f"Product '{product.name}' saved: quantity {product.quantity}{suffix}, price {product.price}"
    )


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product?")
def product_delete(product_id: str) -> None:
    """Delete a product (administrators only)."""
    view = _view()

    try:
        view.delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
