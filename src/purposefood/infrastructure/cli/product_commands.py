"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from purposefood.application.add_product import AddProductHandler
from purposefood.application.update_product import UpdateProductHandler
from purposefood.domain.exceptions import DomainException
from purposefood.infrastructure.bootstrap import (
    notification_repository,
    product_repository,
)
from purposefood.infrastructure.config import Settings


def _parse_assignments(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse ('stock_minimum=5', 'name=Bolo') into a field dict."""
    fields: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid assignment '{pair}'. Expected 'field=value'."
            )
        name, value = pair.split("=", 1)
        fields[name.strip()] = value.strip()
    return fields


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default="0.00", show_default=True, help="Price (e.g. 15.00).")
@click.option("--category", default="", help="Catalog category.")
@click.option("--stock", "stock_current", default=0, type=int, help="Units on hand.")
@click.option("--min-stock", "stock_minimum", default=0, type=int, help="Low-stock threshold.")
@click.option("--prep-time", "preparation_time", default=0.0, type=float,
              help="Hours needed to produce one unit.")
@click.option("--inactive", is_flag=True, help="Create the product as inactive.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    category: str,
    stock_current: int,
    stock_minimum: int,
    preparation_time: float,
    inactive: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            name,
            price=price,
            category=category,
            stock_current=stock_current,
            stock_minimum=stock_minimum,
            preparation_time=preparation_time,
            is_active=not inactive,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        products = product_repository(settings).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7} {'Active':>7}")
    click.echo("-" * 58)
    for p in products:
        active = "yes" if p.is_active else "no"
        click.echo(
            f"{p.id:<6} {p.name:<24} {str(p.price):>10} {p.stock_current:>7} {active:>7}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--set", "assignments", multiple=True, required=True,
              help="Field assignment, e.g. --set stock_minimum=5 (repeatable).")
@click.pass_obj
def product_update(settings: Settings, product_id: str, assignments: tuple[str, ...]) -> None:
    """Update product fields and notify the back office."""
    fields = _parse_assignments(assignments)
    handler = UpdateProductHandler(
        product_repo=product_repository(settings),
        notification_repo=notification_repository(settings),
    )

    try:
        product = handler.handle(product_id=product_id, fields=fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated: {', '.join(fields)}")
