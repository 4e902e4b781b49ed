"""CLI commands for inventory inspection."""

from __future__ import annotations

import click

from purposefood.application.show_inventory import ShowInventoryHandler
from purposefood.domain.exceptions import DomainException
from purposefood.domain.model.delivery import format_hours
from purposefood.infrastructure.bootstrap import product_repository
from purposefood.infrastructure.config import Settings


@click.command("show")
@click.option("--attention", is_flag=True, help="Only products at or below minimum.")
@click.pass_obj
def inventory_show(settings: Settings, attention: bool) -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(product_repo=product_repository(settings))
    try:
        lines = handler.handle(only_attention=attention)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Product':<24} {'Stock':>7} {'Min':>5} {'Prep':>6}  Status")
    click.echo("-" * 60)
    for line in lines:
        click.echo(
            f"{line.product_name:<24} {line.stock:>7} {line.minimum:>5} "
            f"{format_hours(line.preparation_time):>6}  {line.status}"
        )
