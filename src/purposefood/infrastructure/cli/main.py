from pathlib import Path

import click

from purposefood.infrastructure.cli.inventory_commands import inventory_show
from purposefood.infrastructure.cli.notification_commands import (
    notification_list,
    notification_read,
)
from purposefood.infrastructure.cli.order_commands import order_apply, order_check
from purposefood.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from purposefood.infrastructure.config import DATA_DIR_ENV, Settings, configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", count=True, help="Increase log output (-v, -vv).")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: int) -> None:
    """Purpose Food — stock and availability"""
    configure_logging(verbose)
    ctx.obj = Settings.from_env(data_dir=data_dir)


@cli.group()
def order() -> None:
    """Check and apply orders against stock."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Inspect stock levels."""


@cli.group()
def notification() -> None:
    """Read stock and catalog notifications."""


# Register subcommands
order.add_command(order_check)
order.add_command(order_apply)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_show)
notification.add_command(notification_list)
notification.add_command(notification_read)
