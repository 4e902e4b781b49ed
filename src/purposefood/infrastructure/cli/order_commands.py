"""CLI commands that run orders against stock."""

from __future__ import annotations

import click

from purposefood.application.apply_order_stock import ApplyOrderStockHandler
from purposefood.application.check_availability import CheckAvailabilityHandler
from purposefood.application.dto import LineItemSpec
from purposefood.domain.exceptions import DomainException
from purposefood.infrastructure.bootstrap import (
    notification_repository,
    product_repository,
)
from purposefood.infrastructure.config import Settings


def _parse_items(raw: str) -> list[LineItemSpec]:
    """Parse '1:3,2:5' into a LineItemSpec list."""
    specs: list[LineItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(LineItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


@click.command("check")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_check(settings: Settings, items: str) -> None:
    """Check whether an order can be delivered now or needs production."""
    specs = _parse_items(items)
    handler = CheckAvailabilityHandler(
        product_repo=product_repository(settings),
        immediate_window=settings.immediate_window,
    )

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Product':<24} {'Delivery':<11} {'Stock':>6}  Note")
    click.echo(f"  {'-'*64}")
    for line in dto.lines:
        delivery = line.delivery_type or "unavailable"
        click.echo(
            f"  {line.product_name or line.product_id:<24} {delivery:<11} "
            f"{line.stock_current:>6}  {line.message}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  Estimated delivery: {dto.delivery_estimate}")
    if not dto.can_proceed:
        raise click.ClickException("Order cannot proceed: some products are unavailable")


@click.command("apply")
@click.option("--order-id", required=True, help="Confirmed order ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_apply(settings: Settings, order_id: str, items: str) -> None:
    """Deduct a confirmed order from stock."""
    specs = _parse_items(items)
    handler = ApplyOrderStockHandler(
        product_repo=product_repository(settings),
        notification_repo=notification_repository(settings),
    )

    try:
        dto = handler.handle(order_id=order_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id}: {len(dto.updates)} of {len(specs)} line(s) applied")
    for u in dto.updates:
        click.echo(
            f"  product {u.product_id}: {u.previous_stock} -> {u.new_stock} "
            f"(-{u.quantity_ordered})"
        )
    for n in dto.notifications:
        click.echo(f"  ! {n.title}: {n.message}")
