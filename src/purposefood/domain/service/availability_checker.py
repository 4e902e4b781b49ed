"""Domain service: classify how an order could be fulfilled.

Read-only.  Each line item is looked up independently; a line whose
product cannot be resolved is reported as unavailable and the check
moves on to the next one.
"""

from __future__ import annotations

import logging

from purposefood.domain.exceptions import RepositoryError
from purposefood.domain.model.availability import (
    AvailabilityResult,
    DeliveryType,
    OrderAvailabilitySummary,
)
from purposefood.domain.model.delivery import (
    IMMEDIATE_DELIVERY_WINDOW,
    delivery_estimate,
    format_hours,
)
from purposefood.domain.model.order import OrderLineItem
from purposefood.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AvailabilityChecker:

    def __init__(
        self,
        product_repo: ProductRepository,
        immediate_window: str = IMMEDIATE_DELIVERY_WINDOW,
    ) -> None:
        self._product_repo = product_repo
        self._immediate_window = immediate_window

    def check(self, line_items: list[OrderLineItem]) -> OrderAvailabilitySummary:
        """Classify every line item and estimate delivery for the whole order.

        Zero or negative stock does not block the order (it is produced);
        only inactive, missing or unreadable products set ``can_proceed``
        to False.
        """
        self._product_repo.ping()

        results: list[AvailabilityResult] = []
        total_production_time: float = 0
        has_out_of_stock = False
        has_low_stock = False

        for line in line_items:
            requested = line.quantity.value

            try:
                product = self._product_repo.get_by_id(line.product_id)
            except RepositoryError as exc:
                logger.error("Could not read product %s: %s", line.product_id, exc)
                results.append(
                    AvailabilityResult(
                        product_id=line.product_id,
                        product_name="",
                        available=False,
                        message="Could not check product",
                        error=str(exc),
                    )
                )
                continue

            if product is None or not product.is_active:
                results.append(
                    AvailabilityResult(
                        product_id=line.product_id,
                        product_name=product.name if product else "Product not found",
                        available=False,
                        message="Product unavailable",
                        preparation_time=product.preparation_time if product else 0,
                    )
                )
                has_out_of_stock = True
                continue

            stock = product.stock_current

            if stock >= requested:
                results.append(
                    AvailabilityResult(
                        product_id=product.id,
                        product_name=product.name,
                        available=True,
                        message="Ready for delivery",
                        delivery_type=DeliveryType.IMMEDIATE,
                        stock_current=stock,
                        preparation_time=0,
                    )
                )
            elif stock > 0:
                to_produce = requested - stock
                results.append(
                    AvailabilityResult(
                        product_id=product.id,
                        product_name=product.name,
                        available=True,
                        message=(
                            f"{stock} unit(s) ready, "
                            f"{to_produce} unit(s) need production"
                        ),
                        delivery_type=DeliveryType.PARTIAL,
                        stock_current=stock,
                        preparation_time=product.preparation_time,
                        immediate_quantity=stock,
                        production_quantity=to_produce,
                    )
                )
                total_production_time = max(total_production_time, product.preparation_time)
                has_low_stock = True
            else:
                results.append(
                    AvailabilityResult(
                        product_id=product.id,
                        product_name=product.name,
                        available=True,
                        message=(
                            "Out of stock. Production time: "
                            f"{format_hours(product.preparation_time)}"
                        ),
                        delivery_type=DeliveryType.PRODUCTION,
                        stock_current=0,
                        preparation_time=product.preparation_time,
                    )
                )
                total_production_time = max(total_production_time, product.preparation_time)
                has_out_of_stock = True

        return OrderAvailabilitySummary(
            availability=tuple(results),
            delivery_estimate=delivery_estimate(
                total_production_time,
                needs_production=has_out_of_stock or has_low_stock,
                immediate_window=self._immediate_window,
            ),
            total_production_time=total_production_time,
            has_out_of_stock=has_out_of_stock,
            has_low_stock=has_low_stock,
            can_proceed=all(result.available for result in results),
        )
