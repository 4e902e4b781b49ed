"""Domain service: apply a committed order against product stock.

Lines are applied one at a time with no cross-line transaction.  A line
whose product cannot be read or written is logged and skipped; the lines
already written stay written.  Stock is allowed to go negative, which
records units owed to production rather than an error.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from purposefood.domain.exceptions import EntityNotFoundError, RepositoryError
from purposefood.domain.model.notification import Notification
from purposefood.domain.model.order import OrderLineItem
from purposefood.domain.model.product import Product
from purposefood.domain.model.stock import StockAdjustmentResult, StockUpdate
from purposefood.domain.repository.product_repository import ProductRepository
from purposefood.domain.service.notification_publisher import NotificationPublisher

logger = logging.getLogger(__name__)


class InventoryAdjuster:

    def __init__(
        self,
        product_repo: ProductRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._publisher = publisher

    def apply_order(
        self, order_id: str, line_items: list[OrderLineItem]
    ) -> StockAdjustmentResult:
        """Decrement stock for every line and raise stock notifications.

        Only a store that cannot be reached at all raises; every per-line
        failure is absorbed and left out of the result.
        """
        self._product_repo.ping()

        result = StockAdjustmentResult(order_id=order_id)

        for line in line_items:
            quantity = line.quantity.value

            try:
                product = self._product_repo.get_by_id(line.product_id)
            except RepositoryError as exc:
                logger.error(
                    "Order %s: could not read product %s: %s",
                    order_id, line.product_id, exc,
                )
                continue
            if product is None:
                logger.error(
                    "Order %s: product %s not found", order_id, line.product_id
                )
                continue

            previous_stock = product.stock_current
            new_stock = previous_stock - quantity
            now = datetime.now(timezone.utc)

            try:
                self._product_repo.set_stock(product.id, new_stock, now)
            except (RepositoryError, EntityNotFoundError) as exc:
                logger.error(
                    "Order %s: could not update stock of product %s: %s",
                    order_id, product.id, exc,
                )
                continue

            product.set_stock(new_stock, now)
            logger.info(
                "Order %s: %s stock %d -> %d",
                order_id, product.name, previous_stock, new_stock,
            )

            notification = self._stock_notification(product)
            if notification is not None:
                result.notifications.append(notification)

            result.updates.append(
                StockUpdate(
                    product_id=product.id,
                    previous_stock=previous_stock,
                    new_stock=new_stock,
                    quantity_ordered=quantity,
                )
            )

        self._publisher.publish(result.notifications)
        return result

    def update_product_and_notify(
        self, product_id: str, fields: dict[str, Any]
    ) -> Product:
        """Apply *fields* to a product and raise a ``product_updated`` notice.

        Unlike ``apply_order`` this is a single write, so its errors
        propagate to the caller.
        """
        product = self._product_repo.update_fields(
            product_id, {**fields, "updated_at": datetime.now(timezone.utc)}
        )

        if any(name != "updated_at" for name in fields):
            self._publisher.publish([Notification.product_updated(product, fields)])

        return product

    @staticmethod
    def _stock_notification(product: Product) -> Notification | None:
        if product.is_out_of_stock:
            return Notification.production_needed(product)
        if product.is_low_stock:
            return Notification.low_stock(product)
        return None
