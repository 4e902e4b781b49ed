"""Application service: Apply Order Stock use case.

Called once an order is confirmed.  Partial application is the normal
outcome when some lines fail; the caller gets back only the lines that
were written.
"""

from __future__ import annotations

from purposefood.application.dto import (
    LineItemSpec,
    NotificationDTO,
    StockAdjustmentDTO,
    StockUpdateDTO,
)
from purposefood.domain.model.order import OrderLineItem
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)
from purposefood.domain.repository.product_repository import ProductRepository
from purposefood.domain.service.inventory_adjuster import InventoryAdjuster
from purposefood.domain.service.notification_publisher import NotificationPublisher


class ApplyOrderStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._product_repo = product_repo
        self._notification_repo = notification_repo

    def handle(self, order_id: str, item_specs: list[LineItemSpec]) -> StockAdjustmentDTO:
        line_items = [
            OrderLineItem.of(spec.product_id, spec.quantity) for spec in item_specs
        ]
        adjuster = InventoryAdjuster(
            self._product_repo, NotificationPublisher(self._notification_repo)
        )
        result = adjuster.apply_order(order_id, line_items)

        return StockAdjustmentDTO(
            order_id=result.order_id,
            updates=[
                StockUpdateDTO(
                    product_id=u.product_id,
                    previous_stock=u.previous_stock,
                    new_stock=u.new_stock,
                    quantity_ordered=u.quantity_ordered,
                )
                for u in result.updates
            ],
            notifications=[NotificationDTO.from_domain(n) for n in result.notifications],
        )
