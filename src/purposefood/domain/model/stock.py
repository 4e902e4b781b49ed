"""Results of applying an order against product stock."""

from __future__ import annotations

from dataclasses import dataclass, field

from purposefood.domain.model.notification import Notification


@dataclass(frozen=True)
class StockUpdate:
    product_id: str
    previous_stock: int
    new_stock: int
    quantity_ordered: int


@dataclass
class StockAdjustmentResult:
    order_id: str
    updates: list[StockUpdate] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
