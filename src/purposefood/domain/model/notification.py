"""Notification records raised by stock changes.

Notifications are immutable once created apart from their read flag,
which the notification center toggles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from purposefood.domain.model.delivery import format_hours
from purposefood.domain.model.value_objects import IngredientList, Money, RawIngredients

if TYPE_CHECKING:
    from purposefood.domain.model.product import Product


class NotificationType(Enum):
    PRODUCTION_NEEDED = "production_needed"
    LOW_STOCK = "low_stock"
    PRODUCT_UPDATED = "product_updated"


@dataclass
class Notification:
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int | None = None  # assigned by the sink on insert

    def mark_read(self) -> None:
        self.is_read = True

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def production_needed(product: Product) -> Notification:
        return Notification(
            type=NotificationType.PRODUCTION_NEEDED,
            title="Production needed",
            message=(
                f"{product.name} is out of stock. "
                f"Production time: {format_hours(product.preparation_time)}"
            ),
            data={
                "product_id": product.id,
                "product_name": product.name,
                "current_stock": product.stock_current,
                "preparation_time": product.preparation_time,
            },
        )

    @staticmethod
    def low_stock(product: Product) -> Notification:
        return Notification(
            type=NotificationType.LOW_STOCK,
            title="Low stock",
            message=f"{product.stock_current} unit(s) of {product.name} left",
            data={
                "product_id": product.id,
                "product_name": product.name,
                "current_stock": product.stock_current,
                "minimum_stock": product.stock_minimum,
            },
        )

    @staticmethod
    def product_updated(product: Product, updates: dict[str, Any]) -> Notification:
        changes = [name for name in updates if name != "updated_at"]
        return Notification(
            type=NotificationType.PRODUCT_UPDATED,
            title="Product updated",
            message=f"{product.name} was updated: {', '.join(changes)}",
            data={
                "product_id": product.id,
                "product_name": product.name,
                "changes": changes,
                "updates": {name: _plain(updates[name]) for name in changes},
            },
        )


def _plain(value: Any) -> Any:
    """Reduce domain values to JSON-friendly primitives for ``data``."""
    if isinstance(value, Money):
        return str(value.amount)
    if isinstance(value, (IngredientList, RawIngredients)):
        return value.to_raw()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value
