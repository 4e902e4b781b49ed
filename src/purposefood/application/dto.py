"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from purposefood.domain.model.notification import Notification


@dataclass(frozen=True)
class LineItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class AvailabilityLineDTO:
    product_id: str
    product_name: str
    available: bool
    delivery_type: str | None  # "immediate", "partial", "production"
    message: str
    stock_current: int
    preparation_time: float
    immediate_quantity: int | None = None
    production_quantity: int | None = None


@dataclass(frozen=True)
class AvailabilityDTO:
    lines: list[AvailabilityLineDTO]
    delivery_estimate: str
    total_production_time: float
    has_out_of_stock: bool
    has_low_stock: bool
    can_proceed: bool


@dataclass(frozen=True)
class StockUpdateDTO:
    product_id: str
    previous_stock: int
    new_stock: int
    quantity_ordered: int


@dataclass(frozen=True)
class NotificationDTO:
    id: int | None
    type: str
    title: str
    message: str
    is_read: bool
    created_at: str

    @staticmethod
    def from_domain(notification: Notification) -> NotificationDTO:
        return NotificationDTO(
            id=notification.id,
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class StockAdjustmentDTO:
    order_id: str
    updates: list[StockUpdateDTO]
    notifications: list[NotificationDTO]

