"""Order line items and the order status chain.

The order workflow itself lives outside this package.  Stock is checked
before an order becomes PENDING and applied once it is CONFIRMED.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from purposefood.domain.model.value_objects import Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def can_transition_to(self, target: OrderStatus) -> bool:
        """Orders move one step forward, or to CANCELLED while still open."""
        if self.is_terminal:
            return False
        if target is OrderStatus.CANCELLED:
            return True
        if target not in _FORWARD_CHAIN:
            return False
        return _FORWARD_CHAIN.index(target) == _FORWARD_CHAIN.index(self) + 1


_FORWARD_CHAIN = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.DELIVERED,
]


@dataclass(frozen=True)
class OrderLineItem:
    """One (product, quantity) pair of a requested order."""

    product_id: str
    quantity: Quantity

    @staticmethod
    def of(product_id: str, quantity: int) -> OrderLineItem:
        return OrderLineItem(product_id=str(product_id), quantity=Quantity(quantity))
