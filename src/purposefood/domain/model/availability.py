"""Read-only results produced by the availability check."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeliveryType(Enum):
    IMMEDIATE = "immediate"
    PARTIAL = "partial"
    PRODUCTION = "production"


@dataclass(frozen=True)
class AvailabilityResult:
    """Fulfillability of a single line item.

    ``available`` is False only when the product is inactive, missing,
    or could not be read; zero stock is still available via production.
    ``immediate_quantity`` and ``production_quantity`` are set only for
    PARTIAL lines.
    """

    product_id: str
    product_name: str
    available: bool
    message: str
    delivery_type: DeliveryType | None = None
    stock_current: int = 0
    preparation_time: float = 0
    immediate_quantity: int | None = None
    production_quantity: int | None = None
    error: str | None = None


@dataclass(frozen=True)
class OrderAvailabilitySummary:
    availability: tuple[AvailabilityResult, ...]
    delivery_estimate: str
    total_production_time: float
    has_out_of_stock: bool
    has_low_stock: bool
    can_proceed: bool
