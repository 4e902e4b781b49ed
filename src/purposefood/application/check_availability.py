"""Application service: Check Availability use case.

Runs before an order is placed, so the caller can show the customer
what is ready now, what has to be produced, and when to expect delivery.
"""

from __future__ import annotations

from purposefood.application.dto import AvailabilityDTO, AvailabilityLineDTO, LineItemSpec
from purposefood.domain.model.availability import OrderAvailabilitySummary
from purposefood.domain.model.delivery import IMMEDIATE_DELIVERY_WINDOW
from purposefood.domain.model.order import OrderLineItem
from purposefood.domain.repository.product_repository import ProductRepository
from purposefood.domain.service.availability_checker import AvailabilityChecker


class CheckAvailabilityHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        immediate_window: str = IMMEDIATE_DELIVERY_WINDOW,
    ) -> None:
        self._product_repo = product_repo
        self._immediate_window = immediate_window

    def handle(self, item_specs: list[LineItemSpec]) -> AvailabilityDTO:
        line_items = [
            OrderLineItem.of(spec.product_id, spec.quantity) for spec in item_specs
        ]
        checker = AvailabilityChecker(self._product_repo, self._immediate_window)
        return self._to_dto(checker.check(line_items))

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(summary: OrderAvailabilitySummary) -> AvailabilityDTO:
        return AvailabilityDTO(
            lines=[
                AvailabilityLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    available=line.available,
                    delivery_type=line.delivery_type.value if line.delivery_type else None,
                    message=line.message,
                    stock_current=line.stock_current,
                    preparation_time=line.preparation_time,
                    immediate_quantity=line.immediate_quantity,
                    production_quantity=line.production_quantity,
                )
                for line in summary.availability
            ],
            delivery_estimate=summary.delivery_estimate,
            total_production_time=summary.total_production_time,
            has_out_of_stock=summary.has_out_of_stock,
            has_low_stock=summary.has_low_stock,
            can_proceed=summary.can_proceed,
        )
