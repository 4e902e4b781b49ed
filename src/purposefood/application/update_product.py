"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

from purposefood.domain.exceptions import EntityNotFoundError, ValidationError
from purposefood.domain.model.product import Product
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)
from purposefood.domain.repository.product_repository import ProductRepository
from purposefood.domain.service.inventory_adjuster import InventoryAdjuster
from purposefood.domain.service.notification_publisher import NotificationPublisher


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._product_repo = product_repo
        self._notification_repo = notification_repo

    def handle(self, product_id: str, fields: dict[str, Any]) -> Product:
        """Change catalog fields of a product and notify the back office.

        The product validates every value before assigning any, so nothing
        is written or announced when one of them is rejected.
        """
        if not fields:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        adjuster = InventoryAdjuster(
            self._product_repo, NotificationPublisher(self._notification_repo)
        )
        return adjuster.update_product_and_notify(product_id, fields)
