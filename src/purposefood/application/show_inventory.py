"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from purposefood.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    stock: int
    minimum: int
    preparation_time: float
    status: str


class ShowInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, only_attention: bool = False) -> list[InventoryLineDTO]:
        """List stock per product.

        With ``only_attention`` only active products at or below their
        minimum (including backlogged ones) are returned.
        """
        products = self._product_repo.list_all()
        if only_attention:
            products = [p for p in products if p.is_active and p.is_low_stock]
        return [
            InventoryLineDTO(
                product_id=p.id,
                product_name=p.name,
                stock=p.stock_current,
                minimum=p.stock_minimum,
                preparation_time=p.preparation_time,
                status=p.stock_status.value,
            )
            for p in products
        ]
