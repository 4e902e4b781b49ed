"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

from purposefood.domain.model.product import Product
from purposefood.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, **fields: Any) -> Product:
        """Add a new product to the catalog."""
        # Auto-assign ID based on existing numeric IDs
        all_products = self._product_repo.list_all()
        numeric_ids = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product.create(next_id, name, **fields)
        self._product_repo.save(product)
        return product
