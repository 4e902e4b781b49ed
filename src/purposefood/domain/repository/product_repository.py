"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations are handed to the services explicitly;
there is no shared module-level client.  Store failures surface as
``RepositoryError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from purposefood.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def ping(self) -> None:
        """Raise RepositoryError if the store cannot be reached at all."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def set_stock(self, product_id: str, new_stock: int, updated_at: datetime) -> None:
        """Write the on-hand level of one product."""

    @abstractmethod
    def update_fields(self, product_id: str, fields: dict[str, Any]) -> Product:
        """Apply a partial update and return the stored product.

        Raises EntityNotFoundError if the product does not exist.
        """
