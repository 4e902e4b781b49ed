"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict.  Reads, writes and inserts can be told
to fail so the error-absorption paths can be exercised.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from purposefood.domain.exceptions import EntityNotFoundError, RepositoryError
from purposefood.domain.model.notification import Notification
from purposefood.domain.model.product import Product
from purposefood.domain.repository.notification_repository import (
    NotificationRepository,
)
from purposefood.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(
        self,
        products: list[Product] | None = None,
        failing_reads: set[str] | None = None,
        failing_writes: set[str] | None = None,
        unreachable: bool = False,
    ) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.failing_reads = failing_reads or set()
        self.failing_writes = failing_writes or set()
        self.unreachable = unreachable
        self.stock_writes: list[tuple[str, int]] = []

    def ping(self) -> None:
        if self.unreachable:
            raise RepositoryError("product store unreachable")

    def get_by_id(self, product_id: str) -> Product | None:
        if product_id in self.failing_reads:
            raise RepositoryError(f"read of {product_id} failed")
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def set_stock(self, product_id: str, new_stock: int, updated_at: datetime) -> None:
        if product_id in self.failing_writes:
            raise RepositoryError(f"write of {product_id} failed")
        self._store[product_id].set_stock(new_stock, updated_at)
        self.stock_writes.append((product_id, new_stock))

    def update_fields(self, product_id: str, fields: dict[str, Any]) -> Product:
        if product_id in self.failing_writes:
            raise RepositoryError(f"write of {product_id} failed")
        product = self._store.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.apply_fields(fields)
        product.updated_at = fields.get("updated_at")
        return product


class FakeNotificationRepository(NotificationRepository):

    def __init__(self, fail_inserts: bool = False) -> None:
        self._store: dict[int, Notification] = {}
        self._next_id = 1
        self.fail_inserts = fail_inserts
        self.batches: list[list[Notification]] = []

    def insert_batch(self, notifications: list[Notification]) -> None:
        if self.fail_inserts:
            raise RepositoryError("notification insert failed")
        for n in notifications:
            n.id = self._next_id
            self._next_id += 1
            self._store[n.id] = n
        self.batches.append(list(notifications))

    def list_all(self) -> list[Notification]:
        return list(self._store.values())

    def get_by_id(self, notification_id: int) -> Notification | None:
        return self._store.get(notification_id)

    def save(self, notification: Notification) -> None:
        self._store[notification.id] = notification
