"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from purposefood.domain.exceptions import (
    EntityNotFoundError,
    RepositoryError,
    ValidationError,
)
from purposefood.domain.model.product import Product
from purposefood.domain.model.value_objects import Money, normalize_ingredients
from purposefood.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def ping(self) -> None:
        self._load()

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def set_stock(self, product_id: str, new_stock: int, updated_at: datetime) -> None:
        products = self._load()
        product = products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.set_stock(new_stock, updated_at)
        self._persist(products)

    def update_fields(self, product_id: str, fields: dict[str, Any]) -> Product:
        products = self._load()
        product = products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.apply_fields(fields)
        product.updated_at = fields.get("updated_at") or datetime.now(timezone.utc)
        self._persist(products)
        return product

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "name": p.name,
            "category": p.category,
            "price": str(p.price.amount),
            "currency": p.price.currency,
            "stock_current": p.stock_current,
            "stock_minimum": p.stock_minimum,
            "preparation_time": p.preparation_time,
            "is_active": p.is_active,
            "ingredients": p.ingredients.to_raw(),
            "updated_at": p.updated_at.isoformat() if p.updated_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        updated_at = raw.get("updated_at")
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw.get("price", "0.00")), raw.get("currency", "BRL")),
            stock_current=raw.get("stock_current", 0),
            stock_minimum=raw.get("stock_minimum", 0),
            preparation_time=raw.get("preparation_time", 0),
            is_active=raw.get("is_active", True),
            ingredients=normalize_ingredients(raw.get("ingredients")),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path}: {exc}") from exc
        try:
            return {str(item["id"]): self._to_domain(item) for item in raw}
        except (KeyError, TypeError, ValueError, ArithmeticError, ValidationError) as exc:
            raise RepositoryError(
                f"Malformed product record in {self._file_path}: {exc!r}"
            ) from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise RepositoryError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
