"""Product aggregate.

Products are created and edited by the catalog; the inventory services
only read them and write back stock levels.  ``stock_current`` may go
negative: a negative level is the number of units owed to orders that
still have to be produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from purposefood.domain.exceptions import ValidationError
from purposefood.domain.model.value_objects import (
    IngredientList,
    Ingredients,
    Money,
    normalize_ingredients,
)


class StockStatus(Enum):
    INACTIVE = "inactive"
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    MADE_TO_ORDER = "made_to_order"
    AVAILABLE = "available"


# Fields that may be changed through ``Product.apply_fields``.
EDITABLE_FIELDS = frozenset({
    "name",
    "category",
    "price",
    "stock_current",
    "stock_minimum",
    "preparation_time",
    "is_active",
    "ingredients",
})


@dataclass
class Product:
    """A product in the catalog, together with its stock accounting fields."""

    id: str
    name: str
    stock_current: int = 0
    stock_minimum: int = 0
    preparation_time: float = 0
    is_active: bool = True
    price: Money = field(default_factory=lambda: Money(Decimal("0.00")))
    category: str = ""
    ingredients: Ingredients = field(default_factory=IngredientList)
    updated_at: datetime | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        *,
        price: str | Decimal = "0.00",
        category: str = "",
        stock_current: int = 0,
        stock_minimum: int = 0,
        preparation_time: float = 0,
        is_active: bool = True,
        ingredients: object = None,
    ) -> Product:
        """Create a new catalog product, validating every field."""
        product = Product(id=id, name="")
        product.apply_fields({
            "name": name,
            "price": price,
            "category": category,
            "stock_current": stock_current,
            "stock_minimum": stock_minimum,
            "preparation_time": preparation_time,
            "is_active": is_active,
            "ingredients": ingredients,
        })
        return product

    # --- Stock classification -------------------------------------------------

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock_current <= 0

    @property
    def is_low_stock(self) -> bool:
        return self.stock_current <= self.stock_minimum

    @property
    def stock_status(self) -> StockStatus:
        """Storefront status of the product; the first matching rule wins."""
        if not self.is_active:
            return StockStatus.INACTIVE
        if self.is_out_of_stock:
            return StockStatus.OUT_OF_STOCK
        if self.is_low_stock:
            return StockStatus.LOW_STOCK
        if self.preparation_time > 0:
            return StockStatus.MADE_TO_ORDER
        return StockStatus.AVAILABLE

    # --- Mutation -------------------------------------------------------------

    def set_stock(self, new_stock: int, updated_at: datetime | None = None) -> None:
        """Overwrite the on-hand level.  Negative values are a backlog."""
        self.stock_current = new_stock
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def apply_fields(self, fields: dict[str, Any]) -> None:
        """Validate and apply a partial update.

        Every value is checked before anything is assigned, so a rejected
        update leaves the product untouched.
        """
        unknown = set(fields) - EDITABLE_FIELDS - {"updated_at"}
        if unknown:
            raise ValidationError(
                f"Unknown product field(s): {', '.join(sorted(unknown))}"
            )

        cleaned: dict[str, Any] = {}
        for name, value in fields.items():
            if name == "updated_at":
                continue
            cleaned[name] = _CLEANERS[name](value)

        for name, value in cleaned.items():
            setattr(self, name, value)


# ---------------------------------------------------------------------------
# Field validation
# ---------------------------------------------------------------------------


def _clean_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Product name is required")
    return value.strip()


def _clean_category(value: Any) -> str:
    return str(value or "").strip()


def _clean_price(value: Any) -> Money:
    if isinstance(value, Money):
        return value
    return Money.of(value)


def _clean_int(name: str, minimum: int | None):
    def clean(value: Any) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"{name} must be an integer, got {value!r}") from exc
        if minimum is not None and number < minimum:
            raise ValidationError(f"{name} cannot be negative")
        return number

    return clean


def _clean_preparation_time(value: Any) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"preparation_time must be a number of hours, got {value!r}"
        ) from exc
    if hours < 0:
        raise ValidationError("preparation_time cannot be negative")
    return hours


def _clean_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
    raise ValidationError(f"is_active must be true or false, got {value!r}")


_CLEANERS = {
    "name": _clean_name,
    "category": _clean_category,
    "price": _clean_price,
    "stock_current": _clean_int("stock_current", minimum=None),
    "stock_minimum": _clean_int("stock_minimum", minimum=0),
    "preparation_time": _clean_preparation_time,
    "is_active": _clean_bool,
    "ingredients": normalize_ingredients,
}
