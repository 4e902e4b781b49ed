"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from purposefood.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors in prices.
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"R${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Ingredients: either a proper list or free text that could not be parsed
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IngredientList:
    items: tuple[str, ...] = ()

    def __str__(self) -> str:
        return ", ".join(self.items)

    def to_raw(self) -> list[str]:
        return list(self.items)


@dataclass(frozen=True)
class RawIngredients:
    """Ingredients stored as free text, kept verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text

    def to_raw(self) -> str:
        return self.text


Ingredients = Union[IngredientList, RawIngredients]


def normalize_ingredients(raw: object) -> Ingredients:
    """Map a stored ingredients value onto the ``Ingredients`` variant.

    Lists become ``IngredientList``.  Strings holding a JSON array are
    parsed into one as well; any other string is kept as ``RawIngredients``.
    """
    if raw is None:
        return IngredientList()
    if isinstance(raw, (IngredientList, RawIngredients)):
        return raw
    if isinstance(raw, (list, tuple)):
        return IngredientList(tuple(str(item).strip() for item in raw))
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            return RawIngredients(raw)
        if isinstance(parsed, list):
            return IngredientList(tuple(str(item).strip() for item in parsed))
        return RawIngredients(raw)
    raise ValidationError(
        f"Ingredients must be a list or text, got {type(raw).__name__}"
    )
