"""Cart snapshots — immutable values produced by the cart reducer.

A ``CartState`` is never modified after construction. Every accepted action
yields a new snapshot; a rejected or no-op action hands back the very same
object, so callers can detect "nothing happened" with an identity check.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable

MAX_QUANTITY = 10_000


def is_finite_number(value: Any) -> bool:
    """True for a finite real or ``Decimal`` that fits in a float.

    Bools are not numbers here, and integers too large for a float are not
    finite.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    try:
        return math.isfinite(value)
    except (OverflowError, ValueError):
        return False


def is_valid_price(value: Any) -> bool:
    """True for a finite, non-negative number."""
    return is_finite_number(value) and value >= 0


def is_valid_quantity(value: Any) -> bool:
    """True for an integer quantity between one and ``MAX_QUANTITY`` (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_QUANTITY


def line_total(price: Any, quantity: Any) -> float:
    """Price of a line; invalid price or quantity contributes nothing."""
    if not is_valid_price(price) or not is_valid_quantity(quantity):
        return 0.0
    total = float(price) * quantity
    return total if math.isfinite(total) else 0.0


def cart_total(items: Iterable[Any]) -> float:
    """Sum of line totals over anything exposing ``price`` and ``quantity``.

    A line that would push the sum past the float range is left out.
    """
    total = 0.0
    for item in items:
        running = total + line_total(item.price, item.quantity)
        if math.isfinite(running):
            total = running
    return total


@dataclass(frozen=True)
class CartItem:
    """One product line in the cart."""

    product_id: str
    name: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return line_total(self.price, self.quantity)

    def with_quantity(self, quantity: int) -> "CartItem":
        return CartItem(
            product_id=self.product_id,
            name=self.name,
            price=self.price,
            quantity=quantity,
        )

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CartState:
    """Cart contents, all from a single store.

    ``store_id`` is ``None`` exactly when ``items`` is empty.
    """

    store_id: str | None = None
    items: tuple[CartItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> float:
        return cart_total(self.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def index_of(self, product_id: str) -> int:
        """Position of ``product_id`` in ``items``, or -1."""
        return next(
            (index for index, item in enumerate(self.items) if item.product_id == product_id),
            -1,
        )

    def find(self, product_id: str) -> CartItem | None:
        index = self.index_of(product_id)
        return self.items[index] if index >= 0 else None

    def to_dict(self) -> dict:
        return {
            "store_id": self.store_id,
            "items": [item.to_dict() for item in self.items],
        }


EMPTY_CART = CartState()
