"""Cart actions — the closed set of messages the cart reducer understands.

Payload fields are stored exactly as the caller supplied them. The reducer
validates them; an action object never raises on construction, so a faulty UI
event can always be dispatched and rejected instead of crashing the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from storefront.cart.state import CartState


@dataclass(frozen=True)
class AddItem:
    """Add one unit of ``item`` (``product_id``, ``name``, ``price``) from ``store_id``."""

    item: Mapping[str, Any] | None
    store_id: Any


@dataclass(frozen=True)
class RemoveItem:
    product_id: Any


@dataclass(frozen=True)
class UpdateQuantity:
    """Set the quantity of a line; zero or less removes it."""

    product_id: Any
    quantity: Any


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = AddItem | RemoveItem | UpdateQuantity | ClearCart


@dataclass(frozen=True)
class Rejection:
    """Diagnostic for an action whose payload failed validation."""

    action: str
    errors: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class Transition:
    """Outcome of applying one action to a cart snapshot."""

    state: CartState
    rejection: Rejection | None = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None
