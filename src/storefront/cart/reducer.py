"""Cart reducer — pure state transitions for the shopping cart.

``apply_action(state, action)`` computes the next ``CartState`` and never
touches ``state``. Payload problems are rejections: the same state comes back
together with a ``Rejection`` and a warning is logged. Anything that is not
one of the four cart actions is a caller bug and raises
``IncorrectUsageError``.

Single-store rule: adding an item from another store replaces the cart with
that one item. Nothing from the previous store is kept.
"""

import math
from collections.abc import Mapping
from typing import Any

import structlog
from protean.exceptions import IncorrectUsageError

from storefront.cart.actions import (
    AddItem,
    CartAction,
    ClearCart,
    Rejection,
    RemoveItem,
    Transition,
    UpdateQuantity,
)
from storefront.cart.state import (
    EMPTY_CART,
    MAX_QUANTITY,
    CartItem,
    CartState,
    is_finite_number,
    is_valid_price,
)

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Payload validation
# ---------------------------------------------------------------------------
def _is_identifier(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_action(action: CartAction) -> dict[str, list[str]]:
    """Return payload errors keyed by field; empty when the action is well-formed."""
    errors: dict[str, list[str]] = {}

    match action:
        case AddItem(item=item, store_id=store_id):
            if not isinstance(item, Mapping):
                errors["item"] = ["must be a mapping with product_id, name and price"]
            else:
                if not _is_identifier(item.get("product_id")):
                    errors["product_id"] = ["must be a non-empty string"]
                if not _is_identifier(item.get("name")):
                    errors["name"] = ["must be a non-empty string"]
                if not is_valid_price(item.get("price")):
                    errors["price"] = ["must be a finite, non-negative number"]
            if not _is_identifier(store_id):
                errors["store_id"] = ["must be a non-empty string"]
        case RemoveItem(product_id=product_id):
            if not _is_identifier(product_id):
                errors["product_id"] = ["must be a non-empty string"]
        case UpdateQuantity(product_id=product_id, quantity=quantity):
            if not _is_identifier(product_id):
                errors["product_id"] = ["must be a non-empty string"]
            if not is_finite_number(quantity):
                errors["quantity"] = ["must be a finite number"]
            elif quantity > MAX_QUANTITY:
                errors["quantity"] = [f"must be at most {MAX_QUANTITY}"]
        case ClearCart():
            pass
        case _:
            raise IncorrectUsageError(f"Unhandled cart action: {action!r}")

    return errors


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------
def _add_item(state: CartState, action: AddItem) -> CartState:
    item = CartItem(
        product_id=action.item["product_id"],
        name=action.item["name"],
        price=float(action.item["price"]),
        quantity=1,
    )

    if state.store_id is not None and state.store_id != action.store_id:
        logger.info(
            "Item from another store; replacing cart",
            previous_store_id=state.store_id,
            store_id=action.store_id,
            discarded_items=len(state.items),
        )
        return CartState(store_id=action.store_id, items=(item,))

    index = state.index_of(item.product_id)
    if index >= 0:
        existing = state.items[index]
        if existing.quantity >= MAX_QUANTITY:
            logger.debug("Line already at maximum quantity", product_id=item.product_id)
            return state
        items = state.items[:index] + (existing.with_quantity(existing.quantity + 1),) + state.items[index + 1 :]
    else:
        items = state.items + (item,)

    return CartState(store_id=state.store_id or action.store_id, items=items)


def _remove_item(state: CartState, product_id: str) -> CartState:
    items = tuple(item for item in state.items if item.product_id != product_id)

    if len(items) == len(state.items):
        logger.debug("Product not in cart; nothing to remove", product_id=product_id)
        return state
    if not items:
        return EMPTY_CART
    return CartState(store_id=state.store_id, items=items)


def _update_quantity(state: CartState, action: UpdateQuantity) -> CartState:
    quantity = math.floor(action.quantity)
    if quantity <= 0:
        return _remove_item(state, action.product_id)

    index = state.index_of(action.product_id)
    if index < 0:
        logger.debug("Product not in cart; quantity unchanged", product_id=action.product_id)
        return state

    existing = state.items[index]
    if existing.quantity == quantity:
        return state

    items = state.items[:index] + (existing.with_quantity(quantity),) + state.items[index + 1 :]
    return CartState(store_id=state.store_id, items=items)


def apply_action(state: CartState, action: CartAction) -> Transition:
    """Apply ``action`` to ``state`` and report what happened."""
    errors = validate_action(action)
    if errors:
        name = type(action).__name__
        logger.warning("Rejected cart action", action=name, errors=errors)
        return Transition(state=state, rejection=Rejection(action=name, errors=errors))

    match action:
        case AddItem():
            next_state = _add_item(state, action)
        case RemoveItem():
            next_state = _remove_item(state, action.product_id)
        case UpdateQuantity():
            next_state = _update_quantity(state, action)
        case ClearCart():
            next_state = EMPTY_CART

    return Transition(state=next_state)


def reduce_cart(state: CartState, action: CartAction) -> CartState:
    """The bare reducer: next state only."""
    return apply_action(state, action).state
