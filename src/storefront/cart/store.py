"""Cart store — the long-lived holder of the current cart snapshot.

Callers (a UI layer, a bot handler, a test) mutate the cart only through the
four action methods and read it back through ``state`` and ``total``. The
store keeps no history: each dispatch swaps one immutable snapshot for the
next.

Usage:
    cart = CartStore()
    cart.add_item({"product_id": "milk", "name": "Milk", "price": 30}, "store-a")
    cart.update_quantity("milk", 3)
    cart.total  # 90.0
"""

from collections.abc import Callable
from typing import Any, Mapping

from storefront.cart.actions import (
    AddItem,
    CartAction,
    ClearCart,
    Rejection,
    RemoveItem,
    UpdateQuantity,
)
from storefront.cart.reducer import apply_action
from storefront.cart.state import EMPTY_CART, CartItem, CartState

Listener = Callable[[CartState], None]


class CartStore:
    """Stateful wrapper around the cart reducer."""

    def __init__(self, initial_state: CartState = EMPTY_CART) -> None:
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._total_snapshot: CartState | None = None
        self._total: float = 0.0
        self.last_rejection: Rejection | None = None

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def state(self) -> CartState:
        return self._state

    @property
    def store_id(self) -> str | None:
        return self._state.store_id

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self._state.items

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    @property
    def item_count(self) -> int:
        return self._state.item_count

    @property
    def total(self) -> float:
        """Cart total, computed once per snapshot."""
        if self._total_snapshot is not self._state:
            self._total = self._state.total
            self._total_snapshot = self._state
        return self._total

    # -------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------
    def dispatch(self, action: CartAction) -> CartState:
        """Run ``action`` through the reducer and publish the result.

        Rejected payloads leave the cart as it was and are kept in
        ``last_rejection``. Unknown actions raise ``IncorrectUsageError``.
        """
        transition = apply_action(self._state, action)
        self.last_rejection = transition.rejection

        if transition.state is not self._state:
            self._state = transition.state
            for listener in list(self._listeners):
                listener(self._state)

        return self._state

    def add_item(self, item: Mapping[str, Any] | None, store_id: Any) -> CartState:
        return self.dispatch(AddItem(item=item, store_id=store_id))

    def remove_item(self, product_id: Any) -> CartState:
        return self.dispatch(RemoveItem(product_id=product_id))

    def update_quantity(self, product_id: Any, quantity: Any) -> CartState:
        return self.dispatch(UpdateQuantity(product_id=product_id, quantity=quantity))

    def clear_cart(self) -> CartState:
        return self.dispatch(ClearCart())

    # -------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
