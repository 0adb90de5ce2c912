"""Guest checkout — turn the current cart into an order.

The cart is cleared only after the placement service accepts the order. A
refused order leaves the cart exactly as it was so the shopper can retry.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.cart.state import CartState
from storefront.cart.store import CartStore
from storefront.checkout import get_placement
from storefront.checkout.port import GuestDetails, OrderPayload, OrderPlacement, PlacementResult
from storefront.checkout.schemas import GuestCheckoutRequest

logger = structlog.get_logger(__name__)


def build_order_payload(state: CartState, guest: GuestDetails) -> OrderPayload:
    """Package a cart snapshot and guest details for the placement service."""
    if state.is_empty or state.store_id is None:
        raise ValidationError({"cart": ["Cart is empty; add items from a store before checking out"]})

    return OrderPayload(
        store_id=state.store_id,
        customer=guest,
        items=tuple(item.to_dict() for item in state.items),
    )


def submit_order(
    cart: CartStore,
    request: GuestCheckoutRequest,
    placement: OrderPlacement | None = None,
) -> PlacementResult:
    """Place an order for everything in ``cart``.

    Raises:
        ValidationError: If the cart is empty.
    """
    payload = build_order_payload(cart.state, request.to_guest_details())
    result = (placement or get_placement()).place(payload)

    if not result.success:
        logger.warning(
            "Order placement failed; cart kept",
            store_id=payload.store_id,
            item_count=len(payload.items),
            reason=result.failure_reason,
        )
        return result

    logger.info(
        "Order placed; clearing cart",
        order_id=result.order_id,
        store_id=payload.store_id,
        item_count=len(payload.items),
    )
    cart.clear_cart()
    return result
