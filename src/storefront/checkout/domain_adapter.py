"""In-process order placement through the storefront domain.

Processes a ``PlaceOrder`` command against the active Protean domain. Must be
called inside a domain context.
"""

import json

import structlog
from protean.exceptions import InvalidOperationError, ValidationError
from protean.utils.globals import current_domain

from storefront.checkout.placement import PlaceOrder
from storefront.checkout.port import OrderPayload, OrderPlacement, PlacementResult

logger = structlog.get_logger(__name__)


class DomainOrderPlacement(OrderPlacement):
    """Places orders by persisting an ``Order`` aggregate."""

    def place(self, payload: OrderPayload) -> PlacementResult:
        try:
            order_id = current_domain.process(
                PlaceOrder(
                    store_id=payload.store_id,
                    customer_name=payload.customer.name,
                    customer_phone=payload.customer.phone,
                    customer_address=payload.customer.address,
                    items=json.dumps([dict(item) for item in payload.items]),
                ),
                asynchronous=False,
            )
        except (ValidationError, InvalidOperationError) as exc:
            logger.warning(
                "Order rejected by domain",
                store_id=payload.store_id,
                error=str(exc),
            )
            return PlacementResult(success=False, failure_reason=str(exc))

        logger.info("Order placed", order_id=order_id, store_id=payload.store_id)
        return PlacementResult(success=True, order_id=order_id)
