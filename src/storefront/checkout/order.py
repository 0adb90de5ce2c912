"""Order aggregate (CQRS) — a guest order placed from a single-store cart.

Prices and names are copied from the cart at placement time and never change
afterwards. The total is computed here with the same line arithmetic the cart
uses, so a malformed line contributes nothing instead of poisoning the sum.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.cart.state import cart_total
from storefront.checkout.events import OrderPlaced
from storefront.domain import storefront


class OrderStatus(Enum):
    PLACED = "placed"
    ACCEPTED = "accepted"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@storefront.value_object(part_of="Order")
class CustomerDetails:
    """Delivery contact for a guest order."""

    name = String(required=True, max_length=255)
    phone = String(required=True, max_length=20)
    address = String(required=True, max_length=1000)


@storefront.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate
class Order:
    store_id = Identifier(required=True)
    customer_details = ValueObject(CustomerDetails, required=True)
    items = HasMany(OrderItem)
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    total_amount = Float(default=0.0, min_value=0.0)
    placed_at = DateTime()

    @classmethod
    def place(cls, store_id, customer_details, items_data):
        """Create an order from checkout data.

        Args:
            store_id: The store every item belongs to.
            customer_details: Dict with name, phone, address.
            items_data: List of dicts with product_id, name, price, quantity.
        """
        if not items_data:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            store_id=store_id,
            customer_details=CustomerDetails(**customer_details),
            status=OrderStatus.PLACED.value,
            placed_at=now,
        )
        for item in items_data:
            order.add_items(
                OrderItem(
                    product_id=item["product_id"],
                    name=item["name"],
                    price=item["price"],
                    quantity=item["quantity"],
                )
            )
        order.total_amount = cart_total(order.items)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                store_id=str(store_id),
                customer_name=order.customer_details.name,
                items=json.dumps(items_data),
                total_amount=order.total_amount,
                placed_at=now,
            )
        )
        return order
