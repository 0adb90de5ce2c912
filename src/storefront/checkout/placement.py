"""Order placement — command and handler."""

import json

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.checkout.order import Order
from storefront.domain import storefront


@storefront.command(part_of="Order")
class PlaceOrder:
    store_id = Identifier(required=True)
    customer_name = String(required=True, max_length=255)
    customer_phone = String(required=True, max_length=20)
    customer_address = String(required=True, max_length=1000)
    items = Text(required=True)  # JSON: list of {product_id, name, price, quantity}


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(
            store_id=command.store_id,
            customer_details={
                "name": command.customer_name,
                "phone": command.customer_phone,
                "address": command.customer_address,
            },
            items_data=items_data,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
