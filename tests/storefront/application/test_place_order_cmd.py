"""Application tests for the PlaceOrder command."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.checkout.order import Order, OrderStatus
from storefront.checkout.placement import PlaceOrder

ITEMS = [
    {"product_id": "milk", "name": "Milk", "price": 30.0, "quantity": 2},
    {"product_id": "bread", "name": "Bread", "price": 25.0, "quantity": 1},
]


def _place_order(**overrides):
    defaults = {
        "store_id": "store-a",
        "customer_name": "Asha Rao",
        "customer_phone": "9876543210",
        "customer_address": "12 MG Road, Bengaluru",
        "items": json.dumps(ITEMS),
    }
    defaults.update(overrides)
    return current_domain.process(PlaceOrder(**defaults), asynchronous=False)


class TestPlaceOrderCommand:
    def test_returns_order_id(self):
        order_id = _place_order()
        assert order_id is not None

    def test_order_persists(self):
        order_id = _place_order()
        order = current_domain.repository_for(Order).get(order_id)
        assert str(order.store_id) == "store-a"
        assert order.status == OrderStatus.PLACED.value
        assert order.total_amount == 85.0

    def test_items_persist(self):
        order_id = _place_order()
        order = current_domain.repository_for(Order).get(order_id)
        assert len(order.items) == 2
        assert {item.product_id: item.quantity for item in order.items} == {"milk": 2, "bread": 1}

    def test_customer_details_persist(self):
        order_id = _place_order()
        order = current_domain.repository_for(Order).get(order_id)
        assert order.customer_details.name == "Asha Rao"
        assert order.customer_details.address == "12 MG Road, Bengaluru"

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError):
            _place_order(items=json.dumps([]))

    def test_missing_customer_name_rejected(self):
        with pytest.raises(ValidationError):
            PlaceOrder(
                store_id="store-a",
                customer_phone="9876543210",
                customer_address="12 MG Road",
                items=json.dumps(ITEMS),
            )
