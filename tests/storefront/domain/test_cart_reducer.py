"""Tests for cart reducer transitions."""

from storefront.cart.actions import AddItem, ClearCart, RemoveItem, UpdateQuantity
from storefront.cart.reducer import apply_action, reduce_cart
from storefront.cart.state import EMPTY_CART, MAX_QUANTITY, CartItem, CartState

MILK = {"product_id": "milk", "name": "Milk", "price": 30}
BREAD = {"product_id": "bread", "name": "Bread", "price": 25}
SOAP = {"product_id": "soap", "name": "Soap", "price": 10}


def _cart(*items, store_id="store-a"):
    """Build a populated cart from (product dict, quantity) pairs."""
    return CartState(
        store_id=store_id,
        items=tuple(
            CartItem(product_id=p["product_id"], name=p["name"], price=p["price"], quantity=q) for p, q in items
        ),
    )


class TestAddItem:
    def test_first_item_populates_empty_cart(self):
        state = reduce_cart(EMPTY_CART, AddItem(MILK, "store-a"))
        assert state.store_id == "store-a"
        assert state.items == (CartItem("milk", "Milk", 30, 1),)

    def test_new_product_from_same_store_is_appended(self):
        state = reduce_cart(_cart((MILK, 1)), AddItem(BREAD, "store-a"))
        assert [i.product_id for i in state.items] == ["milk", "bread"]
        assert state.items[1].quantity == 1

    def test_existing_product_increments_quantity(self):
        state = reduce_cart(_cart((MILK, 1)), AddItem(MILK, "store-a"))
        assert len(state.items) == 1
        assert state.items[0].quantity == 2

    def test_increment_preserves_position(self):
        state = reduce_cart(_cart((MILK, 1), (BREAD, 1), (SOAP, 1)), AddItem(BREAD, "store-a"))
        assert [i.product_id for i in state.items] == ["milk", "bread", "soap"]
        assert state.items[1].quantity == 2

    def test_repeated_adds_merge_into_one_line(self):
        state = EMPTY_CART
        for _ in range(5):
            state = reduce_cart(state, AddItem(MILK, "store-a"))
        assert len(state.items) == 1
        assert state.items[0].quantity == 5

    def test_increment_stops_at_maximum_quantity(self):
        before = _cart((MILK, MAX_QUANTITY))
        assert reduce_cart(before, AddItem(MILK, "store-a")) is before

    def test_item_from_other_store_replaces_cart(self):
        state = reduce_cart(_cart((MILK, 3), (BREAD, 1)), AddItem(SOAP, "store-b"))
        assert state.store_id == "store-b"
        assert state.items == (CartItem("soap", "Soap", 10, 1),)

    def test_store_switch_does_not_merge_same_product(self):
        state = reduce_cart(_cart((MILK, 4)), AddItem(MILK, "store-b"))
        assert state.store_id == "store-b"
        assert state.items[0].quantity == 1

    def test_extra_item_keys_are_ignored(self):
        item = {**MILK, "description": "Full cream", "stock": 12}
        state = reduce_cart(EMPTY_CART, AddItem(item, "store-a"))
        assert state.items[0] == CartItem("milk", "Milk", 30, 1)

    def test_zero_price_is_accepted(self):
        state = reduce_cart(EMPTY_CART, AddItem({**MILK, "price": 0}, "store-a"))
        assert state.items[0].price == 0

    def test_previous_state_is_not_modified(self):
        before = _cart((MILK, 1))
        snapshot = before.to_dict()
        reduce_cart(before, AddItem(MILK, "store-a"))
        reduce_cart(before, AddItem(SOAP, "store-b"))
        assert before.to_dict() == snapshot


class TestRemoveItem:
    def test_remove_keeps_other_items_and_store(self):
        state = reduce_cart(_cart((MILK, 1), (BREAD, 2)), RemoveItem("milk"))
        assert state.store_id == "store-a"
        assert [i.product_id for i in state.items] == ["bread"]

    def test_removing_last_item_returns_initial_state(self):
        state = reduce_cart(_cart((MILK, 3)), RemoveItem("milk"))
        assert state is EMPTY_CART

    def test_removing_absent_product_returns_same_state(self):
        before = _cart((MILK, 1))
        assert reduce_cart(before, RemoveItem("nonexistent")) is before

    def test_removing_from_empty_cart(self):
        assert reduce_cart(EMPTY_CART, RemoveItem("milk")) is EMPTY_CART


class TestUpdateQuantity:
    def test_positive_quantity_replaces_quantity(self):
        state = reduce_cart(_cart((MILK, 1), (BREAD, 1)), UpdateQuantity("milk", 7))
        assert state.items[0].quantity == 7
        assert [i.product_id for i in state.items] == ["milk", "bread"]

    def test_fractional_quantity_is_floored(self):
        state = reduce_cart(_cart((MILK, 1)), UpdateQuantity("milk", 3.9))
        assert state.items[0].quantity == 3
        assert isinstance(state.items[0].quantity, int)

    def test_quantity_below_one_after_floor_removes(self):
        state = reduce_cart(_cart((MILK, 1), (BREAD, 1)), UpdateQuantity("milk", 0.5))
        assert [i.product_id for i in state.items] == ["bread"]

    def test_zero_behaves_like_remove(self):
        before = _cart((MILK, 1), (BREAD, 1))
        assert reduce_cart(before, UpdateQuantity("milk", 0)) == reduce_cart(before, RemoveItem("milk"))

    def test_negative_behaves_like_remove(self):
        before = _cart((MILK, 1), (BREAD, 1))
        assert reduce_cart(before, UpdateQuantity("milk", -5)) == reduce_cart(before, RemoveItem("milk"))

    def test_zero_on_last_item_returns_initial_state(self):
        assert reduce_cart(_cart((MILK, 2)), UpdateQuantity("milk", 0)) is EMPTY_CART

    def test_absent_product_returns_same_state(self):
        before = _cart((MILK, 1))
        assert reduce_cart(before, UpdateQuantity("nonexistent", 3)) is before

    def test_unchanged_quantity_returns_same_state(self):
        before = _cart((MILK, 2))
        assert reduce_cart(before, UpdateQuantity("milk", 2)) is before

    def test_absent_product_is_not_a_rejection(self):
        transition = apply_action(_cart((MILK, 1)), UpdateQuantity("nonexistent", 3))
        assert not transition.rejected


class TestClearCart:
    def test_clear_populated_cart(self):
        assert reduce_cart(_cart((MILK, 2), (BREAD, 1)), ClearCart()) is EMPTY_CART

    def test_clear_empty_cart(self):
        assert reduce_cart(EMPTY_CART, ClearCart()) is EMPTY_CART


class TestScenario:
    def test_add_merge_then_switch_store(self):
        state = reduce_cart(EMPTY_CART, AddItem(MILK, "storeA"))
        assert state == CartState("storeA", (CartItem("milk", "Milk", 30, 1),))

        state = reduce_cart(state, AddItem(MILK, "storeA"))
        assert state.items[0].quantity == 2
        assert state.total == 60

        state = reduce_cart(state, AddItem(SOAP, "storeB"))
        assert state == CartState("storeB", (CartItem("soap", "Soap", 10, 1),))
        assert state.total == 10
