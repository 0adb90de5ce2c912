"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A guest order was placed from the contents of a cart."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    store_id = Identifier(required=True)
    customer_name = String(required=True)
    items = Text(required=True)  # JSON: list of {product_id, name, price, quantity}
    total_amount = Float(required=True)
    placed_at = DateTime(required=True)
