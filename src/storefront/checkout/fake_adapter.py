"""Configurable fake order placement for development and testing.

No external calls are made. The fake can be told to accept or refuse orders,
and it records every payload it receives.
"""

from uuid import uuid4

from storefront.checkout.port import OrderPayload, OrderPlacement, PlacementResult


class FakeOrderPlacement(OrderPlacement):
    """Configurable fake order placement service."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Store is not accepting orders"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Store is not accepting orders") -> None:
        """Configure placement behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def place(self, payload: OrderPayload) -> PlacementResult:
        self.calls.append(payload.to_dict())

        if self.should_succeed:
            return PlacementResult(success=True, order_id=f"fake_order_{uuid4().hex[:12]}")
        return PlacementResult(success=False, failure_reason=self.failure_reason)
