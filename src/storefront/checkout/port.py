"""Order placement port (abstract interface).

Checkout hands a finished cart to whatever service places orders. Adapters
implement this contract so that the fake used in development and the
in-process domain adapter are interchangeable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GuestDetails:
    """Delivery contact captured at guest checkout."""

    name: str
    phone: str
    address: str

    def to_dict(self) -> dict:
        return {"name": self.name, "phone": self.phone, "address": self.address}


@dataclass(frozen=True)
class OrderPayload:
    """Everything the placement service needs to create an order."""

    store_id: str
    customer: GuestDetails
    items: tuple[dict, ...]

    def to_dict(self) -> dict:
        return {
            "store_id": self.store_id,
            "customer_details": self.customer.to_dict(),
            "items": [dict(item) for item in self.items],
        }


@dataclass(frozen=True)
class PlacementResult:
    """Result of an order placement attempt."""

    success: bool
    order_id: str | None = None
    failure_reason: str | None = None


class OrderPlacement(ABC):
    """Abstract order placement service."""

    @abstractmethod
    def place(self, payload: OrderPayload) -> PlacementResult:
        """Submit an order and report whether it was accepted."""
        ...
