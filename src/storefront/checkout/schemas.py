"""Pydantic schemas for guest checkout input.

These are the external contract for the checkout form, kept separate from the
internal Protean command that places the order.
"""

from pydantic import BaseModel, Field

from storefront.checkout.port import GuestDetails

INDIAN_MOBILE_PATTERN = r"^[6-9]\d{9}$"


class GuestCheckoutRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    phone: str = Field(pattern=INDIAN_MOBILE_PATTERN)
    address: str = Field(min_length=1, max_length=1000)

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Asha Rao",
                    "phone": "9876543210",
                    "address": "12 MG Road, Bengaluru",
                }
            ]
        },
    }

    def to_guest_details(self) -> GuestDetails:
        return GuestDetails(name=self.name, phone=self.phone, address=self.address)
