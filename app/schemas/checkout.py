from typing import Optional
from pydantic import BaseModel, Field
from app.constants import DEFAULT_COUNTRY, DEFAULT_PAYMENT_METHOD


class ShippingAddressIn(BaseModel):
    # Required fields are presence-checked by the checkout workflow so the
    # first missing one can be reported by name.
    full_name: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = DEFAULT_COUNTRY
    delivery_notes: Optional[str] = None


class CheckoutRequest(BaseModel):
    shipping_address: ShippingAddressIn = Field(default_factory=ShippingAddressIn)
    payment_method: str = DEFAULT_PAYMENT_METHOD
    checkout_token: Optional[str] = Field(default=None, max_length=64)
