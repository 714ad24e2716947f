from typing import NamedTuple, Optional


class StoreError(Exception):
    """Raised by CheckoutStore implementations when a read or write fails."""


class SellerFailure(NamedTuple):
    seller_id: object
    step: str
    order_id: Optional[int]
    error: str


class CheckoutError(Exception):
    """Base class for failures surfaced to the buyer as a single message."""

    status = 500
    outcome = "error"
    user_message = "Failed to place order"

    def __init__(self, message=None):
        self.message = message or self.user_message
        super().__init__(self.message)

    def response_fields(self):
        return {}


class NotAuthenticated(CheckoutError):
    status = 401
    outcome = "not_authenticated"
    user_message = "Please sign in to continue"

    def response_fields(self):
        return {"redirect": "/auth/login"}


FIELD_MESSAGES = {
    "full_name": "Please enter your full name",
    "phone": "Please enter your phone number",
    "address_line1": "Please enter your address",
    "city": "Please enter your city",
    "province": "Please select your province",
    "payment_method": "Please select a valid payment method",
    "currency": "Items from one seller must be priced in a single currency",
}


class ValidationFailed(CheckoutError):
    status = 400
    outcome = "validation_failed"

    def __init__(self, field, message=None):
        self.field = field
        super().__init__(message or FIELD_MESSAGES.get(field, f"Invalid value for {field}"))

    def response_fields(self):
        return {"field": self.field}


class EmptyCart(CheckoutError):
    status = 400
    outcome = "empty_cart"
    user_message = "Your cart is empty"

    def response_fields(self):
        return {"redirect": "/cart"}


class DataUnavailable(CheckoutError):
    status = 503
    outcome = "data_unavailable"
    user_message = "We could not load your cart. Please try again."


class PartialOrderFailure(CheckoutError):
    """One or more seller partitions failed part-way through their writes.

    Rows written before the failing step are left in place; the cart is not
    cleared so the buyer can retry.
    """

    status = 500
    outcome = "partial_failure"

    def __init__(self, created_orders, failures):
        self.created_orders = list(created_orders)
        self.failures = list(failures)
        super().__init__()

    def response_fields(self):
        return {
            "created_orders": [o["order_number"] for o in self.created_orders],
            "failed_sellers": [f.seller_id for f in self.failures],
        }
