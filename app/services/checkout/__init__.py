from .errors import (
    CheckoutError,
    DataUnavailable,
    EmptyCart,
    NotAuthenticated,
    PartialOrderFailure,
    SellerFailure,
    StoreError,
    ValidationFailed,
)
from .order_numbers import generate_order_number
from .partitioner import partition_by_seller
from .snapshot import CartSnapshot, read_cart_snapshot
from .store import CartLine, CheckoutStore, SqlCheckoutStore
from .validation import REQUIRED_ADDRESS_FIELDS, validate_payment_method, validate_shipping_address
from .workflow import CheckoutResult, clear_cart, place_order
from .writer import compute_totals, fan_out_orders, write_seller_order

__all__ = [
    "CartLine",
    "CartSnapshot",
    "CheckoutError",
    "CheckoutResult",
    "CheckoutStore",
    "DataUnavailable",
    "EmptyCart",
    "NotAuthenticated",
    "PartialOrderFailure",
    "REQUIRED_ADDRESS_FIELDS",
    "SellerFailure",
    "SqlCheckoutStore",
    "StoreError",
    "ValidationFailed",
    "clear_cart",
    "compute_totals",
    "fan_out_orders",
    "generate_order_number",
    "partition_by_seller",
    "place_order",
    "read_cart_snapshot",
    "validate_payment_method",
    "validate_shipping_address",
    "write_seller_order",
]
