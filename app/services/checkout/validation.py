from collections.abc import Mapping
from app.constants import PAYMENT_METHODS, DEFAULT_COUNTRY
from .errors import ValidationFailed

# Checked in this order; the first missing field is reported
REQUIRED_ADDRESS_FIELDS = ("full_name", "phone", "address_line1", "city", "province")

OPTIONAL_ADDRESS_FIELDS = ("address_line2", "postal_code", "country", "delivery_notes")


def _value(address, field):
    if isinstance(address, Mapping):
        return address.get(field)
    return getattr(address, field, None)


def validate_shipping_address(address) -> None:
    """Presence checks only; formats are not enforced."""
    for field in REQUIRED_ADDRESS_FIELDS:
        value = _value(address, field) if address is not None else None
        if not isinstance(value, str) or not value.strip():
            raise ValidationFailed(field)


def validate_payment_method(method) -> None:
    if method not in PAYMENT_METHODS:
        raise ValidationFailed("payment_method")


def normalize_address(address) -> dict:
    """Strip string values and fill in the default country."""
    result = {}
    for field in REQUIRED_ADDRESS_FIELDS + OPTIONAL_ADDRESS_FIELDS:
        value = _value(address, field)
        if isinstance(value, str):
            value = value.strip()
        if value:
            result[field] = value
    result.setdefault("country", DEFAULT_COUNTRY)
    return result
