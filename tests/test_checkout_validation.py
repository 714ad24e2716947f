from decimal import Decimal
import pytest
from app.services.checkout import ValidationFailed, validate_payment_method, validate_shipping_address, compute_totals
from app.services.checkout.validation import normalize_address
from app.schemas.checkout import ShippingAddressIn
from fakes import line

ADDRESS = {
    "full_name": "Mwila Banda",
    "phone": "+260971234567",
    "address_line1": "Plot 12",
    "city": "Lusaka",
    "province": "Lusaka",
}


@pytest.mark.parametrize("field", ["full_name", "phone", "address_line1", "city", "province"])
def test_each_required_field(field):
    with pytest.raises(ValidationFailed) as exc:
        validate_shipping_address(dict(ADDRESS, **{field: ""}))
    assert exc.value.field == field
    assert exc.value.response_fields() == {"field": field}


def test_optional_fields_may_be_absent():
    validate_shipping_address(ADDRESS)


def test_accepts_schema_objects():
    validate_shipping_address(ShippingAddressIn(**ADDRESS))
    with pytest.raises(ValidationFailed):
        validate_shipping_address(ShippingAddressIn(full_name="x"))


def test_none_address():
    with pytest.raises(ValidationFailed) as exc:
        validate_shipping_address(None)
    assert exc.value.field == "full_name"


def test_payment_methods():
    validate_payment_method("mobile_money_mtn")
    with pytest.raises(ValidationFailed):
        validate_payment_method(None)


def test_normalize_strips_and_defaults_country():
    out = normalize_address(dict(ADDRESS, city="  Ndola ", postal_code=""))
    assert out["city"] == "Ndola"
    assert out["country"] == "Zambia"
    assert "postal_code" not in out


def test_totals_use_exact_decimals():
    totals = compute_totals([line(1, "A", "0.10", 3), line(2, "A", "19.99", 2)])
    assert totals.subtotal == Decimal("40.28")
    assert totals.total_amount == Decimal("40.28")
    assert totals.shipping_cost == Decimal("0.00")
