PLATFORM_NAME = "Ebuney"

PAYMENT_METHODS = {
    "mobile_money_mtn": "MTN Mobile Money",
    "mobile_money_airtel": "Airtel Money",
    "mobile_money_zamtel": "Zamtel Mobile Money",
    "card": "Credit/Debit Card",
    "cash_on_delivery": "Cash on Delivery",
}

DELIVERY_METHODS = {
    "platform_courier": {"label": "Platform Courier", "estimated_days": 2},
    "third_party_courier": {"label": "Third-Party Courier", "estimated_days": 3},
    "seller_pickup": {"label": "Pickup from Seller", "estimated_days": 0},
}

ORDER_STATUSES = ("pending", "confirmed", "processing", "shipped", "delivered", "cancelled", "refunded")
PAYMENT_STATUSES = ("pending", "processing", "completed", "failed", "refunded")
DELIVERY_STATUSES = ("pending", "assigned", "in_transit", "delivered", "failed", "returned")
CURRENCIES = ("ZMW", "USD", "GBP", "EUR")

# Orders still awaiting fulfilment, as shown on the seller dashboard
OPEN_ORDER_STATUSES = ("pending", "confirmed", "processing")

DEFAULT_CURRENCY = "ZMW"
DEFAULT_DELIVERY_METHOD = "platform_courier"
DEFAULT_PAYMENT_METHOD = "cash_on_delivery"
DEFAULT_COUNTRY = "Zambia"

ZAMBIAN_PROVINCES = (
    "Central",
    "Copperbelt",
    "Eastern",
    "Luapula",
    "Lusaka",
    "Muchinga",
    "Northern",
    "North-Western",
    "Southern",
    "Western",
)

MAX_QUANTITY_PER_ITEM = 10
