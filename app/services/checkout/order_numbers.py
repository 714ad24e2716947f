import secrets
from datetime import datetime, timezone
from typing import Optional


def generate_order_number(prefix: str = "ORD", now: Optional[datetime] = None) -> str:
    """Return a human-readable order number such as ``ORD-20261018-9F3A07C21B``.

    The 40-bit random suffix keeps concurrent checkouts apart; the unique
    column on ``orders.order_number`` is the final guard.
    """
    now = now or datetime.now(timezone.utc)
    return f"{prefix}-{now:%Y%m%d}-{secrets.token_hex(5).upper()}"
