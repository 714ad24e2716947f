import logging
from typing import List, NamedTuple, Optional

from .errors import DataUnavailable, NotAuthenticated, StoreError
from .store import CartLine

logger = logging.getLogger(__name__)


class CartSnapshot(NamedTuple):
    cart_id: Optional[int]
    lines: List[CartLine]


def read_cart_snapshot(store, buyer_id) -> CartSnapshot:
    """Load the buyer's cart lines with their product's seller, name, sku and price.

    An absent cart and an empty cart both come back as a snapshot with no
    lines.
    """
    if not buyer_id:
        raise NotAuthenticated()
    try:
        cart_id = store.get_cart(buyer_id)
        if cart_id is None:
            return CartSnapshot(None, [])
        lines = list(store.get_cart_items_with_product(cart_id))
    except StoreError as e:
        logger.error("Cart read failed for buyer %s: %s", buyer_id, e)
        raise DataUnavailable() from e
    return CartSnapshot(cart_id, lines)
