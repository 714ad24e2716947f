"""
Checkout: turn one multi-seller cart into one order per seller.

    validate -> authenticate -> (replay?) -> read cart -> partition by seller
    -> fan out per-seller writes -> clear cart only if every seller succeeded
"""
import logging
import time
from typing import List, NamedTuple

from app.constants import DEFAULT_CURRENCY, DEFAULT_PAYMENT_METHOD
from app.metrics import CHECKOUT_ATTEMPTS, CHECKOUT_DURATION, CHECKOUT_ORDERS_CREATED
from .errors import (
    CheckoutError,
    DataUnavailable,
    EmptyCart,
    NotAuthenticated,
    PartialOrderFailure,
    SellerFailure,
    StoreError,
)
from .order_numbers import generate_order_number
from .partitioner import partition_by_seller
from .snapshot import read_cart_snapshot
from .validation import normalize_address, validate_payment_method, validate_shipping_address
from .writer import fan_out_orders, partition_currency

logger = logging.getLogger(__name__)


class CheckoutResult(NamedTuple):
    orders: List[dict]
    replayed: bool
    cart_cleared: bool


def clear_cart(store, cart_id) -> bool:
    """Delete every line of the cart. Only call after all seller orders succeeded."""
    try:
        store.delete_cart_items(cart_id)
    except StoreError as e:
        # orders are already written; the buyer can empty the cart by hand
        logger.error("Cart %s could not be cleared after checkout: %s", cart_id, e)
        return False
    return True


def place_order(
    store,
    session,
    shipping_address,
    payment_method=DEFAULT_PAYMENT_METHOD,
    checkout_token=None,
    *,
    max_workers=1,
    default_currency=DEFAULT_CURRENCY,
    order_number_factory=generate_order_number,
) -> CheckoutResult:
    """Place one order per seller represented in the buyer's cart.

    Args:
        store: a CheckoutStore.
        session: the authenticated session (anything with ``user_id``), or None.
        shipping_address: mapping with full_name, phone, address_line1, city,
            province and optional address_line2, postal_code, country,
            delivery_notes.
        payment_method: one of app.constants.PAYMENT_METHODS.
        checkout_token: optional client key unique per checkout attempt; a
            repeated token returns the orders of the first attempt, or raises
            PartialOrderFailure again when that attempt was partial.

    Raises:
        ValidationFailed, NotAuthenticated, EmptyCart, DataUnavailable,
        PartialOrderFailure.
    """
    started = time.perf_counter()
    outcome = "error"
    try:
        result = _place_order(
            store,
            session,
            shipping_address,
            payment_method,
            checkout_token,
            max_workers=max_workers,
            default_currency=default_currency,
            order_number_factory=order_number_factory,
        )
        outcome = "replayed" if result.replayed else "success"
        return result
    except CheckoutError as e:
        outcome = e.outcome
        raise
    finally:
        CHECKOUT_ATTEMPTS.labels(outcome).inc()
        CHECKOUT_DURATION.observe(time.perf_counter() - started)


def _replay(store, buyer_id, checkout_token):
    """Return the earlier attempt's result, or None if the token is unused.

    An earlier attempt that left incomplete orders is reported again as a
    partial failure, never as success.
    """
    try:
        existing = store.find_orders_by_checkout_token(buyer_id, checkout_token)
        incomplete = store.find_incomplete_orders([o["id"] for o in existing]) if existing else {}
    except StoreError as e:
        raise DataUnavailable() from e
    if not existing:
        return None

    if incomplete:
        complete = [o for o in existing if o["id"] not in incomplete]
        failures = [
            SellerFailure(o["seller_id"], incomplete[o["id"]], o["id"], "incomplete from an earlier attempt")
            for o in existing if o["id"] in incomplete
        ]
        logger.warning({
            "event": "checkout_replay_incomplete",
            "buyer_id": buyer_id,
            "failed_sellers": [f.seller_id for f in failures],
        })
        raise PartialOrderFailure(complete, failures)

    logger.info("Checkout token already used by buyer %s; returning %d order(s)", buyer_id, len(existing))
    return CheckoutResult(existing, True, False)


def _place_order(store, session, shipping_address, payment_method, checkout_token, *,
                 max_workers, default_currency, order_number_factory):
    validate_shipping_address(shipping_address)
    validate_payment_method(payment_method)

    buyer_id = getattr(session, "user_id", None)
    if not buyer_id:
        raise NotAuthenticated()
    address = normalize_address(shipping_address)

    if checkout_token:
        replayed = _replay(store, buyer_id, checkout_token)
        if replayed is not None:
            return replayed

    snapshot = read_cart_snapshot(store, buyer_id)
    if not snapshot.lines:
        raise EmptyCart()
    partitions = partition_by_seller(snapshot.lines)
    if not partitions:
        raise EmptyCart()

    # every partition is checked before the first write
    currencies = {
        seller_id: partition_currency(lines, default_currency)
        for seller_id, lines in partitions.items()
    }

    outcomes = fan_out_orders(
        store,
        partitions,
        buyer_id=buyer_id,
        shipping_address=address,
        payment_method=payment_method,
        currencies=currencies,
        checkout_token=checkout_token,
        order_number_factory=order_number_factory,
        max_workers=max_workers,
    )
    created = [o.order for o in outcomes if o.failure is None]
    failures = [o.failure for o in outcomes if o.failure is not None]
    CHECKOUT_ORDERS_CREATED.inc(len(created))

    if failures:
        logger.error({
            "event": "checkout_partial_failure",
            "buyer_id": buyer_id,
            "created": [o["order_number"] for o in created],
            "failed_sellers": [f.seller_id for f in failures],
        })
        raise PartialOrderFailure(created, failures)

    cleared = clear_cart(store, snapshot.cart_id)
    logger.info({
        "event": "checkout_completed",
        "buyer_id": buyer_id,
        "orders": [o["order_number"] for o in created],
        "cart_cleared": cleared,
    })
    return CheckoutResult(created, False, cleared)
