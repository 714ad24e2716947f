"""
Per-seller order fan-out.

Each seller partition is written as order -> order items -> payment ->
delivery, one step after another. Partitions are independent: they write
disjoint rows, so they may run on a thread pool. A failing step stops its own
partition only and nothing already written is undone.
"""
import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import NamedTuple, Optional

from flask import current_app, has_app_context
from opentelemetry import trace

from app.constants import DEFAULT_DELIVERY_METHOD
from app.utils.money import to_money, ZERO
from .errors import SellerFailure, ValidationFailed
from .order_numbers import generate_order_number

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

# Free shipping, no tax and no discounts for now
SHIPPING_COST = ZERO
TAX_AMOUNT = ZERO
DISCOUNT_AMOUNT = ZERO


class OrderTotals(NamedTuple):
    subtotal: Decimal
    shipping_cost: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total_amount: Decimal


class PartitionOutcome(NamedTuple):
    seller_id: object
    order: Optional[dict]
    failure: Optional[SellerFailure]


def line_subtotal(line):
    return to_money(to_money(line.price) * line.quantity)


def compute_totals(lines) -> OrderTotals:
    subtotal = to_money(sum((line_subtotal(line) for line in lines), ZERO))
    total = subtotal + SHIPPING_COST + TAX_AMOUNT - DISCOUNT_AMOUNT
    return OrderTotals(subtotal, SHIPPING_COST, TAX_AMOUNT, DISCOUNT_AMOUNT, to_money(total))


def partition_currency(lines, default_currency):
    currencies = {line.currency or default_currency for line in lines}
    if len(currencies) > 1:
        raise ValidationFailed("currency")
    return currencies.pop() if currencies else default_currency


def order_item_rows(lines):
    return [
        {
            "product_id": line.product_id,
            "variant_id": line.variant_id,
            "product_name": line.name or "",
            "product_sku": line.sku,
            "variant_name": None,
            "price": to_money(line.price),
            "quantity": line.quantity,
            "subtotal": line_subtotal(line),
        }
        for line in lines
    ]


def write_seller_order(
    store,
    *,
    buyer_id,
    seller_id,
    lines,
    shipping_address,
    payment_method,
    currency,
    order_number,
    checkout_token=None,
) -> PartitionOutcome:
    totals = compute_totals(lines)
    order = None
    step = "insert_order"
    with tracer.start_as_current_span("checkout.seller_order") as span:
        span.set_attribute("checkout.seller_id", str(seller_id))
        span.set_attribute("checkout.lines", len(lines))
        try:
            order = store.insert_order({
                "order_number": order_number,
                "buyer_id": buyer_id,
                "seller_id": seller_id,
                "status": "pending",
                "subtotal": totals.subtotal,
                "tax_amount": totals.tax_amount,
                "shipping_cost": totals.shipping_cost,
                "discount_amount": totals.discount_amount,
                "total_amount": totals.total_amount,
                "currency": currency,
                "shipping_address": shipping_address,
                "billing_address": shipping_address,
                "checkout_token": checkout_token,
            })

            step = "insert_order_items"
            store.insert_order_items(order["id"], order_item_rows(lines))

            step = "insert_payment"
            store.insert_payment(order["id"], payment_method, totals.total_amount, currency)

            step = "insert_delivery"
            store.insert_delivery(
                order["id"],
                DEFAULT_DELIVERY_METHOD,
                shipping_address,
                shipping_address.get("full_name"),
                shipping_address.get("phone"),
                shipping_address.get("delivery_notes"),
            )
        except Exception as e:
            span.record_exception(e)
            order_id = order["id"] if order else None
            logger.error(
                {
                    "event": "seller_order_failed",
                    "seller_id": seller_id,
                    "step": step,
                    "order_id": order_id,
                    "error": str(e),
                },
                exc_info=True,
            )
            return PartitionOutcome(seller_id, order, SellerFailure(seller_id, step, order_id, str(e)))

    logger.info({
        "event": "seller_order_created",
        "seller_id": seller_id,
        "order_number": order["order_number"],
        "total_amount": str(totals.total_amount),
    })
    return PartitionOutcome(seller_id, order, None)


def fan_out_orders(
    store,
    partitions,
    *,
    buyer_id,
    shipping_address,
    payment_method,
    currencies,
    checkout_token=None,
    order_number_factory=generate_order_number,
    max_workers=1,
):
    """Write one order per seller partition; returns outcomes in partition order."""

    def _write(seller_id, lines):
        return write_seller_order(
            store,
            buyer_id=buyer_id,
            seller_id=seller_id,
            lines=lines,
            shipping_address=shipping_address,
            payment_method=payment_method,
            currency=currencies[seller_id],
            order_number=order_number_factory(),
            checkout_token=checkout_token,
        )

    jobs = list(partitions.items())
    if max_workers <= 1 or len(jobs) <= 1:
        return [_write(seller_id, lines) for seller_id, lines in jobs]

    app = current_app._get_current_object() if has_app_context() else None

    def _run(seller_id, lines):
        if app is None:
            return _write(seller_id, lines)
        # a fresh app context gives this thread its own database session
        with app.app_context():
            return _write(seller_id, lines)

    with ThreadPoolExecutor(max_workers=min(max_workers, len(jobs)), thread_name_prefix="checkout") as pool:
        futures = [
            pool.submit(contextvars.copy_context().run, _run, seller_id, lines)
            for seller_id, lines in jobs
        ]
        return [f.result() for f in futures]
