"""
Persistence seam for the checkout workflow.

``CheckoutStore`` lists the reads and writes checkout needs. ``SqlCheckoutStore``
implements them on Flask-SQLAlchemy with one commit per write, so a failure in
a later step leaves earlier rows in place. Any store may raise ``StoreError``.
"""
import abc
import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Dict, List, NamedTuple, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.utils.db import transactional
from app.utils.money import to_money
from models import db
from models.cart import Cart, CartItem
from models.order import Order, OrderItem, Payment, Delivery
from models.product import Product
from .errors import StoreError

logger = logging.getLogger(__name__)


class CartLine(NamedTuple):
    item_id: int
    product_id: int
    variant_id: Optional[str]
    seller_id: Optional[int]
    name: str
    sku: Optional[str]
    price: Decimal
    currency: str
    quantity: int


class CheckoutStore(abc.ABC):
    @abc.abstractmethod
    def get_cart(self, buyer_id) -> Optional[int]:
        """Return the buyer's cart id, or None when the buyer has no cart."""

    @abc.abstractmethod
    def get_cart_items_with_product(self, cart_id) -> List[CartLine]:
        """Return the cart's lines joined with their product's current data."""

    @abc.abstractmethod
    def insert_order(self, fields: dict) -> dict:
        """Insert an order row and return it (including its new ``id``)."""

    @abc.abstractmethod
    def insert_order_items(self, order_id, items: List[dict]) -> None:
        """Insert the order's line items, copied from the cart snapshot."""

    @abc.abstractmethod
    def insert_payment(self, order_id, method, amount, currency) -> dict:
        """Insert a pending payment for the order and return it."""

    @abc.abstractmethod
    def insert_delivery(self, order_id, method, address, recipient_name, recipient_phone, notes=None) -> dict:
        """Insert a pending delivery for the order and return it."""

    @abc.abstractmethod
    def delete_cart_items(self, cart_id) -> None:
        """Delete every line of the cart."""

    @abc.abstractmethod
    def find_orders_by_checkout_token(self, buyer_id, checkout_token) -> List[dict]:
        """Return the buyer's orders written under this checkout token, oldest first."""

    @abc.abstractmethod
    def find_incomplete_orders(self, order_ids) -> Dict[int, str]:
        """Map each order lacking items, payment or delivery to its first missing write step."""


def missing_step(has_items, has_payment, has_delivery) -> Optional[str]:
    if not has_items:
        return "insert_order_items"
    if not has_payment:
        return "insert_payment"
    if not has_delivery:
        return "insert_delivery"
    return None


@contextmanager
def _reading(message):
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise StoreError(message) from e


class SqlCheckoutStore(CheckoutStore):
    def get_cart(self, buyer_id):
        with _reading("Failed to load cart"):
            cart = Cart.query.filter_by(user_id=buyer_id).first()
        return cart.id if cart else None

    def get_cart_items_with_product(self, cart_id):
        with _reading("Failed to load cart items"):
            rows = (
                db.session.query(CartItem, Product)
                .join(Product, CartItem.product_id == Product.id)
                .filter(CartItem.cart_id == cart_id)
                .order_by(CartItem.id)
                .all()
            )
        return [
            CartLine(
                item_id=ci.id,
                product_id=p.id,
                variant_id=ci.variant_id,
                seller_id=p.seller_id,
                name=p.name,
                sku=p.sku,
                price=to_money(p.price),
                currency=p.currency,
                quantity=ci.quantity,
            )
            for ci, p in rows
        ]

    def insert_order(self, fields):
        order = Order(**fields)
        with transactional("Failed to create order", reraise_as=StoreError):
            db.session.add(order)
        return order.to_dict()

    def insert_order_items(self, order_id, items):
        with transactional("Failed to create order items", reraise_as=StoreError):
            for item in items:
                db.session.add(OrderItem(order_id=order_id, **item))

    def insert_payment(self, order_id, method, amount, currency):
        payment = Payment(
            order_id=order_id,
            payment_method=method,
            status="pending",
            amount=amount,
            currency=currency,
        )
        with transactional("Failed to create payment", reraise_as=StoreError):
            db.session.add(payment)
        return payment.to_dict()

    def insert_delivery(self, order_id, method, address, recipient_name, recipient_phone, notes=None):
        delivery = Delivery(
            order_id=order_id,
            delivery_method=method,
            status="pending",
            delivery_address=address,
            recipient_name=recipient_name,
            recipient_phone=recipient_phone,
            delivery_notes=notes,
        )
        with transactional("Failed to create delivery", reraise_as=StoreError):
            db.session.add(delivery)
        return delivery.to_dict()

    def delete_cart_items(self, cart_id):
        with transactional("Failed to clear cart", reraise_as=StoreError):
            CartItem.query.filter_by(cart_id=cart_id).delete()

    def find_orders_by_checkout_token(self, buyer_id, checkout_token):
        with _reading("Failed to look up checkout"):
            orders = (
                Order.query.filter_by(buyer_id=buyer_id, checkout_token=checkout_token)
                .order_by(Order.id)
                .all()
            )
        return [o.to_dict() for o in orders]

    def find_incomplete_orders(self, order_ids):
        if not order_ids:
            return {}
        with _reading("Failed to check orders"):
            orders = Order.query.filter(Order.id.in_(order_ids)).all()
            missing = {
                o.id: missing_step(bool(o.items), o.payment is not None, o.delivery is not None)
                for o in orders
            }
        return {order_id: step for order_id, step in missing.items() if step}
