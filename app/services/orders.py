from decimal import Decimal
from sqlalchemy import func
from app.constants import OPEN_ORDER_STATUSES
from models import db
from models.order import Order
from models.product import Product
from models.user import UserProfile, Seller


class OrderError(Exception):
    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


SELLER_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"processing", "cancelled"},
    "processing": {"shipped"},
    "shipped": {"delivered"},
}

# order status -> delivery status it implies
DELIVERY_SYNC = {
    "shipped": "in_transit",
    "delivered": "delivered",
}


def order_detail(order: Order) -> dict:
    data = order.to_dict()
    data["items"] = [i.to_dict() for i in order.items]
    data["payment"] = order.payment.to_dict() if order.payment else None
    data["delivery"] = order.delivery.to_dict() if order.delivery else None
    return data


def update_status_by_seller(seller: Seller, order: Order, new_status: str) -> Order:
    """Move an order along the seller's fulfilment path. Does not commit."""
    if order.seller_id != seller.id:
        raise OrderError("Order not found", status=404)
    allowed = SELLER_TRANSITIONS.get(order.status, set())
    if new_status not in allowed:
        raise OrderError(f"Cannot move order from {order.status} to {new_status}")
    order.status = new_status
    if order.delivery and new_status in DELIVERY_SYNC:
        order.delivery.status = DELIVERY_SYNC[new_status]
    return order


def _sum(query):
    return Decimal(query.scalar() or 0)


def seller_stats(seller: Seller) -> dict:
    base = Order.query.filter(Order.seller_id == seller.id)
    revenue = _sum(
        db.session.query(func.sum(Order.total_amount))
        .filter(Order.seller_id == seller.id, Order.status == "delivered")
    )
    return {
        "total_products": Product.query.filter_by(seller_id=seller.id).count(),
        "total_orders": base.count(),
        "pending_orders": base.filter(Order.status.in_(OPEN_ORDER_STATUSES)).count(),
        "total_revenue": float(revenue),
    }


def platform_stats() -> dict:
    revenue = _sum(
        db.session.query(func.sum(Order.total_amount)).filter(Order.status == "delivered")
    )
    return {
        "total_users": UserProfile.query.count(),
        "total_sellers": Seller.query.count(),
        "pending_sellers": Seller.query.filter_by(is_verified=False).count(),
        "total_products": Product.query.count(),
        "total_orders": Order.query.count(),
        "total_revenue": float(revenue),
    }
