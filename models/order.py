from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from models import db, BIGINT


def _money(value):
    return float(value) if value is not None else None


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_seller_status", "seller_id", "status"),
        db.UniqueConstraint("buyer_id", "checkout_token", "seller_id", name="uq_orders_buyer_checkout_token_seller"),
    )
    id = Column(BIGINT, primary_key=True)
    order_number = Column(String(40), unique=True, nullable=False)
    buyer_id = Column(String(36), ForeignKey("user_profiles.id"), nullable=False, index=True)
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, confirmed, processing, shipped, delivered, cancelled, refunded
    subtotal = Column(Numeric(12, 2), nullable=False)
    tax_amount = Column(Numeric(12, 2), nullable=False, default=0)
    shipping_cost = Column(Numeric(12, 2), nullable=False, default=0)
    discount_amount = Column(Numeric(12, 2), nullable=False, default=0)
    total_amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="ZMW")
    shipping_address = Column(db.JSON, nullable=False)
    billing_address = Column(db.JSON, nullable=True)
    checkout_token = Column(String(64), nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    items = db.relationship("OrderItem", backref="order", cascade="all, delete-orphan", lazy=True)
    payment = db.relationship("Payment", backref="order", uselist=False, lazy=True)
    delivery = db.relationship("Delivery", backref="order", uselist=False, lazy=True)

    def to_dict(self):
        return {
            "id": self.id,
            "order_number": self.order_number,
            "buyer_id": self.buyer_id,
            "seller_id": self.seller_id,
            "status": self.status,
            "subtotal": _money(self.subtotal),
            "tax_amount": _money(self.tax_amount),
            "shipping_cost": _money(self.shipping_cost),
            "discount_amount": _money(self.discount_amount),
            "total_amount": _money(self.total_amount),
            "currency": self.currency,
            "shipping_address": self.shipping_address,
            "billing_address": self.billing_address,
            "checkout_token": self.checkout_token,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class OrderItem(db.Model):
    __tablename__ = "order_items"
    id = db.Column(BIGINT, primary_key=True)
    order_id = db.Column(BIGINT, db.ForeignKey("orders.id"), nullable=False, index=True)
    product_id = db.Column(db.Integer, nullable=False)
    variant_id = db.Column(db.String(36), nullable=True)

    # Copied at purchase time; later product edits must not change these
    product_name = db.Column(db.String(200), nullable=False)
    product_sku = db.Column(db.String(64), nullable=True)
    variant_name = db.Column(db.String(100), nullable=True)
    price = db.Column(db.Numeric(12, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    subtotal = db.Column(db.Numeric(12, 2), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "order_id": self.order_id,
            "product_id": self.product_id,
            "variant_id": self.variant_id,
            "product_name": self.product_name,
            "product_sku": self.product_sku,
            "variant_name": self.variant_name,
            "price": _money(self.price),
            "quantity": self.quantity,
            "subtotal": _money(self.subtotal),
        }


class Payment(db.Model):
    __tablename__ = "payments"
    id = Column(BIGINT, primary_key=True)
    order_id = Column(BIGINT, ForeignKey("orders.id"), nullable=False, index=True)
    payment_method = Column(String(30), nullable=False)  # mobile_money_mtn, mobile_money_airtel, mobile_money_zamtel, card, cash_on_delivery
    status = Column(String(20), nullable=False, default="pending")  # pending, processing, completed, failed, refunded
    amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="ZMW")
    transaction_id = Column(String(100), nullable=True)
    payment_reference = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "order_id": self.order_id,
            "payment_method": self.payment_method,
            "status": self.status,
            "amount": _money(self.amount),
            "currency": self.currency,
            "transaction_id": self.transaction_id,
            "payment_reference": self.payment_reference,
        }


class Delivery(db.Model):
    __tablename__ = "deliveries"
    id = Column(BIGINT, primary_key=True)
    order_id = Column(BIGINT, ForeignKey("orders.id"), nullable=False, index=True)
    delivery_method = Column(String(30), nullable=False, default="platform_courier")  # platform_courier, third_party_courier, seller_pickup
    status = Column(String(20), nullable=False, default="pending")  # pending, assigned, in_transit, delivered, failed, returned
    delivery_address = Column(db.JSON, nullable=False)
    recipient_name = Column(String(100), nullable=True)
    recipient_phone = Column(String(20), nullable=True)
    delivery_notes = Column(Text, nullable=True)
    tracking_number = Column(String(100), nullable=True)
    courier_name = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "order_id": self.order_id,
            "delivery_method": self.delivery_method,
            "status": self.status,
            "delivery_address": self.delivery_address,
            "recipient_name": self.recipient_name,
            "recipient_phone": self.recipient_phone,
            "delivery_notes": self.delivery_notes,
            "tracking_number": self.tracking_number,
            "courier_name": self.courier_name,
        }
