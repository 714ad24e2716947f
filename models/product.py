from models import db
from datetime import datetime


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    # Nullable: products imported without an owning storefront cannot be checked out
    seller_id = db.Column(db.Integer, db.ForeignKey("sellers.id"), nullable=True)

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(220), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    sku = db.Column(db.String(64), nullable=True)

    price = db.Column(db.Numeric(12, 2), nullable=False)
    currency = db.Column(db.String(3), nullable=False, default="ZMW")  # ZMW, USD, GBP, EUR

    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    seller = db.relationship("Seller", backref="products")

    def to_dict(self):
        return {
            "id": self.id,
            "seller_id": self.seller_id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "sku": self.sku,
            "price": float(self.price),
            "currency": self.currency,
            "is_active": self.is_active,
        }
