"""
Product create/update shared by the seller and admin blueprints. These
functions do NOT commit; callers wrap them in ``transactional``.

Order items copy product data at checkout, so edits here never reach orders
that were already placed.
"""
import re
import secrets

from models import db
from models.product import Product
from models.user import Seller


class ProductError(Exception):
    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


def slugify(name):
    base = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "product"
    return f"{base[:200]}-{secrets.token_hex(3)}"


def _ensure_slug_free(slug, product_id=None):
    clash = Product.query.filter(Product.slug == slug)
    if product_id is not None:
        clash = clash.filter(Product.id != product_id)
    if clash.first():
        raise ProductError("Slug already in use", status=409)


def create_product(seller_id, data) -> Product:
    if db.session.get(Seller, seller_id) is None:
        raise ProductError("Seller not found", status=404)
    slug = data.slug or slugify(data.name)
    _ensure_slug_free(slug)
    product = Product(
        seller_id=seller_id,
        name=data.name,
        slug=slug,
        description=data.description,
        sku=data.sku,
        price=data.price,
        currency=data.currency,
        is_active=data.is_active,
    )
    db.session.add(product)
    return product


def update_product(product: Product, data) -> Product:
    """Apply the fields present in a ProductUpdateRequest."""
    changes = data.model_dump(exclude_unset=True)
    if changes.get("slug"):
        _ensure_slug_free(changes["slug"], product.id)
    for field, value in changes.items():
        if value is None and field in ("name", "slug", "price", "currency", "is_active"):
            raise ProductError(f"{field} cannot be empty")
        setattr(product, field, value)
    return product


def owned_product(seller_id, product_id) -> Product:
    product = Product.query.filter_by(id=product_id, seller_id=seller_id).first()
    if not product:
        raise ProductError("Product not found", status=404)
    return product
