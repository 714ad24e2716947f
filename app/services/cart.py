"""
Buyer cart operations. These functions do NOT commit; callers wrap them in
``transactional``.
"""
from app.constants import MAX_QUANTITY_PER_ITEM, DEFAULT_CURRENCY
from app.utils.money import to_money, ZERO
from models import db
from models.cart import Cart, CartItem
from models.product import Product


class CartError(Exception):
    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


def get_or_create_cart(user_id) -> Cart:
    cart = Cart.query.filter_by(user_id=user_id).first()
    if not cart:
        cart = Cart(user_id=user_id)
        db.session.add(cart)
        db.session.flush()
    return cart


def _owned_item(user_id, item_id) -> CartItem:
    item = (
        CartItem.query.join(Cart, CartItem.cart_id == Cart.id)
        .filter(Cart.user_id == user_id, CartItem.id == item_id)
        .first()
    )
    if not item:
        raise CartError("Item not found in cart", status=404)
    return item


def add_item(user_id, product_id, quantity=1, variant_id=None) -> CartItem:
    product = db.session.get(Product, product_id)
    if not product or not product.is_active:
        raise CartError("Product not available", status=404)
    cart = get_or_create_cart(user_id)
    item = CartItem.query.filter_by(cart_id=cart.id, product_id=product_id, variant_id=variant_id).first()
    if item:
        new_quantity = item.quantity + quantity
        if new_quantity > MAX_QUANTITY_PER_ITEM:
            raise CartError(f"Max limit is {MAX_QUANTITY_PER_ITEM} units")
        item.quantity = new_quantity
    else:
        item = CartItem(cart_id=cart.id, product_id=product_id, variant_id=variant_id, quantity=quantity)
        db.session.add(item)
    return item


def update_quantity(user_id, item_id, quantity) -> CartItem:
    if quantity < 1 or quantity > MAX_QUANTITY_PER_ITEM:
        raise CartError(f"Quantity must be between 1 and {MAX_QUANTITY_PER_ITEM}")
    item = _owned_item(user_id, item_id)
    item.quantity = quantity
    return item


def remove_item(user_id, item_id) -> None:
    db.session.delete(_owned_item(user_id, item_id))


def clear(user_id) -> int:
    cart = Cart.query.filter_by(user_id=user_id).first()
    if not cart:
        return 0
    return CartItem.query.filter_by(cart_id=cart.id).delete()


def cart_view(user_id) -> dict:
    cart = Cart.query.filter_by(user_id=user_id).first()
    items = (
        CartItem.query.filter_by(cart_id=cart.id).order_by(CartItem.id).all()
        if cart else []
    )
    lines = []
    subtotal = ZERO
    for ci in items:
        product = ci.product
        price = to_money(product.price)
        line_total = to_money(price * ci.quantity)
        subtotal += line_total
        lines.append({
            "id": ci.id,
            "product_id": product.id,
            "product_name": product.name,
            "slug": product.slug,
            "seller_id": product.seller_id,
            "variant_id": ci.variant_id,
            "available": bool(product.is_active),
            "price": float(price),
            "currency": product.currency,
            "quantity": ci.quantity,
            "subtotal": float(line_total),
        })
    shipping = ZERO
    return {
        "cart_id": cart.id if cart else None,
        "items": lines,
        "subtotal": float(subtotal),
        "shipping": float(shipping),
        "total": float(subtotal + shipping),
        "currency": lines[0]["currency"] if lines else DEFAULT_CURRENCY,
    }
