from decimal import Decimal
from models import db, UserProfile, Seller, Product, Cart, CartItem
from app.utils import create_access_token


VALID_ADDRESS = {
    'full_name': 'Mwila Banda',
    'phone': '+260971234567',
    'address_line1': 'Plot 12, Cairo Road',
    'city': 'Lusaka',
    'province': 'Lusaka',
}


def make_user(email, role='buyer', business_name=None):
    user = UserProfile(email=email, role=role, full_name=email.split('@')[0])
    db.session.add(user)
    db.session.flush()
    db.session.add(Cart(user_id=user.id))
    if role == 'seller':
        db.session.add(Seller(user_id=user.id, business_name=business_name or f"{email} store"))
    db.session.commit()
    return user


def make_product(seller, name, price, currency='ZMW', slug=None):
    product = Product(
        seller_id=seller.id if seller is not None else None,
        name=name,
        slug=slug or name.lower().replace(' ', '-'),
        sku=f"SKU-{name.upper().replace(' ', '')}",
        price=Decimal(str(price)),
        currency=currency,
        is_active=True,
    )
    db.session.add(product)
    db.session.commit()
    return product


def add_to_cart(user, product, quantity=1):
    cart = Cart.query.filter_by(user_id=user.id).first()
    db.session.add(CartItem(cart_id=cart.id, product_id=product.id, quantity=quantity))
    db.session.commit()


def auth_header(user):
    return {'Authorization': f'Bearer {create_access_token(user.id, user.role)}'}


def build_app(**overrides):
    """A separate app instance on TestingConfig with some settings changed."""
    from app import create_app
    from app.config import TestingConfig
    return create_app(type('OverrideConfig', (TestingConfig,), overrides))
