import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from models import db  # noqa: E402
from app.config import TestingConfig  # noqa: E402
from factories import make_user, make_product, add_to_cart  # noqa: E402


@pytest.fixture(scope='session')
def app_instance():
    from app import create_app
    return create_app(TestingConfig)

@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()

@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture
def buyer(app):
    return make_user('buyer@example.com')

@pytest.fixture
def admin(app):
    return make_user('admin@example.com', role='admin')

@pytest.fixture
def sellers(app):
    s1 = make_user('s1@example.com', role='seller', business_name='Chanda Crafts')
    s2 = make_user('s2@example.com', role='seller', business_name='Zed Tech')
    return s1, s2

@pytest.fixture
def two_seller_cart(buyer, sellers):
    """Basket (seller 1, 100 x2) and Charger (seller 2, 50 x1) in the buyer's cart."""
    s1, s2 = sellers
    basket = make_product(s1.seller, 'Basket', 100)
    charger = make_product(s2.seller, 'Charger', 50)
    add_to_cart(buyer, basket, 2)
    add_to_cart(buyer, charger, 1)
    return buyer, basket, charger
