from decimal import Decimal
from app.version import API_PREFIX
from models import db, Product
from factories import auth_header, make_product


def test_seller_edits_own_product(client, sellers):
    s1, _ = sellers
    product = make_product(s1.seller, 'Basket', 100)
    r = client.patch(f"{API_PREFIX}/seller/products/{product.id}",
                     json={'name': 'Large basket', 'price': '120.00', 'is_active': False},
                     headers=auth_header(s1))
    assert r.status_code == 200
    js = r.get_json()['product']
    assert js['name'] == 'Large basket'
    assert js['price'] == 120.0
    assert js['is_active'] is False
    # fields not sent stay as they were
    assert js['slug'] == 'basket'
    assert js['sku'] == 'SKU-BASKET'


def test_seller_cannot_edit_other_sellers_product(client, sellers):
    s1, s2 = sellers
    product = make_product(s2.seller, 'Charger', 50)
    r = client.patch(f"{API_PREFIX}/seller/products/{product.id}", json={'price': '1.00'}, headers=auth_header(s1))
    assert r.status_code == 404
    assert db.session.get(Product, product.id).price == Decimal('50.00')


def test_product_edit_rejects_taken_slug_and_bad_price(client, sellers):
    s1, _ = sellers
    make_product(s1.seller, 'Mat', 20)
    rug = make_product(s1.seller, 'Rug', 30)
    url = f"{API_PREFIX}/seller/products/{rug.id}"
    assert client.patch(url, json={'slug': 'mat'}, headers=auth_header(s1)).status_code == 409
    assert client.patch(url, json={'price': '-5'}, headers=auth_header(s1)).status_code == 400
    assert client.patch(url, json={'name': None}, headers=auth_header(s1)).status_code == 400
    # keeping its own slug is not a clash
    assert client.patch(url, json={'slug': 'rug'}, headers=auth_header(s1)).status_code == 200


def test_admin_lists_every_product(client, admin, sellers):
    make_product(sellers[0].seller, 'Basket', 100)
    make_product(sellers[1].seller, 'Charger', 50)
    r = client.get(f"{API_PREFIX}/admin/products", headers=auth_header(admin))
    assert r.status_code == 200
    assert [p['name'] for p in r.get_json()['products']] == ['Charger', 'Basket']


def test_admin_creates_product_for_seller(client, admin, sellers):
    seller_id = sellers[1].seller.id
    r = client.post(f"{API_PREFIX}/admin/products",
                    json={'seller_id': seller_id, 'name': 'Solar Lamp', 'price': '75.00', 'currency': 'USD', 'sku': 'LAMP-1'},
                    headers=auth_header(admin))
    assert r.status_code == 201
    product = r.get_json()['product']
    assert product['seller_id'] == seller_id
    assert product['currency'] == 'USD'
    assert product['slug'].startswith('solar-lamp-')

    r = client.post(f"{API_PREFIX}/admin/products", json={'seller_id': 999, 'name': 'Ghost', 'price': '1.00'},
                    headers=auth_header(admin))
    assert r.status_code == 404


def test_admin_edits_any_product(client, admin, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    r = client.patch(f"{API_PREFIX}/admin/products/{product.id}",
                     json={'name': 'Woven basket', 'slug': 'woven-basket', 'sku': 'WB-1', 'currency': 'EUR'},
                     headers=auth_header(admin))
    assert r.status_code == 200
    js = r.get_json()['product']
    assert (js['name'], js['slug'], js['sku'], js['currency']) == ('Woven basket', 'woven-basket', 'WB-1', 'EUR')
    assert client.patch(f"{API_PREFIX}/admin/products/999", json={'name': 'x'}, headers=auth_header(admin)).status_code == 404


def test_product_management_is_role_gated(client, buyer, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    assert client.get(f"{API_PREFIX}/admin/products", headers=auth_header(sellers[0])).status_code == 403
    assert client.patch(f"{API_PREFIX}/seller/products/{product.id}", json={'name': 'x'},
                        headers=auth_header(buyer)).status_code == 403
