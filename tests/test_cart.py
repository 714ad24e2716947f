from app.version import API_PREFIX
from models import CartItem
from factories import auth_header, make_product

CART = f"{API_PREFIX}/buyer/cart"


def test_add_and_view_cart(client, buyer, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    hdr = auth_header(buyer)
    r = client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 2}, headers=hdr)
    assert r.status_code == 200

    r = client.get(CART, headers=hdr)
    assert r.status_code == 200
    cart = r.get_json()['cart']
    assert len(cart['items']) == 1
    assert cart['items'][0]['subtotal'] == 200.0
    assert cart['subtotal'] == 200.0
    assert cart['currency'] == 'ZMW'


def test_adding_same_product_merges_quantity(client, buyer, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    hdr = auth_header(buyer)
    client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 2}, headers=hdr)
    client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 3}, headers=hdr)
    assert CartItem.query.one().quantity == 5


def test_quantity_limit(client, buyer, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    hdr = auth_header(buyer)
    client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 8}, headers=hdr)
    r = client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 3}, headers=hdr)
    assert r.status_code == 400
    assert CartItem.query.one().quantity == 8

    r = client.post(f"{CART}/items", json={'product_id': product.id, 'quantity': 11}, headers=hdr)
    assert r.status_code == 400
    assert r.get_json()['errors'][0]['field'] == 'quantity'


def test_unknown_product(client, buyer):
    r = client.post(f"{CART}/items", json={'product_id': 999}, headers=auth_header(buyer))
    assert r.status_code == 404


def test_update_and_remove_item(client, buyer, sellers):
    product = make_product(sellers[0].seller, 'Basket', 100)
    hdr = auth_header(buyer)
    item_id = client.post(f"{CART}/items", json={'product_id': product.id}, headers=hdr).get_json()['item_id']

    r = client.patch(f"{CART}/items/{item_id}", json={'quantity': 4}, headers=hdr)
    assert r.status_code == 200
    assert CartItem.query.one().quantity == 4

    r = client.delete(f"{CART}/items/{item_id}", headers=hdr)
    assert r.status_code == 200
    assert CartItem.query.count() == 0

    r = client.delete(f"{CART}/items/{item_id}", headers=hdr)
    assert r.status_code == 404


def test_cannot_touch_another_buyers_line(client, two_seller_cart, sellers):
    buyer = two_seller_cart[0]
    line_id = CartItem.query.first().id
    r = client.patch(f"{CART}/items/{line_id}", json={'quantity': 1}, headers=auth_header(sellers[0]))
    assert r.status_code == 404
    assert CartItem.query.get(line_id).quantity == 2


def test_clear_cart(client, two_seller_cart):
    r = client.post(f"{CART}/clear", headers=auth_header(two_seller_cart[0]))
    assert r.status_code == 200
    assert CartItem.query.count() == 0
