from decimal import Decimal
from app.version import API_PREFIX
from models import db, Order
from factories import VALID_ADDRESS, auth_header, make_user


def _place(client, buyer):
    r = client.post(f"{API_PREFIX}/buyer/checkout", json={'shipping_address': VALID_ADDRESS}, headers=auth_header(buyer))
    assert r.status_code == 200
    return r.get_json()['orders']


def test_buyer_lists_and_reads_own_orders(client, two_seller_cart):
    buyer = two_seller_cart[0]
    placed = _place(client, buyer)
    hdr = auth_header(buyer)

    r = client.get(f"{API_PREFIX}/buyer/orders", headers=hdr)
    assert r.status_code == 200
    assert {o['order_number'] for o in r.get_json()['orders']} == {o['order_number'] for o in placed}

    r = client.get(f"{API_PREFIX}/buyer/orders/{placed[0]['id']}", headers=hdr)
    assert r.status_code == 200
    detail = r.get_json()['order']
    assert detail['items'][0]['product_name'] == 'Basket'
    assert detail['payment']['payment_method'] == 'cash_on_delivery'
    assert detail['payment']['status'] == 'pending'
    assert detail['delivery']['status'] == 'pending'


def test_buyer_cannot_read_other_buyers_order(client, two_seller_cart):
    placed = _place(client, two_seller_cart[0])
    other = make_user('other@example.com')
    r = client.get(f"{API_PREFIX}/buyer/orders/{placed[0]['id']}", headers=auth_header(other))
    assert r.status_code == 404


def test_seller_sees_only_own_orders(client, two_seller_cart, sellers):
    _place(client, two_seller_cart[0])
    s1, _ = sellers
    r = client.get(f"{API_PREFIX}/seller/orders", headers=auth_header(s1))
    assert r.status_code == 200
    orders = r.get_json()['orders']
    assert len(orders) == 1
    assert orders[0]['seller_id'] == s1.seller.id
    assert orders[0]['total_amount'] == 200.0


def test_seller_status_flow_and_stats(client, two_seller_cart, sellers):
    _place(client, two_seller_cart[0])
    s1, _ = sellers
    hdr = auth_header(s1)
    order = Order.query.filter_by(seller_id=s1.seller.id).one()
    url = f"{API_PREFIX}/seller/orders/{order.id}/status"

    r = client.post(url, json={'status': 'shipped'}, headers=hdr)
    assert r.status_code == 400

    for status in ('confirmed', 'processing', 'shipped'):
        assert client.post(url, json={'status': status}, headers=hdr).status_code == 200
    assert db.session.get(Order, order.id).delivery.status == 'in_transit'

    stats = client.get(f"{API_PREFIX}/seller/stats", headers=hdr).get_json()['stats']
    assert stats['pending_orders'] == 0
    assert stats['total_revenue'] == 0.0

    assert client.post(url, json={'status': 'delivered'}, headers=hdr).status_code == 200
    stats = client.get(f"{API_PREFIX}/seller/stats", headers=hdr).get_json()['stats']
    assert stats['total_orders'] == 1
    assert stats['total_products'] == 1
    assert stats['total_revenue'] == 200.0


def test_seller_cannot_update_other_sellers_order(client, two_seller_cart, sellers):
    _place(client, two_seller_cart[0])
    s1, s2 = sellers
    order = Order.query.filter_by(seller_id=s2.seller.id).one()
    r = client.post(f"{API_PREFIX}/seller/orders/{order.id}/status", json={'status': 'confirmed'}, headers=auth_header(s1))
    assert r.status_code == 404


def test_seller_cancel_only_before_processing(client, two_seller_cart, sellers):
    _place(client, two_seller_cart[0])
    s1, _ = sellers
    hdr = auth_header(s1)
    order = Order.query.filter_by(seller_id=s1.seller.id).one()
    url = f"{API_PREFIX}/seller/orders/{order.id}/status"
    client.post(url, json={'status': 'confirmed'}, headers=hdr)
    client.post(url, json={'status': 'processing'}, headers=hdr)
    assert client.post(url, json={'status': 'cancelled'}, headers=hdr).status_code == 400


def test_seller_creates_and_lists_products(client, sellers):
    s1, _ = sellers
    hdr = auth_header(s1)
    r = client.post(f"{API_PREFIX}/seller/products", json={'name': 'Copper Bowl', 'price': '45.50'}, headers=hdr)
    assert r.status_code == 201
    product = r.get_json()['product']
    assert product['seller_id'] == s1.seller.id
    assert product['slug'].startswith('copper-bowl-')

    r = client.get(f"{API_PREFIX}/seller/products", headers=hdr)
    assert [p['name'] for p in r.get_json()['products']] == ['Copper Bowl']

    r = client.get(f"{API_PREFIX}/products/{product['slug']}")
    assert r.status_code == 200
    assert r.get_json()['product']['price'] == 45.5


def test_catalog_search(client, two_seller_cart):
    r = client.get(f"{API_PREFIX}/products", query_string={'q': 'bask'})
    assert [p['name'] for p in r.get_json()['products']] == ['Basket']
    assert client.get(f"{API_PREFIX}/products/nope").status_code == 404


def test_seller_without_storefront_forbidden(client):
    user = make_user('lonely@example.com')
    user.role = 'seller'
    db.session.commit()
    r = client.get(f"{API_PREFIX}/seller/orders", headers=auth_header(user))
    assert r.status_code == 403


def test_order_totals_are_exact(client, buyer, sellers):
    from factories import make_product, add_to_cart
    add_to_cart(buyer, make_product(sellers[0].seller, 'Thread', '0.10'), 3)
    _place(client, buyer)
    assert Order.query.one().total_amount == Decimal('0.30')
