from app.version import API_PREFIX
from models import UserProfile, Cart


def register(client, email="new@example.com", password="s3cretpass", **extra):
    return client.post(f"{API_PREFIX}/auth/register", json={"email": email, "password": password, **extra})


def login(client, email="new@example.com", password="s3cretpass"):
    return client.post(f"{API_PREFIX}/auth/login", json={"email": email, "password": password})


def logout(client, token=None):
    headers = {}
    if token:
        headers['Authorization'] = token
    return client.post(f"{API_PREFIX}/logout", headers=headers)


def test_register_creates_buyer_with_cart(client):
    r = register(client, full_name="Natasha Phiri")
    assert r.status_code == 201
    js = r.get_json()
    assert js["user"]["role"] == "buyer"
    assert js["access_token"] and js["refresh_token"]
    user = UserProfile.query.filter_by(email="new@example.com").one()
    assert user.password_hash != "s3cretpass"
    assert Cart.query.filter_by(user_id=user.id).count() == 1


def test_register_duplicate_email(client):
    register(client)
    r = register(client, email="NEW@example.com")
    assert r.status_code == 409


def test_register_validates_body(client):
    r = register(client, email="not-an-email", password="short")
    assert r.status_code == 400
    fields = {e["field"] for e in r.get_json()["errors"]}
    assert fields == {"email", "password"}


def test_login_success_and_failure(client):
    register(client)
    r = login(client)
    assert r.status_code == 200
    token = r.get_json()["access_token"]
    assert client.get(f"{API_PREFIX}/buyer/cart", headers={"Authorization": f"Bearer {token}"}).status_code == 200

    assert login(client, password="wrongpassword").status_code == 401
    assert login(client, email="ghost@example.com").status_code == 401


def test_logout_requires_token(client):
    assert logout(client).status_code == 401
    assert logout(client, "Bearer garbage").status_code == 401


def test_logout_with_valid_token(client):
    token = register(client).get_json()["access_token"]
    r = logout(client, f"Bearer {token}")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Logged out"
