from models import UserProfile, Seller, Cart


def _invoke(app, *args):
    return app.test_cli_runner().invoke(args=list(args))


def test_create_seller(app):
    result = _invoke(app, 'create-user', 'maker@example.com', '--role', 'seller',
                     '--business-name', 'Kitwe Weavers', '--password', 'longenough1')
    assert result.exit_code == 0, result.output
    user = UserProfile.query.filter_by(email='maker@example.com').one()
    assert user.role == 'seller'
    assert Seller.query.filter_by(user_id=user.id).one().business_name == 'Kitwe Weavers'
    assert Cart.query.filter_by(user_id=user.id).count() == 1


def test_seller_needs_business_name(app):
    result = _invoke(app, 'create-user', 'maker@example.com', '--role', 'seller', '--password', 'longenough1')
    assert result.exit_code != 0
    assert 'business-name' in result.output


def test_duplicate_email_refused(app):
    _invoke(app, 'create-user', 'dup@example.com', '--password', 'longenough1')
    result = _invoke(app, 'create-user', 'dup@example.com', '--password', 'longenough1')
    assert result.exit_code != 0
    assert 'already registered' in result.output
