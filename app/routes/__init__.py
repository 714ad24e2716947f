from .auth import auth_bp
from .catalog import catalog_bp
from .buyer import buyer_bp
from .seller import seller_bp
from .admin import admin_bp


__all__ = [
    'auth_bp',
    'catalog_bp',
    'buyer_bp',
    'seller_bp',
    'admin_bp',
]
