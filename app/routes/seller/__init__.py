from flask import Blueprint, request, g
from app.version import API_PREFIX
from app.utils import auth_required, role_required, error

seller_bp = Blueprint("seller", __name__, url_prefix=f"{API_PREFIX}/seller")


@seller_bp.before_request
@auth_required
@role_required("seller")
def _enforce_seller_role():
    """Ensure the requester is a seller with a storefront."""
    seller = request.user.seller
    if not seller:
        return error("Seller profile missing", status=403)
    g.seller = seller
    return None

from . import products  # noqa: E402
from . import orders  # noqa: E402
