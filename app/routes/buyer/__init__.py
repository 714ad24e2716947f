from flask import Blueprint
from app.version import API_PREFIX
from app.utils import auth_required, role_required

buyer_bp = Blueprint("buyer", __name__, url_prefix=f"{API_PREFIX}/buyer")


@buyer_bp.before_request
@auth_required
@role_required(["buyer", "seller:place_order"])
def _enforce_buyer_role():
    """Ensure the requester is allowed to shop."""
    return None

from . import cart  # noqa: E402
from . import checkout  # noqa: E402
from . import orders  # noqa: E402
