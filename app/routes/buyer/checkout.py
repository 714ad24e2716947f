import logging
from flask import request, jsonify, current_app, g
from flask_limiter.util import get_remote_address
from extensions import limiter
from app.schemas.checkout import CheckoutRequest
from app.services.checkout import CheckoutError, generate_order_number, place_order
from app.utils import error, validate_schema
from . import buyer_bp

logger = logging.getLogger(__name__)


def _order_number_factory():
    prefix = current_app.config["ORDER_NUMBER_PREFIX"]
    return lambda: generate_order_number(prefix=prefix)


@buyer_bp.route("/checkout", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["CHECKOUT_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many checkout attempts",
)
@validate_schema(CheckoutRequest)
def checkout():
    """
    Place one order per seller in the cart.
    ---
    tags: [Buyer]
    parameters:
      - in: header
        name: Idempotency-Key
        type: string
        required: false
    responses:
      200:
        description: One order per seller
      400:
        description: Invalid address or payment method, or empty cart
      503:
        description: Cart could not be read
      500:
        description: One or more seller orders failed
    """
    data: CheckoutRequest = request.validated_data
    token = request.headers.get("Idempotency-Key") or data.checkout_token
    cfg = current_app.config
    try:
        result = place_order(
            current_app.checkout_store_factory(),
            g.auth_session,
            data.shipping_address.model_dump(),
            data.payment_method,
            token,
            max_workers=cfg["CHECKOUT_MAX_WORKERS"],
            default_currency=cfg["DEFAULT_CURRENCY"],
            order_number_factory=_order_number_factory(),
        )
    except CheckoutError as e:
        logger.warning({"event": "checkout_rejected", "outcome": e.outcome, "buyer_id": request.user.id, "reason": e.message})
        return error(e.message, status=e.status, **e.response_fields())

    return jsonify({
        "status": "success",
        "message": "Order placed",
        "order_numbers": [o["order_number"] for o in result.orders],
        "orders": result.orders,
        "replayed": result.replayed,
        "cart_cleared": result.cart_cleared,
    }), 200
