from flask import request, jsonify
from app.schemas.cart import AddCartItemRequest, UpdateCartItemRequest
from app.services import cart as cart_service
from app.services.cart import CartError
from app.utils import transactional, error, internal_error_response, validate_schema
from . import buyer_bp


@buyer_bp.route("/cart", methods=["GET"])
def view_cart():
    """
    Current cart with per-line and cart subtotals.
    ---
    tags: [Buyer]
    """
    return jsonify({"status": "success", "cart": cart_service.cart_view(request.user.id)}), 200


@buyer_bp.route("/cart/items", methods=["POST"])
@validate_schema(AddCartItemRequest)
def add_to_cart():
    """
    Add a product to the cart.
    ---
    tags: [Buyer]
    """
    data: AddCartItemRequest = request.validated_data
    try:
        with transactional("Failed to add to cart"):
            item = cart_service.add_item(request.user.id, data.product_id, data.quantity, data.variant_id)
    except CartError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Item added to cart", "item_id": item.id}), 200


@buyer_bp.route("/cart/items/<int:item_id>", methods=["PATCH"])
@validate_schema(UpdateCartItemRequest)
def update_cart_quantity(item_id):
    try:
        with transactional("Failed to update cart quantity"):
            cart_service.update_quantity(request.user.id, item_id, request.validated_data.quantity)
    except CartError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Cart quantity updated"}), 200


@buyer_bp.route("/cart/items/<int:item_id>", methods=["DELETE"])
def remove_item(item_id):
    try:
        with transactional("Failed to remove cart item"):
            cart_service.remove_item(request.user.id, item_id)
    except CartError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Item removed"}), 200


@buyer_bp.route("/cart/clear", methods=["POST"])
def clear_cart():
    try:
        with transactional("Failed to clear cart"):
            cart_service.clear(request.user.id)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Cart cleared"}), 200
