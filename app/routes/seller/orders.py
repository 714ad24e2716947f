import logging
from flask import request, jsonify, g
from models import db
from models.order import Order
from app.constants import ORDER_STATUSES
from app.schemas.seller import OrderStatusRequest
from app.services.orders import OrderError, order_detail, update_status_by_seller, seller_stats
from app.utils import transactional, error, internal_error_response, validate_schema
from . import seller_bp

logger = logging.getLogger(__name__)


@seller_bp.route("/orders", methods=["GET"])
def list_orders():
    """
    Orders addressed to this seller's storefront.
    ---
    tags: [Seller]
    parameters:
      - in: query
        name: status
        type: string
        required: false
    """
    query = Order.query.filter_by(seller_id=g.seller.id)
    status = request.args.get("status")
    if status:
        if status not in ORDER_STATUSES:
            return error("Invalid status filter", status=400)
        query = query.filter_by(status=status)
    orders = query.order_by(Order.created_at.desc(), Order.id.desc()).all()
    return jsonify({"status": "success", "orders": [order_detail(o) for o in orders]}), 200


@seller_bp.route("/orders/<int:order_id>/status", methods=["POST"])
@validate_schema(OrderStatusRequest)
def update_order_status(order_id):
    order = db.session.get(Order, order_id)
    if not order or order.seller_id != g.seller.id:
        return error("Order not found", status=404)
    new_status = request.validated_data.status
    try:
        with transactional("Failed to update order status"):
            update_status_by_seller(g.seller, order, new_status)
    except OrderError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    logger.info({"event": "order_status_updated", "order_id": order.id, "status": new_status})
    return jsonify({"status": "success", "order": order.to_dict()}), 200


@seller_bp.route("/stats", methods=["GET"])
def stats():
    return jsonify({"status": "success", "stats": seller_stats(g.seller)}), 200
