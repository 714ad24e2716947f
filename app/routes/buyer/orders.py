from flask import request, jsonify
from models.order import Order
from app.services.orders import order_detail
from app.utils import error
from . import buyer_bp


@buyer_bp.route("/orders", methods=["GET"])
def list_orders():
    """
    The buyer's orders, newest first.
    ---
    tags: [Buyer]
    """
    orders = (
        Order.query.filter_by(buyer_id=request.user.id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )
    return jsonify({"status": "success", "orders": [o.to_dict() for o in orders]}), 200


@buyer_bp.route("/orders/<int:order_id>", methods=["GET"])
def get_order(order_id):
    order = Order.query.filter_by(id=order_id, buyer_id=request.user.id).first()
    if not order:
        return error("Order not found", status=404)
    return jsonify({"status": "success", "order": order_detail(order)}), 200
