from flask import Blueprint, jsonify, request
from app.version import API_PREFIX
from app.utils import auth_required, role_required, transactional, error, internal_error_response, validate_schema
from app.schemas.seller import AdminProductRequest, ProductUpdateRequest
from app.services.products import ProductError, create_product as build_product, update_product as apply_update
from app.services.orders import platform_stats
from models import db
from models.user import UserProfile, Seller
from models.order import Order
from models.product import Product

admin_bp = Blueprint("admin", __name__, url_prefix=f"{API_PREFIX}/admin")


@admin_bp.before_request
@auth_required
@role_required("admin")
def _enforce_admin_role():
    """Ensure the requester is an authenticated admin."""
    return None

@admin_bp.route("/users", methods=["GET"])
def list_users():
    users = UserProfile.query.order_by(UserProfile.created_at.desc()).limit(50).all()
    return jsonify({"status": "success", "users": [u.to_dict() for u in users]}), 200

@admin_bp.route("/sellers", methods=["GET"])
def list_sellers():
    sellers = Seller.query.order_by(Seller.id).limit(50).all()
    return jsonify({"status": "success", "sellers": [s.to_dict() for s in sellers]}), 200

@admin_bp.route("/sellers/<int:seller_id>/verify", methods=["POST"])
def verify_seller(seller_id):
    seller = db.session.get(Seller, seller_id)
    if not seller:
        return error("Seller not found", status=404)
    try:
        with transactional("Failed to verify seller"):
            seller.is_verified = True
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "seller": seller.to_dict()}), 200

@admin_bp.route("/orders", methods=["GET"])
def list_orders():
    orders = Order.query.order_by(Order.id.desc()).limit(50).all()
    return jsonify({"status": "success", "orders": [o.to_dict() for o in orders]}), 200

@admin_bp.route("/stats", methods=["GET"])
def stats():
    return jsonify({"status": "success", "stats": platform_stats()}), 200

@admin_bp.route("/products", methods=["GET"])
def list_products():
    """
    Every product on the platform, newest first.
    ---
    tags: [Admin]
    """
    products = Product.query.order_by(Product.id.desc()).limit(100).all()
    return jsonify({"status": "success", "products": [p.to_dict() for p in products]}), 200

@admin_bp.route("/products", methods=["POST"])
@validate_schema(AdminProductRequest)
def create_product():
    """
    Create a product on behalf of a seller.
    ---
    tags: [Admin]
    """
    data: AdminProductRequest = request.validated_data
    try:
        with transactional("Failed to create product"):
            product = build_product(data.seller_id, data)
    except ProductError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "product": product.to_dict()}), 201

@admin_bp.route("/products/<int:product_id>", methods=["PATCH"])
@validate_schema(ProductUpdateRequest)
def update_product(product_id):
    product = db.session.get(Product, product_id)
    if not product:
        return error("Product not found", status=404)
    try:
        with transactional("Failed to update product"):
            apply_update(product, request.validated_data)
    except ProductError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "product": product.to_dict()}), 200
