from flask import Blueprint, request, jsonify
from app.version import API_PREFIX
from app.constants import PAYMENT_METHODS, DELIVERY_METHODS, ZAMBIAN_PROVINCES, CURRENCIES
from app.utils import error
from models.product import Product

catalog_bp = Blueprint("catalog", __name__, url_prefix=API_PREFIX)


@catalog_bp.route("/products", methods=["GET"])
def list_products():
    """
    List active products.
    ---
    tags: [Catalog]
    parameters:
      - in: query
        name: q
        type: string
        required: false
    """
    query = Product.query.filter_by(is_active=True)
    q = (request.args.get("q") or "").strip()
    if q:
        query = query.filter(Product.name.ilike(f"%{q}%"))
    products = query.order_by(Product.id).limit(100).all()
    return jsonify({"status": "success", "products": [p.to_dict() for p in products]}), 200


@catalog_bp.route("/products/<slug>", methods=["GET"])
def get_product(slug):
    product = Product.query.filter_by(slug=slug, is_active=True).first()
    if not product:
        return error("Product not found", status=404)
    return jsonify({"status": "success", "product": product.to_dict()}), 200


@catalog_bp.route("/checkout/options", methods=["GET"])
def checkout_options():
    """Values a client needs to render the checkout form."""
    return jsonify({
        "status": "success",
        "payment_methods": [{"id": k, "label": v} for k, v in PAYMENT_METHODS.items()],
        "delivery_methods": [{"id": k, **v} for k, v in DELIVERY_METHODS.items()],
        "provinces": list(ZAMBIAN_PROVINCES),
        "currencies": list(CURRENCIES),
    }), 200
