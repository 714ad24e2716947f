from flask import request, jsonify, g
from models.product import Product
from app.schemas.seller import ProductRequest, ProductUpdateRequest
from app.services.products import ProductError, create_product as build_product, owned_product, update_product as apply_update
from app.utils import transactional, error, internal_error_response, validate_schema
from . import seller_bp


@seller_bp.route("/products", methods=["GET"])
def list_products():
    """
    Products listed by this seller.
    ---
    tags: [Seller]
    """
    products = Product.query.filter_by(seller_id=g.seller.id).order_by(Product.id.desc()).all()
    return jsonify({"status": "success", "products": [p.to_dict() for p in products]}), 200


@seller_bp.route("/products", methods=["POST"])
@validate_schema(ProductRequest)
def create_product():
    """
    List a new product.
    ---
    tags: [Seller]
    """
    try:
        with transactional("Failed to create product"):
            product = build_product(g.seller.id, request.validated_data)
    except ProductError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "product": product.to_dict()}), 201


@seller_bp.route("/products/<int:product_id>", methods=["PATCH"])
@validate_schema(ProductUpdateRequest)
def update_product(product_id):
    """
    Edit one of this seller's products. Orders already placed keep their copied data.
    ---
    tags: [Seller]
    """
    try:
        with transactional("Failed to update product"):
            product = apply_update(owned_product(g.seller.id, product_id), request.validated_data)
    except ProductError as e:
        return error(e.message, status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "product": product.to_dict()}), 200
