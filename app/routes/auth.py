from flask import Blueprint, request, jsonify, current_app
from flask_limiter.util import get_remote_address
from werkzeug.security import generate_password_hash, check_password_hash
import logging
from app.version import API_PREFIX
from extensions import limiter
from models import db
from models.user import UserProfile
from models.cart import Cart
from app.schemas.auth import RegisterRequest, LoginRequest, RefreshRequest
from app.utils import (
    error,
    transactional,
    internal_error_response,
    validate_schema,
    create_access_token,
    create_refresh_token,
    decode_token,
    TokenError,
)

auth_bp = Blueprint("auth", __name__, url_prefix=API_PREFIX)
logger = logging.getLogger(__name__)


def _token_pair(user):
    return {
        "access_token": create_access_token(user.id, user.role),
        "refresh_token": create_refresh_token(user.id),
        "expires_in": current_app.config["ACCESS_TOKEN_LIFETIME_MIN"] * 60,
    }


@auth_bp.route("/auth/register", methods=["POST"])
@validate_schema(RegisterRequest)
def register_handler():
    """
    Register a buyer account.
    ---
    tags: [Auth]
    responses:
      201: {description: Registered}
      409: {description: Email already registered}
    """
    data: RegisterRequest = request.validated_data
    email = data.email.strip().lower()
    if UserProfile.query.filter_by(email=email).first():
        return error("Email already registered", status=409)

    user = UserProfile(
        email=email,
        password_hash=generate_password_hash(data.password),
        full_name=data.full_name,
        phone=data.phone,
        role="buyer",
    )
    try:
        with transactional("Failed to register user"):
            db.session.add(user)
            db.session.flush()
            db.session.add(Cart(user_id=user.id))
    except Exception:
        return internal_error_response()

    logger.info({"event": "user_registered", "user_id": user.id})
    return jsonify({"status": "success", "user": user.to_dict(), **_token_pair(user)}), 201


@auth_bp.route("/auth/login", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many login attempts from this IP",
)
@validate_schema(LoginRequest)
def login_handler():
    """
    Exchange email and password for an access/refresh token pair.
    ---
    tags: [Auth]
    """
    data: LoginRequest = request.validated_data
    user = UserProfile.query.filter_by(email=data.email.strip().lower()).first()
    if not user or not user.password_hash or not check_password_hash(user.password_hash, data.password):
        return error("Invalid email or password", status=401)
    return jsonify({"status": "success", "user": user.to_dict(), **_token_pair(user)}), 200


@auth_bp.route("/auth/refresh", methods=["POST"])
@validate_schema(RefreshRequest)
def refresh_tokens():
    try:
        payload = decode_token(request.validated_data.refresh_token, expected_type="refresh")
    except TokenError as e:
        return error(str(e), status=401)

    user = db.session.get(UserProfile, payload.get("sub"))
    if not user:
        return error("Unknown user", status=401)
    return jsonify(_token_pair(user)), 200


@auth_bp.route("/logout", methods=["POST"])
def logout_handler():
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return error("Token missing", status=401)
    token = auth.split(" ", 1)[1]
    try:
        decode_token(token)
    except TokenError as e:
        return error(str(e), status=401)
    # tokens are stateless; the client drops them
    return jsonify({"status": "success", "message": "Logged out"}), 200
