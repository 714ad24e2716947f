from functools import wraps
from flask import request, g
from .responses import error
from app.auth.permissions import AuthSession, AccessDenied, require_role
from .jwt import decode_token, TokenError
from models import db
from models.user import UserProfile


def current_session():
    return getattr(g, "auth_session", None)


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get("Authorization", "")
        if not auth:
            return error("Auth header missing", status=401)
        token = auth.split(" ", 1)[1] if auth.startswith("Bearer ") else auth
        try:
            payload = decode_token(token, expected_type="access")
        except TokenError as e:
            return error(str(e), status=401)

        user_id = payload.get("sub")
        user = db.session.get(UserProfile, user_id) if user_id else None
        if not user:
            return error("Unknown user", status=401)
        # the stored role wins over a stale token claim
        g.auth_session = AuthSession(user.id, user.role or payload.get("role"))
        request.user = user
        return func(*args, **kwargs)

    return wrapper


def role_required(required):
    """Authorize based on user role or scoped action, once per request."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                g.authorized = require_role(current_session(), required)
            except AccessDenied as e:
                return error(e.message, status=e.status)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
