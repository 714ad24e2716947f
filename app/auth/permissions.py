"""
Central registry of allowed actions per role, and the single authorization
check every protected blueprint runs once per request.
"""
from typing import NamedTuple, Optional

ROLE_SCOPES = {
    "buyer":  {"manage_cart", "place_order", "view_own_orders"},
    "seller": {"manage_cart", "place_order", "view_own_orders", "manage_products", "fulfil_order"},
    "admin":  {"*"},
}

ROLES = tuple(ROLE_SCOPES)


class AuthSession(NamedTuple):
    user_id: str
    role: Optional[str]


class AuthorizedSession(NamedTuple):
    user_id: str
    role: str
    granted_by: str


class AccessDenied(Exception):
    def __init__(self, message="Forbidden", status=403):
        super().__init__(message)
        self.message = message
        self.status = status


def role_has_scope(role: str, action: str) -> bool:
    scopes = ROLE_SCOPES.get(role, set())
    return "*" in scopes or action in scopes


def _to_list(obj):
    return list(obj) if isinstance(obj, (list, tuple, set)) else [obj]


def require_role(session: Optional[AuthSession], required) -> AuthorizedSession:
    """Authorize a session against a role or ``role:action`` requirement.

    ``required`` may be a single entry or a list of entries; the session is
    authorized if ANY entry matches:
      - "seller" matches when the session role is seller
      - "seller:place_order" matches when the role is seller AND the seller
        role carries the place_order scope

    Raises AccessDenied (401 without a session, 403 otherwise).
    """
    if session is None or not session.user_id:
        raise AccessDenied("Authentication required", status=401)
    role = session.role
    if not role:
        raise AccessDenied("Role missing")
    for entry in _to_list(required):
        if ":" in entry:
            r, action = entry.split(":", 1)
            if role == r and role_has_scope(role, action):
                return AuthorizedSession(session.user_id, role, entry)
        elif role == entry:
            return AuthorizedSession(session.user_id, role, entry)
    raise AccessDenied("Forbidden")
