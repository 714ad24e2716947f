from .responses import ok, error, validation_error_response, internal_error_response
from .auth import auth_required, role_required, current_session
from .validation import validate_schema
from .db import transactional
from .money import to_money
from .jwt import (
    create_access_token,
    create_refresh_token,
    decode_token,
    TokenError,
)

__all__ = [
    'ok',
    'error',
    'validation_error_response',
    'internal_error_response',
    'auth_required',
    'role_required',
    'current_session',
    'create_access_token',
    'create_refresh_token',
    'decode_token',
    'TokenError',
    'validate_schema',
    'transactional',
    'to_money',
]
