"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import admin_session_gate, login_required
from .errors import (
    ApiError,
    InvalidArgument,
    MissingField,
    NotFound,
    DuplicateSlug,
    Unauthorized
)
from .security import (
    UNKNOWN_IP,
    get_client_ip,
    hash_password,
    verify_password
)
from .helpers import (
    clean_text,
    get_json_body,
    parse_id,
    get_pagination,
    is_unique_violation,
    sanitize_content
)

__all__ = [
    # Decorators
    'admin_session_gate',
    'login_required',

    # Errors
    'ApiError',
    'InvalidArgument',
    'MissingField',
    'NotFound',
    'DuplicateSlug',
    'Unauthorized',

    # Security
    'UNKNOWN_IP',
    'get_client_ip',
    'hash_password',
    'verify_password',

    # Helpers
    'clean_text',
    'get_json_body',
    'parse_id',
    'get_pagination',
    'is_unique_violation',
    'sanitize_content'
]
