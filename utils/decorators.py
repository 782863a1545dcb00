"""
Decorators Module - Session gate for the admin area
"""

from functools import wraps
from flask import current_app, redirect, request, url_for
from flask_login import current_user


ADMIN_PREFIX = '/admin'


def _redirect_to_login():
    return redirect(url_for('auth.login'))


def is_admin_path(path):
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + '/')


def admin_session_gate():
    """before_request hook: every /admin route except login needs a session"""
    if not is_admin_path(request.path):
        return None
    if request.endpoint == 'auth.login' or request.path.rstrip('/') == ADMIN_PREFIX + '/login':
        return None
    if current_user.is_authenticated:
        return None

    current_app.logger.info(f"Redirecting unauthenticated request for {request.path} to login")
    return _redirect_to_login()


def login_required(f):
    """Decorator to require a logged-in admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return _redirect_to_login()
        return f(*args, **kwargs)
    return decorated_function
