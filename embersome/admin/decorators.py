"""
Admin Decorator

Admin access is a single shared password exchanged for an opaque session
token, carried in a cookie or a bearer header.
"""

from functools import wraps
from flask import current_app, jsonify, redirect, request, url_for

from embersome.extensions import sessions


def get_request_token():
    """Return the admin token from the session cookie or ``Authorization: Bearer``."""
    token = request.cookies.get(current_app.config['ADMIN_COOKIE_NAME'])
    if token:
        return token
    auth = request.headers.get('Authorization', '')
    if auth.startswith('Bearer '):
        return auth[len('Bearer '):].strip() or None
    return None


def admin_required(f):
    """Decorator to ensure the request carries a live admin session.

    API requests (``/api/...``) are answered with a 401 JSON body; page
    requests are redirected to the login page.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if sessions.is_valid_session(get_request_token()):
            return f(*args, **kwargs)
        if request.path.startswith('/api/'):
            return jsonify(success=False, error='Not authenticated'), 401
        return redirect(url_for('auth.login_page'))
    return wrapper
