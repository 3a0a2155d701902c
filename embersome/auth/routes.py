"""
Auth Routes

The admin logs in with the shared ``ADMIN_PASSWORD`` and receives an
HttpOnly, SameSite=Strict session cookie.
"""

import hmac
import logging

from flask import current_app, jsonify, redirect, render_template, request, url_for

from embersome.admin.decorators import get_request_token
from embersome.auth import auth_bp
from embersome.extensions import sessions
from embersome.utils import request_data

logger = logging.getLogger(__name__)


@auth_bp.route('/login')
def login_page():
    """Login page; already authenticated admins go straight to the dashboard."""
    if sessions.is_valid_session(get_request_token()):
        return redirect(url_for('admin.admin_dashboard'))
    return render_template('admin/login.html')


@auth_bp.route('/api/auth/login', methods=['POST'])
def login():
    password = request_data().get('password')
    expected = current_app.config['ADMIN_PASSWORD']

    if isinstance(password, str) and hmac.compare_digest(password.encode(), expected.encode()):
        token = sessions.create_session()
        response = jsonify(success=True)
        response.set_cookie(current_app.config['ADMIN_COOKIE_NAME'], token,
                            max_age=int(sessions.duration.total_seconds()),
                            path='/',
                            secure=current_app.config['ADMIN_COOKIE_SECURE'],
                            httponly=True,
                            samesite='Strict')
        logger.info('[AUTH] Admin logged in from %s', request.remote_addr)
        return response

    logger.warning('[AUTH] Failed login attempt from %s', request.remote_addr)
    return jsonify(success=False, error='Wrong password'), 401


@auth_bp.route('/api/auth/logout', methods=['POST'])
def logout():
    token = get_request_token()
    if token:
        sessions.delete_session(token)
    response = jsonify(success=True)
    response.delete_cookie(current_app.config['ADMIN_COOKIE_NAME'], path='/',
                           secure=current_app.config['ADMIN_COOKIE_SECURE'],
                           httponly=True, samesite='Strict')
    return response


@auth_bp.route('/api/auth/check')
def check():
    return jsonify(authenticated=sessions.is_valid_session(get_request_token()))
