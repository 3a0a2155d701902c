"""
Auth Blueprint

Admin login, logout and session check.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from embersome.auth import routes  # noqa: E402, F401
