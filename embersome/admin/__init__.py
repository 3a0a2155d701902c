"""
Admin Blueprints

``admin_bp`` serves the dashboard page, ``admin_api_bp`` the JSON API the
dashboard talks to. Both sit behind ``admin_required``.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)
admin_api_bp = Blueprint('admin_api', __name__, url_prefix='/api/admin')

from embersome.admin import routes, api  # noqa: E402, F401
