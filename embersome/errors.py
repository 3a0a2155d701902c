"""
Error Handlers

API clients get JSON errors; everything else keeps Flask's default pages.
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Answer HTTP errors under ``/api/`` with ``{success: false, error}``."""

    @app.errorhandler(HTTPException)
    def api_http_error(e):
        if e.code is None or e.code < 400 or not request.path.startswith('/api/'):
            return e
        return jsonify(success=False, error=e.description or e.name), e.code

    @app.errorhandler(Exception)
    def api_unexpected_error(e):
        if isinstance(e, HTTPException):
            return api_http_error(e)
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        if request.path.startswith('/api/'):
            return jsonify(success=False, error='Internal server error'), 500
        return 'Internal Server Error', 500
