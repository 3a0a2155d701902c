"""
Embersome Site Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask
from embersome.extensions import mail, notifier, sessions, store
from embersome.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    # No public static folder: the only assets belong to the gated admin area
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    # Initialize extensions
    mail.init_app(app)
    notifier.init_app(app)
    sessions.init_app(app)
    store.init_app(app)

    # Register blueprints
    from embersome.auth import auth_bp
    from embersome.admin import admin_bp, admin_api_bp
    from embersome.submissions import submissions_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(admin_api_bp)
    app.register_blueprint(submissions_bp)

    from embersome.errors import register_error_handlers
    register_error_handlers(app)

    logger.debug('Submissions stored in %s', app.config['DATA_DIR'])
    return app
