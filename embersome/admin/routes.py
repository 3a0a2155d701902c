"""
Admin Page Routes

The dashboard page and its assets are only served to a logged-in admin.
"""

import os

from flask import render_template, send_from_directory

from embersome.admin import admin_bp
from embersome.admin.decorators import admin_required

ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'assets')


@admin_bp.route('/admin')
@admin_required
def admin_dashboard():
    """Admin dashboard shell; the data comes from the admin API."""
    return render_template('admin/dashboard.html')


@admin_bp.route('/<any("admin.css", "admin.js"):filename>')
@admin_required
def admin_asset(filename):
    return send_from_directory(ASSETS_DIR, filename)
