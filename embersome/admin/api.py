"""
Admin API Routes

JSON endpoints behind the admin dashboard: overview counts, submission
lists and deletion, and an email smoke test.
"""

import logging

from flask import jsonify, render_template

from embersome.admin import admin_api_bp
from embersome.admin.decorators import admin_required
from embersome.extensions import notifier, store
from embersome.models import APPLICATION, BOOKING

logger = logging.getLogger(__name__)


@admin_api_bp.route('/dashboard')
@admin_required
def dashboard():
    """Overview stats for both submission kinds."""
    return jsonify(store.summary())


@admin_api_bp.route('/applications')
@admin_required
def list_applications():
    return jsonify(store.list_records(APPLICATION))


@admin_api_bp.route('/bookings')
@admin_required
def list_bookings():
    return jsonify(store.list_records(BOOKING))


@admin_api_bp.route('/applications/<record_id>', methods=['DELETE'])
@admin_required
def delete_application(record_id):
    removed = store.delete(APPLICATION, record_id)
    if removed:
        logger.info('[ADMIN] Deleted application %s', record_id)
    return jsonify(success=removed)


@admin_api_bp.route('/bookings/<record_id>', methods=['DELETE'])
@admin_required
def delete_booking(record_id):
    removed = store.delete(BOOKING, record_id)
    if removed:
        logger.info('[ADMIN] Deleted booking %s', record_id)
    return jsonify(success=removed)


@admin_api_bp.route('/email-test')
@admin_required
def email_test():
    """Send a test email right away and report what happened."""
    if not notifier.is_configured():
        return jsonify(ok=False,
                       message='SMTP not configured. Set SMTP_USER and SMTP_PASS '
                               '(Gmail App Password) in Environment.')
    if notifier.last_error:
        return jsonify(ok=False, message=f'Connection failed: {notifier.last_error}')

    try:
        recipient = notifier.send_test(render_template('email/test.html'))
    except Exception as e:
        logger.exception('Test email failed')
        return jsonify(ok=False, message=str(e) or e.__class__.__name__), 500
    return jsonify(ok=True, message=f'Test email sent to {recipient}')
