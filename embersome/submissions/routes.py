"""
Submission Routes

``/api/apply`` and ``/api/book`` validate the form, store it, then queue an
operator notification and a confirmation for the submitter. Email problems
are logged and never turn a stored submission into an error response.
"""

import logging
from datetime import datetime

from flask import jsonify, render_template

from embersome.extensions import notifier, store
from embersome.models import APPLICATION, BOOKING
from embersome.services import validate_submission
from embersome.submissions import submissions_bp
from embersome.utils import request_data

logger = logging.getLogger(__name__)


def _accept(variant):
    """Validate and store a submission; returns ``(entry, error_response)``."""
    fields, errors = validate_submission(variant, request_data())
    if errors:
        return None, (jsonify(success=False, errors=errors), 400)

    entry = store.append(variant, fields)
    logger.info('[%s] %s <%s>', variant.log_tag, entry['name'], entry['email'])
    return entry, None


@submissions_bp.route('/apply', methods=['POST'])
def apply():
    """Creator application form"""
    entry, error = _accept(APPLICATION)
    if error:
        return error

    first_name = entry['name'].split(' ')[0]
    submitted = datetime.now().strftime('%Y-%m-%d %H:%M')

    notifier.send_notification(
        f"New Application: {entry['name']}",
        render_template('email/application_notification.html', entry=entry, submitted=submitted))
    notifier.send_confirmation(
        entry['email'], entry['name'],
        'We got your application — Embersome',
        render_template('email/application_confirmation.html', first_name=first_name))

    return jsonify(success=True,
                   message="Application received! We'll be in touch within 48 hours.",
                   id=entry['id'])


@submissions_bp.route('/book', methods=['POST'])
def book():
    """Call booking form"""
    entry, error = _accept(BOOKING)
    if error:
        return error

    first_name = entry['name'].split(' ')[0]
    submitted = datetime.now().strftime('%Y-%m-%d %H:%M')

    notifier.send_notification(
        f"New Call Request: {entry['name']}",
        render_template('email/booking_notification.html', entry=entry, submitted=submitted))
    notifier.send_confirmation(
        entry['email'], entry['name'],
        'Call request received — Embersome',
        render_template('email/booking_confirmation.html', first_name=first_name,
                        preferred_time=entry['preferredTime']))

    return jsonify(success=True,
                   message="Call request received! We'll confirm a time via email.",
                   id=entry['id'])
