"""
Email Notifications

Operator notifications and submitter confirmations sent with Flask-Mail.
Sending is best effort: a failure is logged and never reaches the request
that triggered it.
"""

import logging
import threading

from flask import current_app
from flask_mail import Message

logger = logging.getLogger(__name__)

PLACEHOLDER_PASSWORD = 'YOUR_APP_PASSWORD_HERE'


class Notifier:
    """Sends mail through a ``flask_mail.Mail`` instance.

    With ``MAIL_ASYNC`` enabled each message goes out on its own daemon
    thread inside a fresh application context, so the HTTP response never
    waits on the SMTP server.
    """

    def __init__(self, mail, app=None):
        self.mail = mail
        self.last_error = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.last_error = None
        app.extensions['notifier'] = self
        if not self.is_configured(app):
            logger.warning('Email not configured: set SMTP_USER and SMTP_PASS (use a Gmail App Password)')
        elif not app.testing:
            threading.Thread(target=self.verify, args=(app,), daemon=True).start()

    @staticmethod
    def is_configured(app=None):
        config = (app or current_app).config
        password = config.get('MAIL_PASSWORD')
        return bool(config.get('MAIL_USERNAME') and password and password != PLACEHOLDER_PASSWORD)

    def verify(self, app):
        """Open one SMTP connection to check the credentials."""
        with app.app_context():
            try:
                with self.mail.connect():
                    pass
            except Exception as e:
                self.last_error = str(e) or e.__class__.__name__
                logger.error('Email verify failed: %s', self.last_error)
                return False
        self.last_error = None
        logger.info('Email configured and ready')
        return True

    # -- public collaborator interface ------------------------------------

    def send_notification(self, subject, html_body):
        """Tell the site operator about a new submission."""
        if not self.is_configured():
            logger.warning('Notification skipped (email not configured): %s', subject)
            return None
        msg = Message(subject, recipients=[current_app.config['NOTIFY_EMAIL']], html=html_body)
        return self._dispatch(msg, f'notification "{subject}"')

    def send_confirmation(self, to_address, to_name, subject, html_body):
        """Thank a submitter; silently skipped when email is not configured."""
        if not self.is_configured():
            return None
        msg = Message(subject, recipients=[(to_name, to_address)], html=html_body)
        return self._dispatch(msg, f'confirmation to {to_address}')

    def send_test(self, html_body):
        """Send a test message synchronously; errors propagate to the caller."""
        recipient = current_app.config['NOTIFY_EMAIL']
        self.mail.send(Message('Embersome email test', recipients=[recipient], html=html_body))
        logger.info('Test email sent to %s', recipient)
        return recipient

    # -- delivery ---------------------------------------------------------

    def _dispatch(self, msg, description):
        app = current_app._get_current_object()
        if not app.config.get('MAIL_ASYNC', True):
            return self._deliver(app, msg, description)
        thread = threading.Thread(target=self._deliver, args=(app, msg, description), daemon=True)
        thread.start()
        return thread

    def _deliver(self, app, msg, description):
        with app.app_context():
            try:
                self.mail.send(msg)
            except Exception:
                logger.exception('Failed to send %s', description)
                return False
        logger.info('Sent %s', description)
        return True
