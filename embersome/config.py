"""
Configuration settings for the Embersome site backend
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

# Values already present in the environment win over the .env file
load_dotenv(os.path.join(basedir, '.env'))


def _smtp_password():
    # Gmail app passwords are often pasted with spaces between the groups
    return ''.join((os.environ.get('SMTP_PASS') or '').split())


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Flat-file storage for form submissions
    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(basedir, 'data')

    # Admin credentials (single shared password, sessions kept in memory)
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'embersome2026'
    ADMIN_COOKIE_NAME = 'ember_session'
    ADMIN_COOKIE_SECURE = True
    SESSION_DURATION = timedelta(hours=24)

    # Outgoing mail (Flask-Mail)
    MAIL_SERVER = os.environ.get('SMTP_HOST') or 'smtp.gmail.com'
    MAIL_PORT = int(os.environ.get('SMTP_PORT') or 587)
    MAIL_USE_TLS = True
    MAIL_USE_SSL = False
    MAIL_USERNAME = os.environ.get('SMTP_USER') or ''
    MAIL_PASSWORD = _smtp_password()
    MAIL_DEFAULT_SENDER = ('Embersome', MAIL_USERNAME)
    NOTIFY_EMAIL = os.environ.get('NOTIFY_EMAIL') or MAIL_USERNAME
    MAIL_ASYNC = True

    PORT = int(os.environ.get('PORT') or 3000)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    ADMIN_PASSWORD = 'test-password'
    ADMIN_COOKIE_SECURE = False
    MAIL_USERNAME = 'site@example.com'
    MAIL_PASSWORD = 'app-password'
    MAIL_DEFAULT_SENDER = ('Embersome', 'site@example.com')
    NOTIFY_EMAIL = 'owner@example.com'
    MAIL_SUPPRESS_SEND = True
    MAIL_ASYNC = False
