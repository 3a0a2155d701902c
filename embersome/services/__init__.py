"""
Services Package

Exports all services for easy importing.
"""

from embersome.services.sessions import SessionManager
from embersome.services.store import RecordStore, isoformat_utc
from embersome.services.validation import validate_submission, is_valid_email
from embersome.services.notifications import Notifier

__all__ = [
    'SessionManager',
    'RecordStore',
    'isoformat_utc',
    'validate_submission',
    'is_valid_email',
    'Notifier'
]
