"""
Admin Session Service

Sessions live only in process memory. Restarting the server logs every
admin out, which is fine: logging back in is a single password prompt.
"""

import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone

from embersome.models import Session

logger = logging.getLogger(__name__)

DEFAULT_DURATION = timedelta(hours=24)


def _utcnow():
    return datetime.now(timezone.utc)


class SessionManager:
    """Issues and checks opaque admin session tokens.

    Expired sessions are dropped lazily, the next time their token is
    looked up; there is no background sweep.
    """

    def __init__(self, app=None, duration=DEFAULT_DURATION, clock=_utcnow):
        self.duration = duration
        self.clock = clock
        self._sessions = {}
        self._lock = threading.Lock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.duration = app.config.get('SESSION_DURATION', DEFAULT_DURATION)
        self.clear()
        app.extensions['session_manager'] = self

    def create_session(self):
        """Start a session and return its token."""
        token = secrets.token_hex(32)
        now = self.clock()
        with self._lock:
            self._sessions[token] = Session(token, now, now + self.duration)
        return token

    def is_valid_session(self, token):
        if not token:
            return False
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return False
            if session.is_expired(self.clock()):
                del self._sessions[token]
                logger.info('Admin session expired')
                return False
        return True

    def delete_session(self, token):
        with self._lock:
            self._sessions.pop(token, None)

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def __len__(self):
        return len(self._sessions)
