"""
Admin Session Model
"""


class Session:
    """An authenticated admin session held in process memory"""

    def __init__(self, token, created, expires):
        self.token = token
        self.created = created
        self.expires = expires

    def is_expired(self, now):
        return now > self.expires

    def __repr__(self):
        return f'<Session expires:{self.expires.isoformat()}>'
