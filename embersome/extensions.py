"""
Flask Extensions

Process-wide state owned by the server: outgoing mail, the in-memory admin
session table and the flat-file submission store. Each is bound to the
application in the factory.
"""

from flask_mail import Mail

from embersome.services import Notifier, RecordStore, SessionManager

# Outgoing mail
mail = Mail()
notifier = Notifier(mail)

# Admin sessions (memory only)
sessions = SessionManager()

# Submission files
store = RecordStore()
