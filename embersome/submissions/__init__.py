"""
Submissions Blueprint

Public form endpoints of the landing page.
"""

from flask import Blueprint

submissions_bp = Blueprint('submissions', __name__, url_prefix='/api')

from embersome.submissions import routes  # noqa: E402, F401
