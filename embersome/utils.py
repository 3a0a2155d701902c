"""
Request helpers shared by the form and auth endpoints.
"""

from flask import request


def request_data():
    """JSON object body if there is one, otherwise the submitted form.

    A JSON body that is not an object (a list, a string, ``null``) is not
    usable as fields, so the form is read instead and normally comes back empty.
    """
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else request.form
