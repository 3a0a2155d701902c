"""
Submission Validation

Turns an untyped form payload into the field dict the store expects, plus
the list of every rule it broke.
"""

import re

from embersome.models import REQUIRED_FIELDS

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def _clean(value):
    if value is None:
        return ''
    return str(value).strip()


def is_valid_email(value):
    return bool(EMAIL_RE.match(_clean(value)))


def validate_submission(variant, payload):
    """Validate and normalise a submission payload.

    Returns ``(fields, errors)``. ``fields`` holds every field of the
    variant, trimmed, with missing optional fields set to ``''``. When
    ``errors`` is non-empty the fields must not be stored.
    """
    if not hasattr(payload, 'get'):
        payload = {}

    fields = {name: _clean(payload.get(name)) for name in variant.fields}

    errors = []
    for name in REQUIRED_FIELDS:
        if not fields[name]:
            errors.append(f'{name.capitalize()} is required.')
    if fields['email'] and not is_valid_email(fields['email']):
        errors.append('Invalid email.')

    return fields, errors
