from werkzeug.datastructures import MultiDict

from embersome.models import APPLICATION, BOOKING
from embersome.services import validate_submission, is_valid_email


def test_valid_application_is_trimmed_and_defaulted():
    fields, errors = validate_submission(APPLICATION, {'name': '  Ana  ', 'email': ' ana@x.com '})
    assert errors == []
    assert fields == {'name': 'Ana', 'email': 'ana@x.com', 'platforms': '', 'audience': '', 'message': ''}


def test_booking_fields():
    fields, errors = validate_submission(BOOKING, {'name': 'Bo', 'email': 'bo@y.org',
                                                   'preferredTime': ' Friday 3pm ', 'extra': 'ignored'})
    assert errors == []
    assert fields == {'name': 'Bo', 'email': 'bo@y.org', 'preferredTime': 'Friday 3pm', 'topic': ''}


def test_all_missing_required_fields_are_reported():
    _, errors = validate_submission(APPLICATION, {})
    assert errors == ['Name is required.', 'Email is required.']

    _, errors = validate_submission(BOOKING, {'name': '   ', 'email': ''})
    assert errors == ['Name is required.', 'Email is required.']


def test_malformed_email_is_reported_with_other_errors():
    _, errors = validate_submission(APPLICATION, {'email': 'not-an-email'})
    assert errors == ['Name is required.', 'Invalid email.']


def test_non_mapping_payload_counts_as_empty():
    _, errors = validate_submission(APPLICATION, ['Ana', 'ana@x.com'])
    assert errors == ['Name is required.', 'Email is required.']


def test_form_payload():
    fields, errors = validate_submission(APPLICATION, MultiDict([('name', 'Ana'), ('email', 'ana@x.com')]))
    assert errors == []
    assert fields['name'] == 'Ana'


def test_email_shapes():
    assert is_valid_email('a@b.co')
    assert is_valid_email('first.last+tag@sub.example.com')
    assert not is_valid_email('a@b')
    assert not is_valid_email('a b@c.com')
    assert not is_valid_email('@c.com')
    assert not is_valid_email('a@@c.com')
