import pytest

from embersome.utils import request_data


def test_json_object_body_is_used(app):
    with app.test_request_context('/api/apply', method='POST', json={'name': 'Ana'}):
        assert request_data() == {'name': 'Ana'}


def test_form_body_is_used(app):
    with app.test_request_context('/api/apply', method='POST', data={'name': 'Ana'}):
        assert request_data().get('name') == 'Ana'


@pytest.mark.parametrize('body', [['Ana'], 'Ana', None, 42])
def test_non_object_json_falls_back_to_form(app, body):
    with app.test_request_context('/api/apply', method='POST', json=body):
        assert dict(request_data()) == {}
