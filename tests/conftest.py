import pytest

from embersome import create_app
from embersome.config import TestConfig


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        DATA_DIR = str(tmp_path / 'data')

    return create_app(Config)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    client = app.test_client()
    r = client.post('/api/auth/login', json={'password': TestConfig.ADMIN_PASSWORD})
    assert r.status_code == 200
    return client
