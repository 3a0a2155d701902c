from embersome.config import TestConfig

ADMIN_PASSWORD = TestConfig.ADMIN_PASSWORD


def token_from(response):
    """Pull the session token out of a login response's Set-Cookie header."""
    cookie = response.headers['Set-Cookie'].split(';')[0]
    return cookie.split('=', 1)[1]


def test_wrong_password_is_rejected(client):
    r = client.post('/api/auth/login', json={'password': 'nope'})
    assert r.status_code == 401
    assert r.get_json() == {'success': False, 'error': 'Wrong password'}
    assert 'Set-Cookie' not in r.headers

    r = client.get('/api/auth/check')
    assert r.get_json() == {'authenticated': False}


def test_missing_password_is_rejected(client):
    r = client.post('/api/auth/login', json={})
    assert r.status_code == 401
    r = client.post('/api/auth/login', json={'password': 12345})
    assert r.status_code == 401
    r = client.post('/api/auth/login', json=[ADMIN_PASSWORD])
    assert r.status_code == 401


def test_login_sets_session_cookie(client):
    r = client.post('/api/auth/login', json={'password': ADMIN_PASSWORD})
    assert r.status_code == 200
    assert r.get_json() == {'success': True}

    cookie = r.headers['Set-Cookie']
    assert cookie.startswith('ember_session=')
    assert 'HttpOnly' in cookie
    assert 'SameSite=Strict' in cookie
    assert 'Max-Age=86400' in cookie
    assert 'Path=/' in cookie

    r = client.get('/api/auth/check')
    assert r.get_json() == {'authenticated': True}


def test_secure_cookie_flag_follows_config(app, client):
    app.config['ADMIN_COOKIE_SECURE'] = True
    r = client.post('/api/auth/login', json={'password': ADMIN_PASSWORD})
    assert 'Secure' in r.headers['Set-Cookie']


def test_form_login(client):
    r = client.post('/api/auth/login', data={'password': ADMIN_PASSWORD})
    assert r.status_code == 200


def test_bearer_token_is_accepted(app):
    login = app.test_client().post('/api/auth/login', json={'password': ADMIN_PASSWORD})
    token = token_from(login)

    other = app.test_client()
    r = other.get('/api/auth/check', headers={'Authorization': f'Bearer {token}'})
    assert r.get_json() == {'authenticated': True}
    r = other.get('/api/admin/applications', headers={'Authorization': f'Bearer {token}'})
    assert r.status_code == 200

    r = other.get('/api/auth/check', headers={'Authorization': 'Bearer not-a-token'})
    assert r.get_json() == {'authenticated': False}


def test_logout_invalidates_session(app):
    login = app.test_client().post('/api/auth/login', json={'password': ADMIN_PASSWORD})
    token = token_from(login)
    headers = {'Authorization': f'Bearer {token}'}

    client = app.test_client()
    r = client.post('/api/auth/logout', headers=headers)
    assert r.get_json() == {'success': True}
    assert 'ember_session=;' in r.headers['Set-Cookie']

    r = client.get('/api/auth/check', headers=headers)
    assert r.get_json() == {'authenticated': False}
    r = client.get('/api/admin/dashboard', headers=headers)
    assert r.status_code == 401


def test_logout_with_cookie(admin_client):
    admin_client.post('/api/auth/logout')
    r = admin_client.get('/api/auth/check')
    assert r.get_json() == {'authenticated': False}


def test_logout_without_session(client):
    r = client.post('/api/auth/logout')
    assert r.status_code == 200
    assert r.get_json() == {'success': True}


def test_admin_api_requires_session(client):
    for path in ('/api/admin/dashboard', '/api/admin/applications', '/api/admin/bookings',
                 '/api/admin/email-test'):
        r = client.get(path)
        assert r.status_code == 401
        assert r.get_json() == {'success': False, 'error': 'Not authenticated'}

    r = client.delete('/api/admin/applications/sub_x')
    assert r.status_code == 401


def test_admin_pages_redirect_to_login(client):
    for path in ('/admin', '/admin.js', '/admin.css'):
        r = client.get(path)
        assert r.status_code in (301, 302)
        assert r.headers['Location'].endswith('/login')


def test_admin_assets_have_no_ungated_static_route(client, admin_client):
    for path in ('/static/admin/admin.js', '/static/admin/admin.css'):
        assert client.get(path).status_code == 404
        assert admin_client.get(path).status_code == 404


def test_admin_pages_for_logged_in_admin(admin_client):
    r = admin_client.get('/admin')
    assert r.status_code == 200
    assert 'Embersome Admin' in r.get_data(as_text=True)

    r = admin_client.get('/admin.js')
    assert r.status_code == 200
    r.close()


def test_login_page_when_logged_in(admin_client):
    r = admin_client.get('/login')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/admin')


def test_login_page_when_logged_out(app):
    r = app.test_client().get('/login')
    assert r.status_code == 200
    assert 'Admin Login' in r.get_data(as_text=True)
