import pytest

from coffeebeans.config import TestConfig


def test_health(client):
    r = client.get('/health')
    assert r.status_code == 200
    assert r.get_json() == {'status': 'ok'}


def test_admin_login(client, session_store):
    r = client.post('/api/login', json={'password': TestConfig.ADMIN_PASSWORD})
    assert r.status_code == 200
    data = r.get_json()
    assert data['role'] == 'admin'
    assert session_store.find_admin(data['token']) is not None


@pytest.mark.parametrize('body', [{'password': 'nope'}, {}, None])
def test_admin_login_wrong_password(client, body):
    r = client.post('/api/login', json=body)
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Incorrect password'}


def test_reader_login(client, session_store):
    r = client.post('/api/reader-login', json={
        'username': '  Liza ',
        'password': TestConfig.READER_PASSWORD,
    })
    assert r.status_code == 200
    data = r.get_json()
    assert data['role'] == 'reader'
    assert data['username'] == 'Liza'
    assert data['token'].startswith('r_')
    assert session_store.find_reader(data['token']).username == 'Liza'


@pytest.mark.parametrize('body, status, message', [
    ({'password': TestConfig.READER_PASSWORD}, 400, 'Username and password required'),
    ({'username': 'Liza'}, 400, 'Username and password required'),
    ({'username': ' L ', 'password': TestConfig.READER_PASSWORD}, 400,
     'Username must be at least 2 characters'),
    ({'username': 'Liza', 'password': 'nope'}, 401, 'Incorrect password'),
])
def test_reader_login_failures(client, body, status, message):
    r = client.post('/api/reader-login', json=body)
    assert r.status_code == status
    assert r.get_json() == {'error': message}


def test_logout_requires_token(client):
    r = client.post('/api/logout')
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Unauthorized'}


def test_logout_ends_admin_session(client, admin_headers):
    r = client.post('/api/logout', headers=admin_headers)
    assert r.status_code == 200
    assert r.get_json() == {'ok': True}

    r = client.post('/api/entries', headers=admin_headers,
                    json={'type': 'Tula', 'title': 't', 'body': 'b'})
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Invalid session'}


def test_logout_ends_reader_session(client, session_store, reader_token):
    r = client.post('/api/logout', headers={'X-Reader-Token': reader_token})
    assert r.status_code == 200
    assert session_store.find_reader(reader_token) is None


def test_logout_unknown_token_is_ok(client):
    r = client.post('/api/logout', headers={'X-Admin-Token': 'stale'})
    assert r.status_code == 200


def test_whoami(client, admin_token, reader_token):
    r = client.get('/api/me', headers={'X-Reader-Token': reader_token})
    assert r.get_json() == {'role': 'reader', 'username': 'Maria'}

    r = client.get('/api/me', headers={'X-Admin-Token': admin_token})
    assert r.get_json() == {'role': 'admin'}

    r = client.get('/api/me')
    assert r.status_code == 401


def test_create_entry(client, admin_headers):
    r = client.post('/api/entries', headers=admin_headers,
                    json={'type': 'Kuwento', 'title': ' T ', 'body': 'B'})
    assert r.status_code == 201
    data = r.get_json()
    assert data['id'] == 1
    assert data['type'] == 'Kuwento'
    assert data['title'] == 'T'
    assert data['body'] == 'B'
    assert data['created_at']


def test_create_entry_checks_header_before_body(client):
    r = client.post('/api/entries', json={})
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Unauthorized'}


def test_create_entry_rejects_reader(client, reader_token):
    r = client.post('/api/entries', headers={'X-Admin-Token': reader_token},
                    json={'type': 'Tula', 'title': 't', 'body': 'b'})
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Invalid session'}

    r = client.post('/api/entries', headers={'X-Reader-Token': reader_token},
                    json={'type': 'Tula', 'title': 't', 'body': 'b'})
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Unauthorized'}


@pytest.mark.parametrize('body, message', [
    ({'title': 't', 'body': 'b'}, 'type, title, body required'),
    ({'type': 'Tula', 'body': 'b'}, 'type, title, body required'),
    ({'type': 'Tula', 'title': 't', 'body': '  '}, 'type, title, body required'),
    ({'type': 'Nobela', 'title': 't', 'body': 'b'}, 'Invalid type'),
])
def test_create_entry_validation(client, admin_headers, entry_store, body, message):
    r = client.post('/api/entries', headers=admin_headers, json=body)
    assert r.status_code == 400
    assert r.get_json() == {'error': message}
    assert entry_store.count() == 0


def test_list_entries(client, entry_store):
    entry_store.create('Tula', 'first', 'x')
    entry_store.create('Saloobin', 'second', 'x')
    entry_store.create('Tula', 'third', 'x')

    r = client.get('/api/entries')
    assert r.status_code == 200
    assert [e['title'] for e in r.get_json()] == ['third', 'second', 'first']

    r = client.get('/api/entries?type=Tula')
    assert [e['title'] for e in r.get_json()] == ['third', 'first']

    r = client.get('/api/entries?type=all')
    assert len(r.get_json()) == 3


def test_stats_endpoint(client, entry_store):
    r = client.get('/api/stats')
    assert r.get_json() == {'total': 0, 'byType': {}, 'latest': None}

    entry = entry_store.create('Pagninilay', 'a', 'x')
    r = client.get('/api/stats')
    data = r.get_json()
    assert data['total'] == 1
    assert data['byType'] == {'Pagninilay': 1}
    assert data['latest'] == entry.to_dict()['created_at']


def test_delete_entry(client, admin_headers, entry_store):
    entry_id = entry_store.create('Tula', 'a', 'x').id

    r = client.delete(f'/api/entries/{entry_id}', headers=admin_headers)
    assert r.status_code == 200
    assert r.get_json() == {'ok': True, 'id': entry_id}

    r = client.delete(f'/api/entries/{entry_id}', headers=admin_headers)
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Not found'}


def test_delete_entry_out_of_range_id(client, admin_headers):
    r = client.delete('/api/entries/99999999999999999999', headers=admin_headers)
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Not found'}

    r = client.delete('/api/entries/0', headers=admin_headers)
    assert r.status_code == 404


def test_delete_entry_checks_token_before_id(client, admin_headers):
    r = client.delete('/api/entries/abc')
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Unauthorized'}

    r = client.delete('/api/entries/abc', headers=admin_headers)
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Not found'}


def test_delete_entry_requires_admin(client, entry_store):
    entry = entry_store.create('Tula', 'a', 'x')

    r = client.delete(f'/api/entries/{entry.id}')
    assert r.status_code == 401
    assert entry_store.count() == 1


def test_unknown_route_is_json(client):
    r = client.get('/api/nothing-here')
    assert r.status_code == 404
    assert r.get_json() == {'error': 'Not found'}


def test_api_sends_cors_headers(client):
    r = client.get('/api/entries', headers={'Origin': 'http://localhost:5173'})
    assert r.status_code == 200
    assert r.headers['Access-Control-Allow-Origin'] == '*'
