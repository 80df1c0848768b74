import jwt

from models import User, db


def signup(client, username='carol', password='password123', **extra):
    return client.post('/users/signup', json={'username': username, 'password': password, **extra})


def test_signup_creates_user_with_default_role(client, app):
    response = signup(client)

    assert response.status_code == 201
    body = response.get_json()
    assert body['username'] == 'carol'
    assert body['role'] == 'USER'
    assert 'password' not in body

    with app.app_context():
        stored = db.session.get(User, body['id'])
        assert stored.password != 'password123'


def test_signup_rejects_short_password(client):
    response = signup(client, password='short')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Password must be at least 8 characters long'}


def test_signup_rejects_duplicate_username(client):
    signup(client)
    response = signup(client, password='different-password')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Username already exists'}


def test_signup_rejects_unknown_role(client):
    response = signup(client, role='GUEST')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid role'}


def test_login_token_role_matches_stored_role(client, app):
    signup(client, username='dana', role='ADMIN')

    response = client.post('/users/login', json={'username': 'dana', 'password': 'password123'})

    assert response.status_code == 200
    body = response.get_json()
    assert body['user']['username'] == 'dana'
    assert body['user']['role'] == 'ADMIN'
    claims = jwt.decode(body['token'], 'test-secret', algorithms=['HS256'], issuer='pinnacle_app')
    assert claims['role'] == 'ADMIN'
    assert claims['id'] == body['user']['id']


def test_login_with_wrong_password(client):
    signup(client)
    response = client.post('/users/login', json={'username': 'carol', 'password': 'wrong-password'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid username or password'}


def test_login_with_unknown_user(client):
    response = client.post('/users/login', json={'username': 'nobody', 'password': 'password123'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid username or password'}


def test_login_with_non_string_password(client):
    signup(client)
    response = client.post('/users/login', json={'username': 'carol', 'password': 12345678})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid username or password'}


def test_signup_rejects_non_string_username(client):
    response = client.post('/users/signup', json={'username': ['carol'], 'password': 'password123'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Username must be a string'}


def test_get_user_and_missing_user(client, user):
    response = client.get(f"/users/{user['id']}", headers=user['headers'])
    assert response.status_code == 200
    assert response.get_json() == {'id': user['id'], 'username': 'alice', 'role': 'USER'}

    response = client.get('/users/999', headers=user['headers'])
    assert response.status_code == 404
    assert response.get_json() == {'error': 'User not found'}


def test_non_owner_cannot_update_other_user(client, make_user, user):
    other_id = make_user('eve')
    response = client.put(f'/users/{other_id}', json={'username': 'mallory'}, headers=user['headers'])
    assert response.status_code == 403
    assert response.get_json() == {'error': 'Forbidden: You do not have access to this resource.'}


def test_owner_can_update_self_and_password_is_rehashed(client, user):
    response = client.put(f"/users/{user['id']}", json={'password': 'new-password-1'}, headers=user['headers'])
    assert response.status_code == 200
    assert response.get_json()['username'] == 'alice'

    response = client.post('/users/login', json={'username': 'alice', 'password': 'new-password-1'})
    assert response.status_code == 200


def test_update_enforces_password_length(client, user):
    response = client.put(f"/users/{user['id']}", json={'password': 'short'}, headers=user['headers'])
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Password must be at least 8 characters long'}


def test_user_cannot_change_own_role(client, user):
    response = client.put(f"/users/{user['id']}", json={'role': 'ADMIN'}, headers=user['headers'])
    assert response.status_code == 403


def test_admin_can_update_any_user(client, admin, user):
    response = client.put(f"/users/{user['id']}", json={'role': 'ADMIN'}, headers=admin['headers'])
    assert response.status_code == 200
    assert response.get_json()['role'] == 'ADMIN'


def test_delete_user(client, make_user, user):
    other_id = make_user('frank')
    response = client.delete(f'/users/{other_id}', headers=user['headers'])
    assert response.status_code == 204

    response = client.delete(f'/users/{other_id}', headers=user['headers'])
    assert response.status_code == 404
