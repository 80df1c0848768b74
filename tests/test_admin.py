from models import Board, User, db


def test_stats_counts_entities(client, admin, user):
    client.post('/boards', json={'name': 'b'}, headers=user['headers'])
    client.post('/pins', json={'title': 'p', 'imageUrl': 'https://img.example/p.jpg'}, headers=user['headers'])

    response = client.get('/admin/stats', headers=admin['headers'])

    assert response.status_code == 200
    assert response.get_json() == {'totalUsers': 2, 'totalBoards': 1, 'totalPins': 1}


def test_admin_routes_reject_users(client, user):
    for method, path in [('get', '/admin/stats'), ('get', '/admin/users'), ('delete', f"/admin/users/{user['id']}")]:
        response = getattr(client, method)(path, headers=user['headers'])
        assert response.status_code == 403


def test_admin_users_projection(client, admin, user):
    response = client.get('/admin/users', headers=admin['headers'])
    assert response.status_code == 200
    assert response.get_json() == [
        {'id': admin['id'], 'username': 'root', 'role': 'ADMIN'},
        {'id': user['id'], 'username': 'alice', 'role': 'USER'},
    ]


def test_admin_delete_user_removes_their_boards(client, app, admin, user):
    client.post('/boards', json={'name': 'b'}, headers=user['headers'])

    response = client.delete(f"/admin/users/{user['id']}", headers=admin['headers'])

    assert response.status_code == 200
    assert response.get_json() == {'id': user['id'], 'username': 'alice', 'role': 'USER'}
    with app.app_context():
        assert db.session.get(User, user['id']) is None
        assert db.session.query(Board).count() == 0


def test_admin_delete_missing_user(client, admin):
    response = client.delete('/admin/users/999', headers=admin['headers'])
    assert response.status_code == 404
    assert response.get_json() == {'error': 'User not found'}
