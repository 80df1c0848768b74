import pytest

from app import create_app
from tests.conftest import TEST_CONFIG


def test_unknown_route_returns_json_error(client, user):
    response = client.get('/nowhere', headers=user['headers'])
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_wrong_method_returns_json_error(client, user):
    response = client.patch('/categories', headers=user['headers'])
    assert response.status_code == 405
    assert 'error' in response.get_json()


def test_preflight_skips_token_check(client):
    response = client.options('/categories', headers={
        'Origin': 'http://localhost:8080', 'Access-Control-Request-Method': 'POST'
    })
    assert response.status_code == 200
    assert 'Access-Control-Allow-Origin' in response.headers


def test_create_app_requires_jwt_secret():
    with pytest.raises(RuntimeError):
        create_app({**TEST_CONFIG, 'JWT_SECRET': None})
