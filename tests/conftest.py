import pytest

from app import create_app
from auth.authhelpers import generate_jwt_token
from models import db
from services import user_service

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SQLALCHEMY_ENGINE_OPTIONS': {},
    'JWT_SECRET': 'test-secret',
    'JWT_EXPIRES_HOURS': 1,
    'JWT_ISSUER': 'pinnacle_app',
    'BCRYPT_LOG_ROUNDS': 4,
    'LOG_LEVEL': 'WARNING',
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Create a user straight through the service and return its id."""
    def _make_user(username, password='password123', role='USER'):
        with app.app_context():
            return user_service.create_user(username, password, role).id
    return _make_user


@pytest.fixture
def auth_header(app):
    """Build an Authorization header for an existing user id."""
    def _auth_header(user_id, username='someone', role='USER'):
        with app.app_context():
            token = generate_jwt_token(id=user_id, username=username, role=role)
        return {'Authorization': f'Bearer {token}'}
    return _auth_header


@pytest.fixture
def user(make_user, auth_header):
    user_id = make_user('alice')
    return {'id': user_id, 'headers': auth_header(user_id, 'alice', 'USER')}


@pytest.fixture
def admin(make_user, auth_header):
    admin_id = make_user('root', role='ADMIN')
    return {'id': admin_id, 'headers': auth_header(admin_id, 'root', 'ADMIN')}
