from datetime import datetime, timedelta, timezone
import logging
import re

from flask import current_app, g, jsonify, request
from flask_bcrypt import Bcrypt
import jwt

from api.exception import ServiceError

logger = logging.getLogger(__name__)

bcrypt = Bcrypt()

ALGORITHM = 'HS256'

# (methods, path pattern) pairs that skip the bearer token check; None means any method
PUBLIC_ROUTES = [
    (None, re.compile(r'^/status$')),
    (None, re.compile(r'^/users/login$')),
    (None, re.compile(r'^/users/signup$')),
    ({'GET'}, re.compile(r'^/boards$')),
    ({'GET'}, re.compile(r'^/boards/\d+$')),
    ({'GET'}, re.compile(r'^/pins$')),
]


def generate_jwt_token(id, username, role):
    now = datetime.now(timezone.utc)
    payload = {
        'id': id,
        'username': username,
        'role': role,
        'iat': now,
        'exp': now + timedelta(hours=int(current_app.config['JWT_EXPIRES_HOURS'])),
        'iss': current_app.config['JWT_ISSUER'],
    }
    try:
        return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm=ALGORITHM)
    except Exception as e:
        logger.error("Error generating JWT token: %s", e, exc_info=True)
        raise ServiceError('Error generating JWT token, see server log for details.') from e


def decode_jwt(jwt_token):
    """Verify signature, expiry and issuer; raises jwt.InvalidTokenError on any failure."""
    return jwt.decode(
        jwt_token,
        current_app.config['JWT_SECRET'],
        algorithms=[ALGORITHM],
        issuer=current_app.config['JWT_ISSUER'],
        options={'require': ['exp', 'iss', 'id', 'role']}
    )


def is_public_route(method, path):
    path = path.rstrip('/') or '/'
    for methods, pattern in PUBLIC_ROUTES:
        if (methods is None or method in methods) and pattern.match(path):
            return True
    return False


def get_token_from_header():
    auth_header = request.headers.get('Authorization')
    if not auth_header or not auth_header.startswith('Bearer '):
        return None
    token = auth_header[len('Bearer '):].strip()
    return token or None


def authenticate():
    """before_request hook: attach the decoded claims to g.auth or reject the request."""
    if request.method == 'OPTIONS' or is_public_route(request.method, request.path):
        return None

    token = get_token_from_header()
    if not token:
        return jsonify({'error': 'Access Denied. No token provided.'}), 401

    try:
        g.auth = decode_jwt(token)
    except jwt.InvalidTokenError as e:
        logger.info("Rejected token on %s %s: %s", request.method, request.path, e)
        return jsonify({'error': 'Invalid token'}), 403
    return None
