import logging

from sqlalchemy.exc import SQLAlchemyError

from api.exception import NotFoundError, StoreError, ValidationError
from auth.authhelpers import bcrypt, generate_jwt_token
from models import ROLES, User, db

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def _hash_password(password):
    return bcrypt.generate_password_hash(password).decode('utf-8')


def _validate_password(password):
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError('Password must be at least 8 characters long')


def _validate_role(role):
    if role not in ROLES:
        raise ValidationError('Invalid role')


def create_user(username, password, role='USER'):
    """Create a user after checking username uniqueness, password length and role."""
    if not username:
        raise ValidationError('Username is required')
    if not isinstance(username, str):
        raise ValidationError('Username must be a string')
    if User.query.filter_by(username=username).first():
        raise ValidationError('Username already exists')
    _validate_password(password)
    role = role or 'USER'
    _validate_role(role)

    user = User(username=username, password=_hash_password(password), role=role)
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error creating user %s: %s", username, e, exc_info=True)
        raise StoreError('Error creating user') from e
    logger.info("Created user %s with role %s", user.id, user.role)
    return user


def login_user(username, password):
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError('Invalid username or password')
    user = User.query.filter_by(username=username).first() if username else None
    if not user or not password:
        raise ValidationError('Invalid username or password')
    if not bcrypt.check_password_hash(user.password, password):
        raise ValidationError('Invalid username or password')

    token = generate_jwt_token(id=user.id, username=user.username, role=user.role)
    return {
        'token': token,
        'user': {
            'id': user.id,
            'username': user.username,
            'role': user.role,
        },
    }


def get_all_users():
    return User.query.order_by(User.id).all()


def get_user_by_id(user_id):
    return db.session.get(User, user_id)


def update_user(user_id, data):
    """Merge the provided fields into the user; a new password is re-hashed."""
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError('User not found')

    if 'username' in data:
        username = data['username']
        if not username:
            raise ValidationError('Username is required')
        if not isinstance(username, str):
            raise ValidationError('Username must be a string')
        existing = User.query.filter_by(username=username).first()
        if existing and existing.id != user.id:
            raise ValidationError('Username already exists')
        user.username = username
    if 'password' in data:
        _validate_password(data['password'])
        user.password = _hash_password(data['password'])
    if 'role' in data:
        _validate_role(data['role'])
        user.role = data['role']

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error updating user %s: %s", user_id, e, exc_info=True)
        raise StoreError('Error updating user') from e
    return user


def delete_user(user_id):
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError('User not found')
    try:
        db.session.delete(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting user %s: %s", user_id, e, exc_info=True)
        raise StoreError('Error deleting user') from e
    return user
