import logging

from sqlalchemy.exc import SQLAlchemyError

from api.exception import NotFoundError, StoreError
from models import Board, Pin, User, db

logger = logging.getLogger(__name__)


def get_admin_stats():
    """Totals shown on the admin dashboard."""
    try:
        return {
            'totalUsers': db.session.query(User).count(),
            'totalBoards': db.session.query(Board).count(),
            'totalPins': db.session.query(Pin).count(),
        }
    except SQLAlchemyError as e:
        logger.error("Error fetching admin statistics: %s", e, exc_info=True)
        raise StoreError('Error fetching admin statistics') from e


def get_all_users():
    try:
        rows = db.session.query(User.id, User.username, User.role).order_by(User.id).all()
    except SQLAlchemyError as e:
        logger.error("Error fetching users: %s", e, exc_info=True)
        raise StoreError('Error fetching users') from e
    return [{'id': row.id, 'username': row.username, 'role': row.role} for row in rows]


def delete_user(user_id):
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError('User not found')
    deleted = {'id': user.id, 'username': user.username, 'role': user.role}
    try:
        db.session.delete(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting user %s: %s", user_id, e, exc_info=True)
        raise StoreError('Error deleting user') from e
    logger.info("Admin deleted user %s", user_id)
    return deleted
