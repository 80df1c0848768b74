import logging

from sqlalchemy.exc import SQLAlchemyError

from api.exception import NotFoundError, StoreError, ValidationError
from models import Board, User, db

logger = logging.getLogger(__name__)


def create_board(name, user_id):
    if not name:
        raise ValidationError('Board name is required')
    if not isinstance(name, str):
        raise ValidationError('Board name must be a string')
    if not user_id:
        raise ValidationError('User ID is required.')
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise ValidationError('User ID must be an integer')
    if not db.session.get(User, user_id):
        raise ValidationError('User not found')

    board = Board(name=name, user_id=user_id)
    try:
        db.session.add(board)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error creating board for user %s: %s", user_id, e, exc_info=True)
        raise StoreError('Error creating board') from e
    return board


def get_all_boards():
    return Board.query.order_by(Board.id).all()


def get_all_boards_for_user(user_id):
    if not user_id:
        raise ValidationError('User ID is required.')
    try:
        return Board.query.filter_by(user_id=user_id).order_by(Board.id).all()
    except SQLAlchemyError as e:
        logger.error("Error fetching boards for user %s: %s", user_id, e, exc_info=True)
        raise StoreError('Failed to fetch boards from the database.') from e


def get_board_by_id(board_id):
    return db.session.get(Board, board_id)


def update_board(board_id, data):
    board = db.session.get(Board, board_id)
    if not board:
        raise NotFoundError('Board not found')

    if 'name' in data:
        if not data['name']:
            raise ValidationError('Board name is required')
        if not isinstance(data['name'], str):
            raise ValidationError('Board name must be a string')
        board.name = data['name']

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error updating board %s: %s", board_id, e, exc_info=True)
        raise StoreError('Error updating board') from e
    return board


def delete_board(board_id):
    board = db.session.get(Board, board_id)
    if not board:
        raise NotFoundError('Board not found')
    try:
        db.session.delete(board)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting board %s: %s", board_id, e, exc_info=True)
        raise StoreError('Error deleting board') from e
    return board
