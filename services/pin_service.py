import logging

from sqlalchemy.exc import SQLAlchemyError

from api.exception import NotFoundError, StoreError, ValidationError
from models import Board, Category, Pin, db

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 12


def _commit(action, pin_id=None):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error %s pin %s: %s", action, pin_id, e, exc_info=True)
        raise StoreError(f'Error {action} pin') from e


def _get_pin_or_404(pin_id):
    pin = db.session.get(Pin, pin_id)
    if not pin:
        raise NotFoundError('Pin not found')
    return pin


def _validate_ids(ids, field):
    if not isinstance(ids, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
        raise ValidationError(f'{field} must be a list of ids')
    return set(ids)


def _load_boards(board_ids):
    ids = _validate_ids(board_ids, 'boardIds')
    boards = Board.query.filter(Board.id.in_(ids)).all() if ids else []
    if len(boards) != len(ids):
        raise ValidationError('One or more boards not found')
    return boards


def _load_categories(category_ids):
    ids = _validate_ids(category_ids, 'categories')
    categories = Category.query.filter(Category.id.in_(ids)).all() if ids else []
    if len(categories) != len(ids):
        raise ValidationError('One or more categories not found')
    return categories


def _validate_text_fields(**fields):
    for field, value in fields.items():
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'{field} must be a string')


def create_pin(title, image_url, description=None, categories=None):
    """
    Creates a pin and links the given category ids.

    The pin row and its category links are written in a single commit, so a
    bad category id leaves nothing behind.
    """
    if not title:
        raise ValidationError('Title is required')
    if not image_url:
        raise ValidationError('Image URL is required')
    _validate_text_fields(title=title, imageUrl=image_url, description=description)

    pin = Pin(title=title, image_url=image_url, description=description)
    if categories:
        pin.categories = _load_categories(categories)

    db.session.add(pin)
    _commit('creating')
    logger.info("Created pin %s with %d categories", pin.id, len(pin.categories))
    return pin


def add_pin_to_boards(pin_id, board_ids):
    """Link the pin to the listed boards, leaving its other board links alone."""
    pin = _get_pin_or_404(pin_id)
    for board in _load_boards(board_ids):
        if board not in pin.boards:
            pin.boards.append(board)
    _commit('linking', pin_id)
    return pin


def remove_pin_from_boards(pin_id, board_ids):
    """Unlink the pin from the listed boards only."""
    pin = _get_pin_or_404(pin_id)
    ids = _validate_ids(board_ids, 'boardIds')
    pin.boards = [board for board in pin.boards if board.id not in ids]
    _commit('unlinking', pin_id)
    return pin


def get_all_pins(page=DEFAULT_PAGE, page_size=DEFAULT_PAGE_SIZE):
    """Newest pins first; `page` is 1-based."""
    page = max(page, 1)
    page_size = max(page_size, 1)
    return (
        Pin.query
        .order_by(Pin.created_at.desc(), Pin.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )


def get_pins_by_category(category_id):
    return Pin.query.filter(Pin.categories.any(Category.id == category_id)).order_by(Pin.id).all()


def get_pins_by_user(user_id):
    return Pin.query.filter(Pin.boards.any(Board.user_id == user_id)).order_by(Pin.id).all()


def get_pins_by_board(board_id):
    return Pin.query.filter(Pin.boards.any(Board.id == board_id)).order_by(Pin.id).all()


def get_pin_by_id(pin_id):
    return db.session.get(Pin, pin_id)


def update_pin(pin_id, data):
    pin = _get_pin_or_404(pin_id)

    if 'title' in data:
        if not data['title']:
            raise ValidationError('Title is required')
        _validate_text_fields(title=data['title'])
        pin.title = data['title']
    if 'imageUrl' in data:
        if not data['imageUrl']:
            raise ValidationError('Image URL is required')
        _validate_text_fields(imageUrl=data['imageUrl'])
        pin.image_url = data['imageUrl']
    if 'description' in data:
        _validate_text_fields(description=data['description'])
        pin.description = data['description']
    # link sets are replaced, not merged
    if data.get('boardIds') is not None:
        pin.boards = _load_boards(data['boardIds'])
    if data.get('categories') is not None:
        pin.categories = _load_categories(data['categories'])

    _commit('updating', pin_id)
    return pin


def delete_pin(pin_id):
    pin = _get_pin_or_404(pin_id)
    db.session.delete(pin)
    _commit('deleting', pin_id)
    return pin
