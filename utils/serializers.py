# utils/serializers.py
# Nested entities are shallow so that pins -> boards -> pins never recurses.


def _isoformat(value):
    return value.isoformat() if value else None


def serialize_user(user):
    """Public projection of a user; the password hash never leaves the server."""
    return {
        'id': user.id,
        'username': user.username,
        'role': user.role,
    }


def _board_summary(board):
    return {
        'id': board.id,
        'name': board.name,
        'createdAt': _isoformat(board.created_at),
        'userId': board.user_id,
    }


def _category_summary(category):
    return {
        'id': category.id,
        'name': category.name,
    }


def _pin_summary(pin):
    return {
        'id': pin.id,
        'title': pin.title,
        'imageUrl': pin.image_url,
        'description': pin.description,
        'createdAt': _isoformat(pin.created_at),
    }


def serialize_pin(pin):
    pin_dict = _pin_summary(pin)
    pin_dict['boards'] = [_board_summary(board) for board in pin.boards]
    pin_dict['categories'] = [_category_summary(category) for category in pin.categories]
    return pin_dict


def serialize_board(board):
    board_dict = _board_summary(board)
    board_dict['user'] = serialize_user(board.user) if board.user else None
    board_dict['pins'] = [_pin_summary(pin) for pin in board.pins]
    return board_dict


def serialize_category(category):
    category_dict = _category_summary(category)
    category_dict['pins'] = [_pin_summary(pin) for pin in category.pins]
    return category_dict
