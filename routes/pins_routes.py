from flask import Blueprint, jsonify, request

from api.exception import ServiceError
from services import pin_service
from utils.serializers import serialize_pin
from utils.request_utils import get_json_body

pins_bp = Blueprint("pins", __name__)


def _positive_int_arg(name, default):
    value = request.args.get(name, type=int)
    return value if value and value > 0 else default


def _board_ids_from_body():
    data = get_json_body()
    board_ids = data.get('boardIds')
    if not board_ids or not isinstance(board_ids, list):
        return None
    return board_ids


# --- POST a new pin ---
@pins_bp.route('', methods=['POST'])
def add_pin():
    data = get_json_body()
    try:
        pin = pin_service.create_pin(
            title=data.get('title'),
            image_url=data.get('imageUrl'),
            description=data.get('description'),
            categories=data.get('categories')
        )
        return jsonify(serialize_pin(pin)), 201
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- POST link a pin to boards ---
@pins_bp.route('/<int:pin_id>/boards', methods=['POST'])
def add_pin_to_boards(pin_id):
    board_ids = _board_ids_from_body()
    if board_ids is None:
        return jsonify({"error": "No boardIds provided or invalid format."}), 400
    try:
        pin = pin_service.add_pin_to_boards(pin_id, board_ids)
        return jsonify(serialize_pin(pin)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- DELETE unlink a pin from boards ---
@pins_bp.route('/<int:pin_id>/boards', methods=['DELETE'])
def remove_pin_from_boards(pin_id):
    board_ids = _board_ids_from_body()
    if board_ids is None:
        return jsonify({"error": "No boardIds provided or invalid format."}), 400
    try:
        pin = pin_service.remove_pin_from_boards(pin_id, board_ids)
        return jsonify(serialize_pin(pin)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- GET a page of pins (public) ---
@pins_bp.route('', methods=['GET'])
def get_all_pins():
    page = _positive_int_arg('page', pin_service.DEFAULT_PAGE)
    page_size = _positive_int_arg('pageSize', pin_service.DEFAULT_PAGE_SIZE)
    pins = pin_service.get_all_pins(page, page_size)
    return jsonify([serialize_pin(pin) for pin in pins]), 200


@pins_bp.route('/category/<int:category_id>', methods=['GET'])
def get_pins_by_category(category_id):
    pins = pin_service.get_pins_by_category(category_id)
    return jsonify([serialize_pin(pin) for pin in pins]), 200


@pins_bp.route('/user/<int:user_id>', methods=['GET'])
def get_pins_by_user(user_id):
    pins = pin_service.get_pins_by_user(user_id)
    return jsonify([serialize_pin(pin) for pin in pins]), 200


@pins_bp.route('/board/<int:board_id>', methods=['GET'])
def get_pins_by_board(board_id):
    pins = pin_service.get_pins_by_board(board_id)
    return jsonify([serialize_pin(pin) for pin in pins]), 200


# --- GET a single pin by ID ---
@pins_bp.route('/<int:pin_id>', methods=['GET'])
def get_one_pin(pin_id):
    pin = pin_service.get_pin_by_id(pin_id)
    if not pin:
        return jsonify({"error": "Pin not found"}), 404
    return jsonify(serialize_pin(pin)), 200


# --- PUT (update) an existing pin ---
@pins_bp.route('/<int:pin_id>', methods=['PUT'])
def update_pin(pin_id):
    data = get_json_body()
    try:
        pin = pin_service.update_pin(pin_id, data)
        return jsonify(serialize_pin(pin)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- DELETE a pin ---
@pins_bp.route('/<int:pin_id>', methods=['DELETE'])
def delete_pin(pin_id):
    try:
        pin_service.delete_pin(pin_id)
        return '', 204
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code
