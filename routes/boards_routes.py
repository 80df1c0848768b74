from flask import Blueprint, g, jsonify

from api.exception import ServiceError
from services import board_service
from utils.serializers import serialize_board
from utils.request_utils import get_json_body

boards_bp = Blueprint('board', __name__)


# --- POST a new board ---
@boards_bp.route('', methods=['POST'])
def create_board():
    """Creates a board; `userId` defaults to the authenticated user."""
    data = get_json_body()
    try:
        board = board_service.create_board(data.get('name'), data.get('userId', g.auth.get('id')))
        return jsonify(serialize_board(board)), 201
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- GET all boards (public) ---
@boards_bp.route('', methods=['GET'])
def get_all_boards():
    boards = board_service.get_all_boards()
    return jsonify([serialize_board(board) for board in boards]), 200


# --- GET all boards of one user ---
@boards_bp.route('/user/<int:user_id>', methods=['GET'])
def get_boards_for_user(user_id):
    try:
        boards = board_service.get_all_boards_for_user(user_id)
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code

    if not boards:
        return jsonify({"error": "No boards found for this user."}), 404
    return jsonify([serialize_board(board) for board in boards]), 200


# --- GET a single board by ID (public) ---
@boards_bp.route('/<int:board_id>', methods=['GET'])
def get_board(board_id):
    board = board_service.get_board_by_id(board_id)
    if not board:
        return jsonify({"error": "Board not found"}), 404
    return jsonify(serialize_board(board)), 200


# --- PUT (update) a board ---
@boards_bp.route('/<int:board_id>', methods=['PUT'])
def update_board(board_id):
    data = get_json_body()
    try:
        board = board_service.update_board(board_id, {key: data[key] for key in ('name',) if key in data})
        return jsonify(serialize_board(board)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- DELETE a board ---
@boards_bp.route('/<int:board_id>', methods=['DELETE'])
def delete_board(board_id):
    try:
        board_service.delete_board(board_id)
        return '', 204
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code
