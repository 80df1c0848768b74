from flask import Blueprint, g, jsonify
import logging

from api.exception import ServiceError
from decoraters import authorize, authorize_owner_or_admin
from services import user_service
from utils.serializers import serialize_user
from utils.request_utils import get_json_body

logger = logging.getLogger(__name__)

user_bp = Blueprint('user', __name__)


# --- POST signup (public) ---
@user_bp.route('/signup', methods=['POST'])
def signup():
    data = get_json_body()
    # signup is open and the caller picks the role, ADMIN included; see DESIGN.md
    try:
        user = user_service.create_user(
            username=data.get('username'),
            password=data.get('password'),
            role=data.get('role') or 'USER'
        )
        return jsonify(serialize_user(user)), 201
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- POST login (public) ---
@user_bp.route('/login', methods=['POST'])
def login():
    data = get_json_body()
    try:
        result = user_service.login_user(data.get('username'), data.get('password'))
        return jsonify(result), 200
    except ServiceError as e:
        logger.info("Failed login for %s", data.get('username'))
        return jsonify({"error": e.message}), e.status_code


# --- GET all users (ADMIN) ---
@user_bp.route('', methods=['GET'])
@authorize('ADMIN')
def get_all_users():
    users = user_service.get_all_users()
    return jsonify([serialize_user(user) for user in users]), 200


# --- GET a single user ---
@user_bp.route('/<int:user_id>', methods=['GET'])
def get_user(user_id):
    user = user_service.get_user_by_id(user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(serialize_user(user)), 200


# --- PUT (update) a user: the user themself or an ADMIN ---
@user_bp.route('/<int:user_id>', methods=['PUT'])
@authorize_owner_or_admin(lambda view_args: view_args.get('user_id'))
def update_user(user_id):
    data = get_json_body()
    # only an ADMIN may change roles, including their own
    if 'role' in data and g.auth.get('role') != 'ADMIN':
        return jsonify({"error": "Forbidden: Insufficient permissions."}), 403
    try:
        user = user_service.update_user(user_id, data)
        return jsonify(serialize_user(user)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- DELETE a user ---
@user_bp.route('/<int:user_id>', methods=['DELETE'])
def delete_user(user_id):
    try:
        user_service.delete_user(user_id)
        return '', 204
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code
