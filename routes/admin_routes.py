from flask import Blueprint, jsonify

from api.exception import ServiceError
from decoraters import authorize
from services import admin_service

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/stats', methods=['GET'])
@authorize('ADMIN')
def get_stats():
    try:
        return jsonify(admin_service.get_admin_stats()), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


@admin_bp.route('/users', methods=['GET'])
@authorize('ADMIN')
def get_users():
    try:
        return jsonify(admin_service.get_all_users()), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


@admin_bp.route('/users/<int:user_id>', methods=['DELETE'])
@authorize('ADMIN')
def delete_user(user_id):
    try:
        return jsonify(admin_service.delete_user(user_id)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code
