from flask import Blueprint, jsonify

from api.exception import ServiceError
from services import category_service
from utils.serializers import serialize_category
from utils.request_utils import get_json_body

categories_bp = Blueprint('categories', __name__)


# --- POST a new category ---
@categories_bp.route('', methods=['POST'])
def add_category():
    data = get_json_body()
    try:
        category = category_service.create_category(data.get('name'))
        return jsonify(serialize_category(category)), 201
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- GET all categories ---
@categories_bp.route('', methods=['GET'])
def get_all_categories():
    categories = category_service.get_all_categories()
    return jsonify([serialize_category(category) for category in categories]), 200


# --- GET a single category by ID ---
@categories_bp.route('/<int:category_id>', methods=['GET'])
def get_one_category(category_id):
    category = category_service.get_category_by_id(category_id)
    if not category:
        return jsonify({"error": "Category not found"}), 404
    return jsonify(serialize_category(category)), 200


# --- PUT (update) an existing category ---
@categories_bp.route('/<int:category_id>', methods=['PUT'])
def update_category(category_id):
    data = get_json_body()
    try:
        category = category_service.update_category(category_id, data)
        return jsonify(serialize_category(category)), 200
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code


# --- DELETE a category ---
@categories_bp.route('/<int:category_id>', methods=['DELETE'])
def delete_category(category_id):
    try:
        category_service.delete_category(category_id)
        return '', 204
    except ServiceError as e:
        return jsonify({"error": e.message}), e.status_code
