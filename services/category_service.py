import logging

from sqlalchemy.exc import SQLAlchemyError

from api.exception import NotFoundError, StoreError, ValidationError
from models import Category, db

logger = logging.getLogger(__name__)


def _commit(action, category_id=None):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error %s category %s: %s", action, category_id, e, exc_info=True)
        raise StoreError(f'Error {action} category') from e


def create_category(name):
    if not name:
        raise ValidationError('Category name is required')
    if not isinstance(name, str):
        raise ValidationError('Category name must be a string')
    category = Category(name=name)
    db.session.add(category)
    _commit('creating')
    return category


def get_all_categories():
    return Category.query.order_by(Category.id).all()


def get_category_by_id(category_id):
    return db.session.get(Category, category_id)


def update_category(category_id, data):
    category = db.session.get(Category, category_id)
    if not category:
        raise NotFoundError('Category not found')
    if 'name' in data:
        if not data['name']:
            raise ValidationError('Category name is required')
        if not isinstance(data['name'], str):
            raise ValidationError('Category name must be a string')
        category.name = data['name']
    _commit('updating', category_id)
    return category


def delete_category(category_id):
    category = db.session.get(Category, category_id)
    if not category:
        raise NotFoundError('Category not found')
    db.session.delete(category)
    _commit('deleting', category_id)
    return category
