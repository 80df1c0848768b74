from flask_sqlalchemy import SQLAlchemy
from datetime import datetime

db = SQLAlchemy()

ROLES = ('USER', 'ADMIN')

# many-to-many link tables
board_pins = db.Table(
    'board_pins',
    db.Column('board_id', db.Integer, db.ForeignKey('boards.id', ondelete='CASCADE'), primary_key=True),
    db.Column('pin_id', db.Integer, db.ForeignKey('pins.id', ondelete='CASCADE'), primary_key=True)
)

pin_categories = db.Table(
    'pin_categories',
    db.Column('pin_id', db.Integer, db.ForeignKey('pins.id', ondelete='CASCADE'), primary_key=True),
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True)
)

saved_pins = db.Table(
    'saved_pins',
    db.Column('user_id', db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    db.Column('pin_id', db.Integer, db.ForeignKey('pins.id', ondelete='CASCADE'), primary_key=True)
)


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='USER')

    boards = db.relationship('Board', back_populates='user', lazy=True, cascade='all, delete-orphan')
    saved_pins = db.relationship('Pin', secondary=saved_pins, back_populates='users_saved', lazy=True)


class Board(db.Model):
    __tablename__ = 'boards'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    user = db.relationship('User', back_populates='boards')
    pins = db.relationship('Pin', secondary=board_pins, back_populates='boards', lazy=True)


class Pin(db.Model):
    __tablename__ = 'pins'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(500), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    boards = db.relationship('Board', secondary=board_pins, back_populates='pins', lazy=True)
    categories = db.relationship('Category', secondary=pin_categories, back_populates='pins', lazy=True)
    users_saved = db.relationship('User', secondary=saved_pins, back_populates='saved_pins', lazy=True)


class Category(db.Model):
    __tablename__ = 'categories'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False)

    pins = db.relationship('Pin', secondary=pin_categories, back_populates='categories', lazy=True)
