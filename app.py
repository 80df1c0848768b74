from flask import Flask, jsonify
from dotenv import load_dotenv
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
import logging
import os

from models import db
from auth.authhelpers import authenticate, bcrypt

logger = logging.getLogger(__name__)

migrate = Migrate()


def load_config():
    """Configuration from the environment (and a .env file, if present)."""
    load_dotenv()
    return {
        'SQLALCHEMY_DATABASE_URI': os.getenv('DATABASE_URI'),
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {'pool_recycle': 280},
        'JWT_SECRET': os.getenv('JWT_SECRET'),
        'JWT_EXPIRES_HOURS': int(os.getenv('JWT_EXPIRES_HOURS', '8')),
        'JWT_ISSUER': os.getenv('JWT_ISSUER', 'pinnacle_app'),
        'CORS_ORIGINS': os.getenv('CORS_ORIGINS', '*'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO'),
    }


def configure_logging(level):
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code is None or e.code < 400:
            return e
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e):
        db.session.rollback()
        app.logger.error("Unhandled database error: %s", e, exc_info=True)
        return jsonify({"error": "Internal server error"}), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config['LOG_LEVEL'])

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise RuntimeError("DATABASE_URI not found. Check your .env file!")
    if not app.config.get('JWT_SECRET'):
        raise RuntimeError("JWT_SECRET not found. Check your .env file!")

    CORS(app, origins=app.config['CORS_ORIGINS'])
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)

    # every route needs a bearer token unless it is on the public allow-list
    app.before_request(authenticate)
    register_error_handlers(app)

    @app.route('/status', methods=['GET'])
    def status():
        return jsonify({'message': 'Back-end is running...'})

    #Register blueprints
    from routes.user_routes import user_bp
    from routes.boards_routes import boards_bp
    from routes.pins_routes import pins_bp
    from routes.categories_routes import categories_bp
    from routes.admin_routes import admin_bp

    app.register_blueprint(pins_bp, url_prefix="/pins")
    app.register_blueprint(categories_bp, url_prefix="/categories")
    app.register_blueprint(user_bp, url_prefix="/users")
    app.register_blueprint(boards_bp, url_prefix="/boards")
    app.register_blueprint(admin_bp, url_prefix="/admin")

    #create tables
    with app.app_context():
        db.create_all()
        logger.info("Tables created for %s", app.config['SQLALCHEMY_DATABASE_URI'].split('://')[0])

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.getenv('APP_PORT', '3000')))
