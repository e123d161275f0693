"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import BaseConfig
from .db.repositories.factory import user_repo
from .services.user_service import UserService
from .api.health.routes import bp as health_bp
from .api.users.routes import bp as users_bp
from .api.calculator.routes import bp as calculator_bp
from .api.greeting.routes import bp as greeting_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .log import register_request_logging, setup_logging


def create_app(config: BaseConfig | None = None, user_service: UserService | None = None) -> Flask:
    """Create and configure the Flask application.

    The user service is built once here and shared by every request; pass
    ``user_service`` to plug in a different repository.
    """
    config = config or BaseConfig()
    setup_logging(config.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config)
    origins = [o.strip() for o in config.CORS_ORIGINS.split(",") if o.strip()]
    CORS(app, origins=origins or "*")

    app.extensions["user_service"] = user_service or UserService(user_repo(config.USER_REPO_BACKEND))

    # Register blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(users_bp, url_prefix="/users")
    app.register_blueprint(calculator_bp)
    app.register_blueprint(greeting_bp, url_prefix="/greeting")
    app.register_blueprint(docs_bp)

    register_error_handlers(app)
    register_request_logging(app)
    logger.info("{} {} ready (user repo: {})", config.APP_NAME, config.APP_VERSION, config.USER_REPO_BACKEND)
    return app
