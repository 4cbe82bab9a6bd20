"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from ..extensions import csrf_protect, db, login_manager
from .error_handlers import error_response, register_error_handlers as _register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging.

    Flask names its logger after the import name, so configuring the
    ``wordmap_app`` logger also configures ``app.logger`` and every module
    logger below it.
    """

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
        log_to_file=app.config.get("LOG_TO_FILE", True),
    )
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)


def register_user_loader(app: Flask) -> None:
    """Wire Flask-Login to the User model and answer JSON for API calls."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return error_response("Authentication required", "UNAUTHENTICATED", 401)


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create the database file and tables."""

    from ..config import Config
    from .. import models  # noqa: F401  (registers the tables on db.metadata)

    Config.ensure_directories(app.config["SQLALCHEMY_DATABASE_URI"])
    db.create_all()
    app.logger.info("Database tables ready at %s", db.engine.url)
