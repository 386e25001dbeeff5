"""
Application factory for the Equipment Tracker API.

Usage::

    from app import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from .config import config_by_name
from .extensions import cors, db

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    The store handle (``db``) is bound here and the ``equipment``
    table is created if it does not exist yet, so a fresh checkout
    only needs ``flask run`` or ``python wsgi.py``.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)
    # Keep JSON keys in model order (id, name, type, ...).
    app.json.sort_keys = False

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    if config_name == "production":
        config_class.validate_production_settings(app.config)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    # -- Create the store on first run -------------------------------------
    with app.app_context():
        db.create_all()

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)

    # Only the JSON API is exposed cross-origin.
    api_prefix = app.config["API_PREFIX"].rstrip("/")
    cors.init_app(
        app,
        resources={f"{api_prefix}/*": {"origins": app.config["CLIENT_ORIGIN"] or "*"}},
    )

    # Imported here so ``db.create_all()`` sees every table.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports — models and services can safely import ``db`` from
    extensions at module level.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint: health check at /health.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Equipment: JSON CRUD API.
    from .blueprints.equipment import bp as equipment_bp

    api_prefix = app.config["API_PREFIX"].rstrip("/")
    app.register_blueprint(equipment_bp, url_prefix=f"{api_prefix}/equipment")


def _register_error_handlers(app: Flask) -> None:
    """Return ``{"message": ...}`` JSON bodies for every error status."""

    @app.errorhandler(404)
    def not_found(error):  # pylint: disable=unused-argument
        """Handle 404 Not Found errors."""
        return {"message": "Resource not found."}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):  # pylint: disable=unused-argument
        """Handle 405 Method Not Allowed errors."""
        return {"message": "Method not allowed."}, 405

    @app.errorhandler(SQLAlchemyError)
    def store_error(error):
        """Handle store failures raised by the service layer."""
        logger.error("Store error: %s", error, exc_info=error)
        db.session.rollback()
        return {"message": "Internal server error."}, 500

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error."""
        logger.error(
            "Unhandled error: %s",
            error,
            exc_info=getattr(error, "original_exception", None) or error,
        )
        db.session.rollback()
        return {"message": "Internal server error."}, 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    # pylint: disable=import-outside-toplevel
    from .cli import register_commands
    from .seed_dev import register_seed_commands

    register_commands(app)
    register_seed_commands(app)


def _configure_logging(app: Flask) -> None:
    """Set up root logging at the configured ``LOG_LEVEL``."""
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))

    # Quiet down noisy libraries in development.
    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
