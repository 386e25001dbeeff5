"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``app/__init__.py`` selects the appropriate config
based on the FLASK_ENV environment variable.

The store is an embedded SQLite file.  Relative ``sqlite:///`` paths
are resolved by Flask-SQLAlchemy against the Flask instance folder, so
the default ``equipment.db`` lands in ``instance/equipment.db`` and is
created on first run.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Connection strings and addresses are loaded from environment
    variables so deployments can override them without code changes.
    """

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", "sqlite:///equipment.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- HTTP surface ------------------------------------------------------
    # Equipment routes are mounted at ``<API_PREFIX>/equipment``.
    API_PREFIX: str = os.environ.get("API_PREFIX", "/api")

    # Allowed cross-origin client address.  Unset means any origin.
    CLIENT_ORIGIN: str | None = os.environ.get("CLIENT_ORIGIN") or None

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def validate_production_settings(cls, app_config: dict) -> None:
        """
        Warn about settings that are unsafe for a production deployment.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.
        """
        if not app_config.get("CLIENT_ORIGIN"):
            _logger.warning(
                "CLIENT_ORIGIN is not set, so CORS allows any origin. "
                "Set it to the client address in production."
            )

        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production. "
                "Consider INFO or WARNING."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo enabled."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: in-memory store, rebuilt for every test.

    Flask-SQLAlchemy pins in-memory SQLite to a single connection, so
    the schema created by the fixtures is visible to every request.
    """

    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    CLIENT_ORIGIN: str | None = None
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """Production environment: strict settings, no debug output."""

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
