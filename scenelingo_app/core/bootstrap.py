"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers as _register_error_handlers
from .extensions import csrf_protect, db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Attach the console and rotating file handlers."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
    )


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    csrf_protect.init_app(app)


def register_error_handlers(app: Flask) -> None:
    """Attach the JSON error envelope handlers."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables."""

    from ..models import AppState  # noqa: F401 - registers the table

    db.create_all()
    app.logger.info("Database tables ready at %s", app.config.get("SQLALCHEMY_DATABASE_URI"))


def register_shell_state(app: Flask) -> None:
    """Create the application-owned state holder (stats + active session)."""

    from ..modules.shell.state import ShellState

    app.extensions["scenelingo.shell"] = ShellState.from_app(app)
    app.logger.info("Shell state initialized.")
