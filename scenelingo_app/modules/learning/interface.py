from flask import current_app

from .services.session_service import SessionRegistry


def get_session_registry() -> SessionRegistry:
    """The registry owned by the application's shell state."""
    return current_app.extensions['scenelingo.shell'].sessions
