"""Database models for SceneLingo."""

from .app_state import AppState

__all__ = ["AppState"]
