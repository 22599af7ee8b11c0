from .session_service import SessionRegistry

__all__ = ["SessionRegistry"]
