from .session import LearningSession

__all__ = ["LearningSession"]
