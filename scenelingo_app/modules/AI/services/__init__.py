from .generation_service import GenerationService

__all__ = ["GenerationService"]
