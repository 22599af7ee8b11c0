from .gemini_client import GeminiClient, InlineImage

__all__ = ["GeminiClient", "InlineImage"]
