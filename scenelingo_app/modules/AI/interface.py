from typing import Protocol, List, Optional

from .schemas import WordItem


class VocabularyProvider(Protocol):
    """What a learning session needs from the generative service."""

    async def fetch_vocabulary(self, scene_title: str) -> List[WordItem]:
        ...

    async def fetch_image(self, word: str, scene_context: str) -> Optional[str]:
        ...
