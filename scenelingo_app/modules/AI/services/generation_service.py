# File: scenelingo_app/modules/AI/services/generation_service.py
"""
Generation Service
==================
Async facade over the blocking Gemini SDK. Failures never escape as fatal
errors except a missing credential: vocabulary degrades to the fallback
entry, images degrade to None.
"""

import asyncio
import functools
import logging
from typing import Callable, List, Optional

from scenelingo_app.core.error_handlers import MissingCredentialError

from ..logics.engines.gemini_client import GeminiClient
from ..logics.prompts import VOCABULARY_RESPONSE_SCHEMA, get_image_prompt, get_vocabulary_prompt
from ..logics.response_parser import ResponseParser
from ..schemas import WordItem, fallback_word

logger = logging.getLogger(__name__)


class GenerationService:
    """Vocabulary and illustration provider used by learning sessions."""

    def __init__(
        self,
        api_key: Optional[str],
        text_model: str = 'gemini-2.5-flash',
        image_model: str = 'gemini-2.5-flash-image',
        word_count: int = 5,
        vocabulary_timeout: Optional[float] = 30.0,
        image_timeout: Optional[float] = 20.0,
        client_factory: Callable[..., GeminiClient] = GeminiClient
    ):
        self.api_key = api_key
        self.text_model = text_model
        self.image_model = image_model
        self.word_count = word_count
        self.vocabulary_timeout = vocabulary_timeout
        self.image_timeout = image_timeout
        self.client_factory = client_factory
        self._client = None

    @classmethod
    def from_config(cls, config) -> 'GenerationService':
        return cls(
            api_key=config.get('GEMINI_API_KEY'),
            text_model=config.get('GEMINI_TEXT_MODEL', 'gemini-2.5-flash'),
            image_model=config.get('GEMINI_IMAGE_MODEL', 'gemini-2.5-flash-image'),
            word_count=config.get('VOCABULARY_WORD_COUNT', 5),
            vocabulary_timeout=config.get('VOCABULARY_TIMEOUT_SECONDS', 30.0),
            image_timeout=config.get('IMAGE_TIMEOUT_SECONDS', 20.0),
        )

    def get_client(self) -> GeminiClient:
        """Raise before any request when no API key is configured."""
        if not self.api_key:
            raise MissingCredentialError()
        if self._client is None:
            self._client = self.client_factory(
                self.api_key,
                text_model=self.text_model,
                image_model=self.image_model,
            )
        return self._client

    async def fetch_vocabulary(self, scene_title: str) -> List[WordItem]:
        """Up to ``word_count`` entries for the scene, or the one-item fallback list."""
        client = self.get_client()
        prompt = get_vocabulary_prompt(scene_title, self.word_count)

        try:
            text = await self._run_blocking(
                functools.partial(client.generate_json, prompt, VOCABULARY_RESPONSE_SCHEMA),
                self.vocabulary_timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Vocabulary generation for '{scene_title}' timed out after {self.vocabulary_timeout}s.")
            return [fallback_word()]
        except Exception as e:
            logger.error(f"Error generating vocabulary: {e}", exc_info=True)
            return [fallback_word()]

        words = ResponseParser.parse_word_items(text or '', limit=self.word_count)
        if not words:
            logger.error(f"Vocabulary response for '{scene_title}' had no usable entries.")
            return [fallback_word()]

        logger.info(f"Generated {len(words)} words for scene '{scene_title}'.")
        return words

    async def fetch_image(self, word: str, scene_context: str) -> Optional[str]:
        """A data URI illustrating ``word`` in ``scene_context``, or None."""
        client = self.get_client()
        prompt = get_image_prompt(word, scene_context)

        try:
            image = await self._run_blocking(
                functools.partial(client.generate_image, prompt),
                self.image_timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Image generation for '{word}' timed out after {self.image_timeout}s.")
            return None
        except Exception as e:
            logger.error(f"Error generating image: {e}", exc_info=True)
            return None

        if image is None:
            return None
        return ResponseParser.to_data_uri(image.data, image.mime_type)

    async def _run_blocking(self, func, timeout: Optional[float]):
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, func)
        return await asyncio.wait_for(future, timeout=timeout)
