import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

logger = logging.getLogger(__name__)


@dataclass
class InlineImage:
    data: Any
    mime_type: Optional[str] = None


class GeminiClient:
    """
    Stateless worker for Gemini API interactions.
    Does not depend on DB or Flask Context directly.
    """

    def __init__(
        self,
        api_key: str,
        text_model: str = 'gemini-2.5-flash',
        image_model: str = 'gemini-2.5-flash-image'
    ):
        self.api_key = api_key
        self.text_model = text_model
        self.image_model = image_model
        genai.configure(api_key=api_key)

    def generate_json(self, prompt: str, response_schema: Any) -> Optional[str]:
        """
        Ask the text model for a JSON document matching ``response_schema``.
        Returns the raw response text, or None for an empty response.
        """
        start_time = time.time()
        model = genai.GenerativeModel(self.text_model)
        try:
            response = model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                ),
            )
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Gemini API error ({self.text_model}): {e}")
            raise

        duration = int((time.time() - start_time) * 1000)
        if not response.parts:
            logger.warning(f"Gemini returned no parts. Feedback: {response.prompt_feedback}")
            return None

        logger.info(f"Gemini '{self.text_model}' answered in {duration} ms.")
        return response.text

    def generate_image(self, prompt: str) -> Optional[InlineImage]:
        """
        Ask the image model for one picture.
        Returns the first inline-data part of the first candidate, if any.
        """
        start_time = time.time()
        model = genai.GenerativeModel(self.image_model)
        try:
            response = model.generate_content(prompt)
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Gemini API error ({self.image_model}): {e}")
            raise

        duration = int((time.time() - start_time) * 1000)
        for candidate in response.candidates or []:
            content = candidate.content
            if not content or not content.parts:
                continue
            for part in content.parts:
                inline = getattr(part, 'inline_data', None)
                if inline is not None and inline.data:
                    logger.info(f"Gemini '{self.image_model}' produced an image in {duration} ms.")
                    return InlineImage(data=inline.data, mime_type=inline.mime_type or None)
            break

        logger.warning(f"Gemini '{self.image_model}' returned no image data.")
        return None
