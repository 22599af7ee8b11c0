# File: scenelingo_app/modules/AI/logics/prompts.py
# Prompt templates for vocabulary and illustration generation.

from typing import List

from typing_extensions import TypedDict

DEFAULT_VOCABULARY_PROMPT = (
    'Generate {count} essential vocabulary words related to the scene: "{scene_title}". \n'
    "  Focus on practical, everyday usage.\n"
    "  Return the result in JSON format including:\n"
    "  - English word\n"
    "  - Japanese word (Kanji/Kana mix)\n"
    "  - Japanese reading (Kana/Romaji) for pronunciation\n"
    "  - Chinese translation (Simplified)\n"
    "  - A short example sentence in English using the word."
)

# google.generativeai's GenerationConfig has no image aspect-ratio field, so the
# ratio can only be requested in the prompt.
DEFAULT_IMAGE_PROMPT = (
    'Generate a high-quality, clear illustration or photo of "{word}" in the context of '
    '"{context}". No text in the image. Use a 4:3 aspect ratio.'
)


class VocabularyEntry(TypedDict):
    """Response schema for one generated word. Every key is required."""
    english: str
    japanese: str
    kana: str
    chinese: str
    sentence: str


VOCABULARY_RESPONSE_SCHEMA = List[VocabularyEntry]


def get_vocabulary_prompt(scene_title: str, count: int = 5) -> str:
    return DEFAULT_VOCABULARY_PROMPT.format(count=count, scene_title=scene_title)


def get_image_prompt(word: str, context: str) -> str:
    return DEFAULT_IMAGE_PROMPT.format(word=word, context=context)
