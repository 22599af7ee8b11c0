"""
Response Parser - Pure functions to clean and parse AI outputs.
"""
import base64
import json
import re
from typing import Any, List, Optional

from ..schemas import WordItem


class ResponseParser:
    """Utility to clean and structure AI responses."""

    @staticmethod
    def clean_markdown(text: str) -> str:
        """
        Remove markdown code blocks from text.
        Example: ```json ... ``` -> ...
        """
        if not text:
            return ""

        cleaned = re.sub(r'^```\w*\s*', '', text.strip())
        cleaned = re.sub(r'\s*```$', '', cleaned)
        return cleaned.strip()

    @staticmethod
    def extract_json(text: str) -> Optional[Any]:
        """
        Attempt to extract and parse JSON from text.
        Text might be wrapped in ```json ... ``` or just raw JSON.
        """
        if not text:
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError:
            pass

        cleaned = ResponseParser.clean_markdown(text)
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError:
            pass

        # Last resort: outermost array, then outermost object.
        for opener, closer in (('[', ']'), ('{', '}')):
            start = text.find(opener)
            end = text.rfind(closer)
            if start != -1 and end > start:
                try:
                    return json.loads(text[start:end + 1])
                except json.JSONDecodeError:
                    continue

        return None

    @staticmethod
    def parse_word_items(text: str, limit: int = 5) -> List[WordItem]:
        """
        Turn a vocabulary response into WordItems.

        Entries missing any text field are dropped. A single object is
        accepted as a one-element list.
        """
        data = ResponseParser.extract_json(text)
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            return []

        items = []
        for entry in data:
            item = WordItem.from_dict(entry)
            if item is not None:
                items.append(item)
            if len(items) >= limit:
                break
        return items

    @staticmethod
    def to_data_uri(data: Any, mime_type: Optional[str] = None) -> str:
        """Encode inline image data for display. ``data`` may be raw bytes or base64 text."""
        if isinstance(data, (bytes, bytearray)):
            encoded = base64.b64encode(bytes(data)).decode('ascii')
        else:
            encoded = str(data)
        return f"data:{mime_type or 'image/png'};base64,{encoded}"
