from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

WORD_TEXT_FIELDS = ('english', 'japanese', 'kana', 'chinese', 'sentence')


@dataclass
class WordItem:
    """One vocabulary entry of a learning session."""
    english: str
    japanese: str
    kana: str
    chinese: str
    sentence: str
    generated_image_url: Optional[str] = None
    is_fallback: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['WordItem']:
        """Build from a generated entry; None unless every text field is a non-empty string."""
        if not isinstance(data, dict):
            return None
        values = {}
        for name in WORD_TEXT_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or not value.strip():
                return None
            values[name] = value.strip()
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['generatedImageUrl'] = data.pop('generated_image_url')
        data['isFallback'] = data.pop('is_fallback')
        return data


def fallback_word() -> WordItem:
    """Placeholder entry used when the vocabulary request fails."""
    return WordItem(
        english="Error (Demo)",
        japanese="エラー",
        kana="eraa",
        chinese="错误",
        sentence="There was an error connecting to the AI.",
        is_fallback=True,
    )
