from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class SceneCategory(str, Enum):
    DAILY = 'daily'
    BUSINESS = 'business'
    TRAVEL = 'travel'
    FOOD = 'food'


@dataclass(frozen=True)
class Scene:
    """A themed vocabulary context shown as a selectable card."""
    id: str
    title: str
    description: str
    image_url: str
    category: SceneCategory
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'imageUrl': self.image_url,
            'category': self.category.value,
            'color': self.color,
        }
