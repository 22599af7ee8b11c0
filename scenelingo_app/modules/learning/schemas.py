from dataclasses import dataclass
from enum import Enum


class LearningState(str, Enum):
    LOADING = 'LOADING'
    ACTIVE = 'ACTIVE'
    COMPLETED = 'COMPLETED'


@dataclass(frozen=True)
class ImageTicket:
    """Tag carried by an image request: which card it was issued for."""
    session_id: str
    index: int
    sequence: int


@dataclass(frozen=True)
class SessionReward:
    scene_id: str
    points: int
    words: int

    def to_dict(self):
        return {'sceneId': self.scene_id, 'points': self.points, 'words': self.words}
