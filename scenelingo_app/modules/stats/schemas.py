from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

DEFAULT_DAILY_GOAL = 10


@dataclass
class UserStats:
    """Streak/points record mirrored to the persisted stats key."""
    streak: int = 0
    last_login_date: Optional[date] = None
    points: int = 0
    learned_words: int = 0
    words_today: int = 0
    goal_today: int = DEFAULT_DAILY_GOAL

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys of the stored record."""
        return {
            'streak': self.streak,
            'lastLoginDate': self.last_login_date.isoformat() if self.last_login_date else '',
            'points': self.points,
            'learnedWords': self.learned_words,
            'wordsToday': self.words_today,
            'goalToday': self.goal_today,
        }


class CheckInOutcome(str, Enum):
    AWARDED = 'awarded'
    CELEBRATE_ONLY = 'celebrate_only'
    SKIPPED = 'skipped'

    @property
    def celebrate(self) -> bool:
        return self is not CheckInOutcome.SKIPPED


@dataclass
class Achievement:
    name: str
    description: str
    target: int
    current: int

    @property
    def unlocked(self) -> bool:
        return self.current >= self.target

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'target': self.target,
            'current': self.current,
            'unlocked': self.unlocked,
        }


@dataclass
class StatsView:
    """Stats plus the values the UI derives from them."""
    stats: UserStats
    level: int
    goal_percent: float
    achievements: List[Achievement] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = self.stats.to_dict()
        data.update({
            'level': self.level,
            'goalPercent': self.goal_percent,
            'achievements': [a.to_dict() for a in self.achievements],
        })
        return data
