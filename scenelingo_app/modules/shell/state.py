# File: scenelingo_app/modules/shell/state.py
"""
Shell State
===========
Application-owned holder for everything the UI shell keeps between
requests: the current tab, the stats controller and the active session.
Created once in ``create_app`` and kept in ``app.extensions``.
"""

from enum import Enum
from typing import Any, Dict

from scenelingo_app.modules.AI.services.generation_service import GenerationService
from scenelingo_app.modules.learning.services.session_service import SessionRegistry
from scenelingo_app.modules.scenes.catalog import list_scenes
from scenelingo_app.modules.speech.voice_service import VoiceService
from scenelingo_app.modules.stats.services.stats_controller import StatsController
from scenelingo_app.modules.stats.services.stats_store import StatsStore


class Tab(str, Enum):
    HOME = 'HOME'
    LEARN = 'LEARN'
    PROFILE = 'PROFILE'


class ShellState:
    def __init__(self, stats: StatsController, sessions: SessionRegistry, voice: VoiceService):
        self.stats = stats
        self.sessions = sessions
        self.voice = voice
        self.current_tab = Tab.HOME

    @classmethod
    def from_app(cls, app) -> 'ShellState':
        config = app.config
        provider = GenerationService.from_config(config)
        store = StatsStore(
            key=config.get('STATS_STORAGE_KEY', 'lingoScene_stats'),
            default_goal=config.get('DEFAULT_DAILY_GOAL', 10),
        )
        stats = StatsController(store, check_in_bonus=config.get('CHECK_IN_BONUS_POINTS', 10))
        sessions = SessionRegistry(
            provider,
            advance_delay=config.get('ADVANCE_DELAY_SECONDS', 0.3),
            reward_points=config.get('SESSION_REWARD_POINTS', 50),
        )
        return cls(stats=stats, sessions=sessions, voice=VoiceService())

    def switch_tab(self, tab: Tab) -> Tab:
        self.current_tab = tab
        return tab

    def view(self) -> Dict[str, Any]:
        """View model for the current tab plus the header shown on every tab."""
        stats_view = self.stats.view()
        stats = stats_view.stats
        data: Dict[str, Any] = {
            'tab': self.current_tab.value,
            'header': {
                'streak': stats.streak,
                'wordsToday': stats.words_today,
                'goalToday': stats.goal_today,
                'goalPercent': stats_view.goal_percent,
            },
        }

        if self.current_tab is Tab.HOME:
            data['scenes'] = [scene.to_dict() for scene in list_scenes()]
        elif self.current_tab is Tab.PROFILE:
            data['profile'] = {
                'points': stats.points,
                'learnedWords': stats.learned_words,
                'level': stats_view.level,
                'achievements': [a.to_dict() for a in stats_view.achievements],
            }
        else:
            session = self.sessions.get_active()
            data['session'] = session.snapshot() if session is not None else None

        return data
