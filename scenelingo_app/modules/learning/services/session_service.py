# File: scenelingo_app/modules/learning/services/session_service.py
"""
Session Registry
================
Holds the single active learning session for the shell. Starting a new one
cancels the previous. Finishing reports the reward through the
``session_completed`` signal.
"""

import logging
import threading
from typing import Optional

from scenelingo_app.core.error_handlers import NotFoundError
from scenelingo_app.core.signals import session_completed
from scenelingo_app.modules.AI.interface import VocabularyProvider
from scenelingo_app.modules.scenes.schemas import Scene

from ..engines.session import LearningSession
from ..schemas import SessionReward

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Owner of the active LearningSession."""

    def __init__(self, provider: VocabularyProvider, advance_delay: float = 0.3, reward_points: int = 50):
        self.provider = provider
        self.advance_delay = advance_delay
        self.reward_points = reward_points
        self._active: Optional[LearningSession] = None
        self._lock = threading.Lock()

    def create(self, scene: Scene) -> LearningSession:
        session = LearningSession(
            scene,
            self.provider,
            advance_delay=self.advance_delay,
            reward_points=self.reward_points,
        )
        with self._lock:
            previous, self._active = self._active, session
        if previous is not None:
            previous.cancel()
        logger.info(f"Created session {session.session_id} for scene '{scene.id}'.")
        return session

    async def start_session(self, scene: Scene) -> LearningSession:
        """Create a session and load its vocabulary."""
        session = self.create(scene)
        try:
            await session.start()
        except Exception:
            self._discard(session)
            raise
        return session

    def get_active(self) -> Optional[LearningSession]:
        return self._active

    def require_active(self) -> LearningSession:
        session = self._active
        if session is None:
            raise NotFoundError('No active learning session', resource='session')
        return session

    def finish(self) -> SessionReward:
        """
        Report the reward, then end the session. If a ``session_completed``
        receiver fails the session stays active and COMPLETED, so the call
        can be repeated.
        """
        session = self.require_active()
        reward = session.reward()
        session_completed.send(self, scene_id=reward.scene_id, points=reward.points, words=reward.words)
        session.finish()
        self._discard(session)
        logger.info(f"Session {session.session_id} finished: +{reward.points} points, {reward.words} words.")
        return reward

    def cancel(self) -> None:
        session = self.require_active()
        session.cancel()
        self._discard(session)

    def _discard(self, session: LearningSession) -> None:
        with self._lock:
            if self._active is session:
                self._active = None
