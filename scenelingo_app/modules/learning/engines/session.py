# File: scenelingo_app/modules/learning/engines/session.py
"""
Learning Session
================
State machine for one run through a scene's flashcards:

    LOADING --start()--> ACTIVE --advance() on last card--> COMPLETED --finish()

Image requests are tagged with the card index (ImageTicket). A result is
always cached for its own card, but only shown if the ticket is still the
latest request for the card on screen.
"""

import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional

from scenelingo_app.core.error_handlers import SessionStateError
from scenelingo_app.modules.AI.interface import VocabularyProvider
from scenelingo_app.modules.AI.schemas import WordItem, fallback_word
from scenelingo_app.modules.scenes.schemas import Scene

from ..schemas import ImageTicket, LearningState, SessionReward

logger = logging.getLogger(__name__)

ENDED_FINISHED = 'FINISHED'
ENDED_CANCELLED = 'CANCELLED'


class LearningSession:
    """One scene's flashcard sequence and its cursor."""

    def __init__(
        self,
        scene: Scene,
        provider: VocabularyProvider,
        advance_delay: float = 0.3,
        reward_points: int = 50
    ):
        self.session_id = uuid.uuid4().hex
        self.scene = scene
        self.provider = provider
        self.advance_delay = advance_delay
        self.reward_points = reward_points

        self.state = LearningState.LOADING
        self.words: List[WordItem] = []
        self.current_index = 0
        self.is_flipped = False

        self.generated_images: Dict[int, str] = {}
        self.display_image = scene.image_url
        self.is_image_loading = False

        self.ended: Optional[str] = None
        self._loading_started = False
        self._image_sequence = 0
        self._pending_ticket: Optional[ImageTicket] = None

    # --- Transitions -------------------------------------------------------

    async def start(self) -> None:
        """Fetch the vocabulary and enter ACTIVE on the first card."""
        self._require(LearningState.LOADING, 'start')
        if self._loading_started:
            raise SessionStateError('start', 'LOADING (already requested)')
        self._loading_started = True

        words = await self.provider.fetch_vocabulary(self.scene.title)

        if self.ended:
            logger.debug(f"Session {self.session_id} ended while loading; vocabulary dropped.")
            return

        self.words = list(words) or [fallback_word()]
        self.current_index = 0
        self.is_flipped = False
        self.state = LearningState.ACTIVE
        logger.info(f"Session {self.session_id} active with {len(self.words)} cards for '{self.scene.title}'.")

    def flip(self) -> bool:
        self._require(LearningState.ACTIVE, 'flip')
        self.is_flipped = not self.is_flipped
        return self.is_flipped

    async def advance(self) -> None:
        """Next card after a short delay, or COMPLETED when on the last card."""
        self._require(LearningState.ACTIVE, 'advance')
        self.is_flipped = False

        if self.current_index >= len(self.words) - 1:
            self.state = LearningState.COMPLETED
            self.is_image_loading = False
            self._pending_ticket = None
            logger.info(f"Session {self.session_id} completed.")
            return

        target = self.current_index + 1
        if self.advance_delay:
            await asyncio.sleep(self.advance_delay)

        # A concurrent advance (double tap) may already have moved us.
        if self.ended or self.state is not LearningState.ACTIVE or self.current_index >= target:
            return

        self.current_index = target
        self._pending_ticket = None
        self.is_image_loading = False
        self.display_image = self.generated_images.get(target, self.scene.image_url)

    def reward(self) -> SessionReward:
        """Reward for a COMPLETED session; does not end it."""
        self._require(LearningState.COMPLETED, 'finish')
        return SessionReward(scene_id=self.scene.id, points=self.reward_points, words=len(self.words))

    def finish(self) -> SessionReward:
        """Collect the reward. Only valid once, in COMPLETED."""
        reward = self.reward()
        self.ended = ENDED_FINISHED
        return reward

    def cancel(self) -> None:
        if self.ended:
            return
        self.ended = ENDED_CANCELLED
        self._pending_ticket = None
        self.is_image_loading = False
        logger.info(f"Session {self.session_id} cancelled in state {self.state.value}.")

    # --- Images ------------------------------------------------------------

    def begin_image_request(self) -> Optional[ImageTicket]:
        """
        Prepare the current card's picture.

        Returns None when a cached image was put on display, otherwise a
        ticket for the request the caller must issue.
        """
        self._require(LearningState.ACTIVE, 'load image')
        index = self.current_index

        cached = self.generated_images.get(index)
        if cached:
            self.display_image = cached
            self.is_image_loading = False
            return None

        self.display_image = self.scene.image_url
        self._image_sequence += 1
        ticket = ImageTicket(session_id=self.session_id, index=index, sequence=self._image_sequence)
        self._pending_ticket = ticket
        self.is_image_loading = True
        return ticket

    def resolve_image(self, ticket: ImageTicket, image: Optional[str]) -> bool:
        """
        Apply an image result. Returns True if it was put on display.
        """
        if ticket.session_id != self.session_id:
            return False

        if image and 0 <= ticket.index < len(self.words):
            self.generated_images[ticket.index] = image
            self.words[ticket.index].generated_image_url = image

        if not self._is_current(ticket):
            logger.debug(
                f"Discarding stale image for card {ticket.index} "
                f"(now on card {self.current_index}, session {self.session_id})."
            )
            return False

        self._pending_ticket = None
        self.is_image_loading = False
        if image:
            self.display_image = image
            return True
        return False

    async def show_card(self) -> str:
        """Display the current card's picture, generating it if needed."""
        ticket = self.begin_image_request()
        if ticket is None:
            return self.display_image

        word = self.words[ticket.index]
        try:
            image = await self.provider.fetch_image(word.english, self.scene.title)
        except Exception:
            self.resolve_image(ticket, None)
            raise

        self.resolve_image(ticket, image)
        return self.display_image

    # --- Views -------------------------------------------------------------

    @property
    def current_word(self) -> Optional[WordItem]:
        if self.state is LearningState.ACTIVE and self.words:
            return self.words[self.current_index]
        return None

    def snapshot(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'sessionId': self.session_id,
            'scene': self.scene.to_dict(),
            'state': self.state.value,
            'ended': self.ended,
            'currentIndex': self.current_index,
            'total': len(self.words),
            'isFlipped': self.is_flipped,
            'displayImage': self.display_image,
            'isImageLoading': self.is_image_loading,
            'card': None,
        }

        word = self.current_word
        if word is not None:
            if self.is_flipped:
                data['card'] = {
                    'side': 'back',
                    'japanese': word.japanese,
                    'kana': word.kana,
                    'chinese': word.chinese,
                    'sentence': word.sentence,
                    'isFallback': word.is_fallback,
                }
            else:
                data['card'] = {'side': 'front', 'english': word.english, 'isFallback': word.is_fallback}

        if self.state is LearningState.COMPLETED:
            data['summary'] = (
                f"You've learned {len(self.words)} new words related to {self.scene.title}."
            )
        return data

    # --- Helpers -----------------------------------------------------------

    def _is_current(self, ticket: ImageTicket) -> bool:
        return (
            not self.ended
            and self.state is LearningState.ACTIVE
            and ticket.index == self.current_index
            and self._pending_ticket == ticket
        )

    def _require(self, expected: LearningState, operation: str) -> None:
        if self.ended:
            raise SessionStateError(operation, self.ended)
        if self.state is not expected:
            raise SessionStateError(operation, self.state.value)
