import io
import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Optional

from gtts import gTTS, gTTSError

from scenelingo_app.core.error_handlers import SceneLingoError, ValidationError

logger = logging.getLogger(__name__)

# Language tags accepted by the UI -> gTTS language codes.
SUPPORTED_LANGUAGES = {
    'en-US': 'en',
    'ja-JP': 'ja',
}


class SpeechUnavailableError(SceneLingoError):
    def __init__(self, message: str = 'Speech synthesis failed'):
        super().__init__(message=message, code='SPEECH_UNAVAILABLE', status_code=502)


@dataclass
class Utterance:
    text: str
    lang_tag: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    audio: Optional[bytes] = None
    mime_type: str = 'audio/mpeg'
    cancelled: bool = False


class VoiceService:
    """
    Text-to-Speech for flashcards. Only one utterance is current: starting a
    new one cancels the one in flight.
    """

    def __init__(self, slow: bool = False):
        self.slow = slow
        self._current: Optional[Utterance] = None
        self._lock = threading.Lock()

    def cancel(self) -> None:
        with self._lock:
            if self._current is not None:
                self._current.cancelled = True
                logger.debug(f"Cancelled utterance {self._current.id}")
            self._current = None

    def speak(self, text: str, lang_tag: str) -> Utterance:
        """
        Synthesize ``text`` in ``lang_tag`` (en-US or ja-JP) as MP3.
        The returned utterance is marked cancelled if a newer one started meanwhile.
        """
        if not text or not text.strip():
            raise ValidationError("Text content is empty")
        lang = SUPPORTED_LANGUAGES.get(lang_tag)
        if lang is None:
            raise ValidationError(
                f"Unsupported language '{lang_tag}'",
                errors={'lang': sorted(SUPPORTED_LANGUAGES)},
            )

        self.cancel()
        utterance = Utterance(text=text.strip(), lang_tag=lang_tag)
        with self._lock:
            self._current = utterance

        try:
            tts = gTTS(text=utterance.text, lang=lang, slow=self.slow)
            buffer = io.BytesIO()
            tts.write_to_fp(buffer)
        except gTTSError as e:
            logger.error(f"Error in text_to_speech: {e}")
            with self._lock:
                if self._current is utterance:
                    self._current = None
            raise SpeechUnavailableError(str(e))

        utterance.audio = buffer.getvalue()
        logger.debug(f"Generated TTS audio ({len(utterance.audio)} bytes, lang={lang})")
        return utterance
