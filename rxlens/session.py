"""TranslationSession — display state for one chat: idle → pending → done."""
import logging
from typing import Optional

from rxlens.capture.client import CaptureProvider
from rxlens.constants import (
    MSG_CAPTURE_FAIL,
    MSG_CAPTURE_UNEXPECTED,
    MSG_PERMISSION_REQUIRED,
    MSG_TRANSLATE_BUSY,
    MSG_TRANSLATING,
)
from rxlens.exceptions import CaptureUnavailable, TranscriptionError
from rxlens.models import SessionStatus, TranscriptionResult
from rxlens.transcription.client import PrescriptionTranscriber

logger = logging.getLogger(__name__)


def _display_text(result: TranscriptionResult) -> str:
    match result.error:
        case CaptureUnavailable():
            return MSG_PERMISSION_REQUIRED
        case _:
            return result.display_text


class TranslationSession:
    """Owns the "current result" shown to the user.

    Only one translation runs at a time: translate() while PENDING is rejected
    and returns None without capturing or calling the endpoint. The previously
    shown text stays in place until the new attempt finishes.
    """

    def __init__(self, transcriber: PrescriptionTranscriber) -> None:
        self._transcriber = transcriber
        self._status = SessionStatus.IDLE
        self._text = ""
        self._visible = False

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def busy(self) -> bool:
        return self._status is SessionStatus.PENDING

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def last_text(self) -> str:
        return self._text

    @property
    def message(self) -> str:
        match self._status:
            case SessionStatus.PENDING:
                return MSG_TRANSLATING
            case _:
                return self._text

    async def translate(self, capture: CaptureProvider) -> Optional[TranscriptionResult]:
        if self.busy:
            logger.info(MSG_TRANSLATE_BUSY)
            return None

        self._status = SessionStatus.PENDING
        self._visible = True
        try:
            result = await self._capture_and_transcribe(capture)
        finally:
            self._status = SessionStatus.DONE

        self._text = _display_text(result)
        return result

    def reset(self) -> bool:
        """Hide and clear the shown text. Returns False while a request is pending."""
        if self.busy:
            return False
        self._status = SessionStatus.IDLE
        self._text = ""
        self._visible = False
        return True

    async def _capture_and_transcribe(self, capture: CaptureProvider) -> TranscriptionResult:
        try:
            image = await capture.capture()
        except TranscriptionError as exc:
            logger.warning(MSG_CAPTURE_FAIL, exc.message)
            return TranscriptionResult.failure(exc)
        except Exception as exc:
            logger.exception(MSG_CAPTURE_UNEXPECTED)
            return TranscriptionResult.failure(TranscriptionError(str(exc)))
        return await self._transcriber.transcribe(image.data)
