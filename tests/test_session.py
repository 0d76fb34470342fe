"""TranslationSession: idle → pending → done, one request at a time."""
import asyncio

from rxlens.capture.client import CaptureProvider
from rxlens.constants import MSG_PERMISSION_REQUIRED, MSG_TRANSLATE_FAILED, MSG_TRANSLATING
from rxlens.exceptions import CaptureUnavailable, EndpointFailure
from rxlens.models import ImageAsset, SessionStatus, TranscriptionResult
from rxlens.session import TranslationSession
from rxlens.transcription.client import PrescriptionTranscriber


class FakeTranscriber(PrescriptionTranscriber):

    def __init__(self, result: TranscriptionResult) -> None:
        self.result = result
        self.calls: list[bytes] = []
        self.release = asyncio.Event()
        self.release.set()

    async def transcribe(self, image_bytes: bytes) -> TranscriptionResult:
        self.calls.append(image_bytes)
        await self.release.wait()
        return self.result


class FakeCapture(CaptureProvider):

    def __init__(self, data: bytes = b"jpeg", error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.count = 0

    async def capture(self) -> ImageAsset:
        self.count += 1
        match self.error:
            case None:
                return ImageAsset(self.data)
            case err:
                raise err


async def wait_until_pending(session: TranslationSession) -> None:
    while not session.busy:
        await asyncio.sleep(0)


def test_new_session_is_idle_and_hidden():
    session = TranslationSession(FakeTranscriber(TranscriptionResult.success("x")))

    assert session.status is SessionStatus.IDLE
    assert not session.visible
    assert session.message == ""


async def test_translate_success_shows_text():
    transcriber = FakeTranscriber(TranscriptionResult.success("Paracetamol 500mg"))
    session = TranslationSession(transcriber)

    result = await session.translate(FakeCapture(b"photo"))

    assert result.ok
    assert transcriber.calls == [b"photo"]
    assert session.status is SessionStatus.DONE
    assert session.visible
    assert session.message == "Paracetamol 500mg"


async def test_translate_failure_shows_static_error():
    session = TranslationSession(FakeTranscriber(TranscriptionResult.failure(EndpointFailure("502"))))

    await session.translate(FakeCapture())

    assert session.status is SessionStatus.DONE
    assert session.message == MSG_TRANSLATE_FAILED


async def test_capture_unavailable_shows_permission_prompt_without_request():
    transcriber = FakeTranscriber(TranscriptionResult.success("x"))
    session = TranslationSession(transcriber)

    result = await session.translate(FakeCapture(error=CaptureUnavailable("denied")))

    assert isinstance(result.error, CaptureUnavailable)
    assert transcriber.calls == []
    assert session.message == MSG_PERMISSION_REQUIRED


async def test_pending_shows_loading_but_keeps_previous_result():
    transcriber = FakeTranscriber(TranscriptionResult.success("primera"))
    session = TranslationSession(transcriber)
    await session.translate(FakeCapture())

    transcriber.result = TranscriptionResult.failure(EndpointFailure("timeout"))
    transcriber.release.clear()
    task = asyncio.create_task(session.translate(FakeCapture()))
    await wait_until_pending(session)

    assert session.message == MSG_TRANSLATING
    assert session.last_text == "primera"

    transcriber.release.set()
    await task

    assert session.last_text == MSG_TRANSLATE_FAILED


async def test_second_translate_while_pending_is_rejected():
    transcriber = FakeTranscriber(TranscriptionResult.success("ok"))
    transcriber.release.clear()
    session = TranslationSession(transcriber)
    first_capture, second_capture = FakeCapture(b"one"), FakeCapture(b"two")

    task = asyncio.create_task(session.translate(first_capture))
    await wait_until_pending(session)
    rejected = await session.translate(second_capture)
    transcriber.release.set()
    accepted = await task

    assert rejected is None
    assert accepted.ok
    assert second_capture.count == 0
    assert transcriber.calls == [b"one"]


async def test_reset_clears_shown_text():
    session = TranslationSession(FakeTranscriber(TranscriptionResult.success("ok")))
    await session.translate(FakeCapture())

    assert session.reset()

    assert session.status is SessionStatus.IDLE
    assert not session.visible
    assert session.message == ""


async def test_reset_is_refused_while_pending():
    transcriber = FakeTranscriber(TranscriptionResult.success("ok"))
    transcriber.release.clear()
    session = TranslationSession(transcriber)

    task = asyncio.create_task(session.translate(FakeCapture()))
    await wait_until_pending(session)

    assert not session.reset()

    transcriber.release.set()
    await task
    assert session.message == "ok"


async def test_session_can_translate_again_after_done():
    transcriber = FakeTranscriber(TranscriptionResult.success("ok"))
    session = TranslationSession(transcriber)

    await session.translate(FakeCapture(b"a"))
    await session.translate(FakeCapture(b"b"))

    assert transcriber.calls == [b"a", b"b"]


async def test_unexpected_capture_error_shows_static_error():
    transcriber = FakeTranscriber(TranscriptionResult.success("x"))
    session = TranslationSession(transcriber)

    result = await session.translate(FakeCapture(error=RuntimeError("disk gone")))

    assert not result.ok
    assert transcriber.calls == []
    assert session.status is SessionStatus.DONE
    assert session.message == MSG_TRANSLATE_FAILED
