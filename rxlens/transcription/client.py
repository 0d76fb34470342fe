"""PrescriptionTranscriber — abstract base for prescription transcription backends."""
from abc import ABC, abstractmethod

from rxlens.models import TranscriptionResult


class PrescriptionTranscriber(ABC):
    @abstractmethod
    async def transcribe(self, image_bytes: bytes) -> TranscriptionResult:
        """Transcribe a prescription photo. Never raises: failures come back in the result."""
        ...

    async def aclose(self) -> None:
        """Release network resources held by the backend."""
