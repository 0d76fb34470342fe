"""CaptureProvider — abstract source of still images."""
from abc import ABC, abstractmethod

from rxlens.models import ImageAsset


class CaptureProvider(ABC):
    @abstractmethod
    async def capture(self) -> ImageAsset:
        """Produce one still image. Raises CaptureUnavailable or EncodingFailure."""
        ...
