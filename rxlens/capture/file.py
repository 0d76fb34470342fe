"""FileCaptureProvider — reads an already-captured photo from disk."""
import asyncio
import logging
from pathlib import Path

from rxlens.capture.client import CaptureProvider
from rxlens.constants import (
    ERR_EMPTY_IMAGE,
    ERR_IMAGE_NOT_FOUND,
    ERR_IMAGE_PERMISSION,
    ERR_IMAGE_READ,
    MSG_CAPTURE_READ,
)
from rxlens.exceptions import CaptureUnavailable, EncodingFailure
from rxlens.models import ImageAsset

logger = logging.getLogger(__name__)


class FileCaptureProvider(CaptureProvider):

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    async def capture(self) -> ImageAsset:
        try:
            data = await asyncio.to_thread(self._path.read_bytes)
        except FileNotFoundError as exc:
            raise CaptureUnavailable(ERR_IMAGE_NOT_FOUND % self._path) from exc
        except PermissionError as exc:
            raise CaptureUnavailable(ERR_IMAGE_PERMISSION % self._path) from exc
        except OSError as exc:
            raise EncodingFailure(ERR_IMAGE_READ % exc) from exc

        match data:
            case b"":
                raise EncodingFailure(ERR_EMPTY_IMAGE)
            case _:
                logger.debug(MSG_CAPTURE_READ, len(data), self._path)
                return ImageAsset(data)
