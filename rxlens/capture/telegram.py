"""TelegramPhotoCapture — downloads the photo attached to a Telegram message."""
from typing import Sequence

from telegram import PhotoSize
from telegram.error import BadRequest, NetworkError, TelegramError

from rxlens.capture.client import CaptureProvider
from rxlens.constants import ERR_EMPTY_IMAGE, ERR_NO_PHOTO, ERR_PHOTO_DOWNLOAD
from rxlens.exceptions import CaptureUnavailable, EncodingFailure, NetworkFailure
from rxlens.models import ImageAsset


class TelegramPhotoCapture(CaptureProvider):

    def __init__(self, photo_sizes: Sequence[PhotoSize]) -> None:
        self._photo_sizes = photo_sizes

    async def capture(self) -> ImageAsset:
        if not self._photo_sizes:
            raise CaptureUnavailable(ERR_NO_PHOTO)
        largest = self._photo_sizes[-1]

        try:
            tg_file = await largest.get_file()
            data = bytes(await tg_file.download_as_bytearray())
        except BadRequest as exc:
            # Subclass of NetworkError: expired or invalid file_id.
            raise EncodingFailure(ERR_PHOTO_DOWNLOAD % exc) from exc
        except NetworkError as exc:
            raise NetworkFailure(ERR_PHOTO_DOWNLOAD % exc) from exc
        except TelegramError as exc:
            raise EncodingFailure(ERR_PHOTO_DOWNLOAD % exc) from exc

        match data:
            case b"":
                raise EncodingFailure(ERR_EMPTY_IMAGE)
            case _:
                return ImageAsset(data)
