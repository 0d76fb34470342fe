"""Value types passed between capture, transcription and the chat session."""
import base64
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from rxlens.constants import (
    DATA_URL_TEMPLATE,
    ERR_EMPTY_IMAGE,
    IMAGE_CONTENT_TYPE,
    MSG_TRANSLATE_FAILED,
)
from rxlens.exceptions import EncodingFailure, TranscriptionError


@dataclass(frozen=True)
class ImageAsset:
    data: bytes
    content_type: str = IMAGE_CONTENT_TYPE

    def encode(self) -> str:
        match self.data:
            case bytes() | bytearray() as raw if raw:
                return base64.standard_b64encode(raw).decode()
            case _:
                raise EncodingFailure(ERR_EMPTY_IMAGE)

    def data_url(self) -> str:
        return DATA_URL_TEMPLATE % (self.content_type, self.encode())


@dataclass(frozen=True)
class TranscriptionRequest:
    model: str
    system_prompt: str
    user_prompt: str
    image_url: str

    @classmethod
    def for_image(
        cls, image: ImageAsset, *, model: str, system_prompt: str, user_prompt: str
    ) -> "TranscriptionRequest":
        return cls(
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            image_url=image.data_url(),
        )

    def messages(self) -> list[dict]:
        """Chat messages in wire order: system instruction, then prompt + inline image."""
        return [
            {"role": "system", "content": self.system_prompt},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": self.user_prompt},
                    {"type": "image_url", "image_url": {"url": self.image_url}},
                ],
            },
        ]


@dataclass(frozen=True)
class TranscriptionResult:
    text: Optional[str] = None
    error: Optional[TranscriptionError] = None

    @classmethod
    def success(cls, text: str) -> "TranscriptionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: TranscriptionError) -> "TranscriptionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_text(self) -> str:
        match (self.error, self.text):
            case (None, str() as text):
                return text
            case _:
                return MSG_TRANSLATE_FAILED


# ── response schema ───────────────────────────────────────────────────────────


class CompletionMessage(BaseModel):
    content: Optional[str] = None


class CompletionChoice(BaseModel):
    message: Optional[CompletionMessage] = None


class CompletionResponse(BaseModel):
    choices: list[CompletionChoice] = Field(default_factory=list)


class SessionStatus(Enum):
    IDLE = "idle"
    PENDING = "pending"
    DONE = "done"
