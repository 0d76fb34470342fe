from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from rxlens.constants import ERR_MISSING_API_KEY, OPENAI_BASE_URL, OPENAI_VISION_MODEL
from rxlens.exceptions import ConfigurationError


@dataclass(frozen=True)
class TranscriberConfig:
    """Settings for one transcription client. The API key is validated here, not per call."""

    api_key: str
    model: str = OPENAI_VISION_MODEL
    base_url: str = OPENAI_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        match self.api_key:
            case str() as key if key.strip():
                pass
            case _:
                raise ConfigurationError(ERR_MISSING_API_KEY)

    def __repr__(self) -> str:
        return (
            f"TranscriberConfig(api_key='***', model={self.model!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r})"
        )


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    openai_api_key: Optional[str]
    openai_model: str
    openai_base_url: str
    openai_timeout: Optional[float]

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("ALLOWED_CHAT_ID")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        openai_model = os.getenv("OPENAI_MODEL") or OPENAI_VISION_MODEL
        openai_base_url = os.getenv("OPENAI_BASE_URL") or OPENAI_BASE_URL
        raw_timeout = os.getenv("OPENAI_TIMEOUT") or None

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            openai_api_key=openai_api_key,
            openai_model=openai_model,
            openai_base_url=openai_base_url,
            openai_timeout=float(raw_timeout) if raw_timeout else None,
        )

    def transcriber_config(self) -> TranscriberConfig:
        """Raises ConfigurationError when OPENAI_API_KEY is missing."""
        return TranscriberConfig(
            api_key=self.openai_api_key or "",
            model=self.openai_model,
            base_url=self.openai_base_url,
            timeout=self.openai_timeout,
        )

    def __repr__(self) -> str:
        return (
            f"Config(allowed_chat_id={self.allowed_chat_id!r}, log_level={self.log_level!r}, "
            f"openai_model={self.openai_model!r}, openai_base_url={self.openai_base_url!r}, "
            f"openai_timeout={self.openai_timeout!r})"
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        openai_api_key: Optional[str],
        openai_model: str,
        openai_base_url: str,
        openai_timeout: Optional[float],
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match openai_timeout:
            case float() as t if t <= 0:
                raise ValueError("OPENAI_TIMEOUT must be a positive number of seconds")
            case _:
                pass

        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            openai_api_key=openai_api_key,
            openai_model=openai_model,
            openai_base_url=openai_base_url,
            openai_timeout=openai_timeout,
        )
