"""OpenAIPrescriptionTranscriber — GPT-4o vision backend over the chat completions API."""
import logging
import time
from typing import Any, Optional

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from rxlens.config import TranscriberConfig
from rxlens.constants import (
    ERR_ENDPOINT_AUTH,
    ERR_ENDPOINT_BODY,
    ERR_ENDPOINT_NO_CHOICES,
    ERR_ENDPOINT_NO_CONTENT,
    ERR_ENDPOINT_STATUS,
    ERR_NETWORK,
    ERR_TIMEOUT,
    MSG_TRANSCRIBE_FAIL,
    MSG_TRANSCRIBE_OK,
    MSG_TRANSCRIBE_START,
    MSG_TRANSCRIBE_UNEXPECTED,
    OPENAI_MAX_RETRIES,
    PRESCRIPTION_SYSTEM_PROMPT,
    PRESCRIPTION_USER_PROMPT,
)
from rxlens.exceptions import EndpointFailure, NetworkFailure, TranscriptionError
from rxlens.models import (
    CompletionMessage,
    CompletionResponse,
    ImageAsset,
    TranscriptionRequest,
    TranscriptionResult,
)
from rxlens.transcription.client import PrescriptionTranscriber

logger = logging.getLogger(__name__)


def extract_text(body: Any) -> str:
    """Return choices[0].message.content from a decoded response body, unmodified."""
    try:
        response = CompletionResponse.model_validate(body)
    except ValidationError as exc:
        raise EndpointFailure(ERR_ENDPOINT_BODY) from exc

    match response.choices:
        case []:
            raise EndpointFailure(ERR_ENDPOINT_NO_CHOICES)
        case [first, *_]:
            match first.message:
                case CompletionMessage(content=str() as content):
                    return content
                case _:
                    raise EndpointFailure(ERR_ENDPOINT_NO_CONTENT)


class OpenAIPrescriptionTranscriber(PrescriptionTranscriber):

    def __init__(
        self,
        config: TranscriberConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._client = self._make_client()

    def _make_client(self) -> AsyncOpenAI:
        options: dict[str, Any] = {
            "api_key": self._config.api_key,
            "base_url": self._config.base_url,
            "max_retries": OPENAI_MAX_RETRIES,
            "http_client": self._http_client,
        }
        match self._config.timeout:
            case None:
                pass
            case seconds:
                options["timeout"] = seconds
        return AsyncOpenAI(**options)

    def build_request(self, image_bytes: bytes) -> TranscriptionRequest:
        return TranscriptionRequest.for_image(
            ImageAsset(image_bytes),
            model=self._config.model,
            system_prompt=PRESCRIPTION_SYSTEM_PROMPT,
            user_prompt=PRESCRIPTION_USER_PROMPT,
        )

    async def transcribe(self, image_bytes: bytes) -> TranscriptionResult:
        start = time.time()
        try:
            request = self.build_request(image_bytes)
            logger.info(MSG_TRANSCRIBE_START, request.model, len(image_bytes))
            body = await self._post(request)
            text = extract_text(body)
        except TranscriptionError as exc:
            logger.error(MSG_TRANSCRIBE_FAIL, exc.message)
            return TranscriptionResult.failure(exc)
        except Exception as exc:
            logger.exception(MSG_TRANSCRIBE_UNEXPECTED)
            return TranscriptionResult.failure(TranscriptionError(str(exc)))

        logger.info(MSG_TRANSCRIBE_OK, time.time() - start)
        return TranscriptionResult.success(text)

    async def aclose(self) -> None:
        """Close the SDK client and its connection pool, including an injected http_client."""
        await self._client.close()

    async def _post(self, request: TranscriptionRequest) -> Any:
        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                model=request.model,
                messages=request.messages(),
            )
            return raw.http_response.json()
        except openai.APITimeoutError as exc:
            raise NetworkFailure(ERR_TIMEOUT) from exc
        except openai.APIConnectionError as exc:
            raise NetworkFailure(ERR_NETWORK % exc) from exc
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise EndpointFailure(ERR_ENDPOINT_AUTH % exc.status_code) from exc
        except openai.APIStatusError as exc:
            raise EndpointFailure(ERR_ENDPOINT_STATUS % exc.status_code) from exc
        except (openai.APIError, ValueError) as exc:
            raise EndpointFailure(ERR_ENDPOINT_BODY) from exc
