"""OpenAICompatTranscriptionClient — any server speaking the /audio/transcriptions protocol.

Works against OpenAI, Groq, faster-whisper servers and similar. A call is
a single attempt: no retries, no internal timeout. Callers that need a
deadline wrap the await in ``asyncio.timeout``; cancellation drops the
in-flight request and closes the response.
"""
import json
import logging
from collections.abc import Sequence
from typing import Optional

import httpx

from stt_api.audio.wav import samples_to_wav
from stt_api.constants import (
    MSG_HTTP_ERROR_LOG,
    MSG_REQUEST_OK,
    MSG_RESPONSE_BODY,
    MSG_SENDING_REQUEST,
)
from stt_api.errors import (
    EmptyTranscriptionError,
    HttpStatusError,
    NetworkError,
    ParseError,
    ResponseReadError,
)
from stt_api.settings import SttApiProvider
from stt_api.transcription.client import TranscriptionClient
from stt_api.transcription.request import build_transcription_request, transcription_url

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def parse_transcription(body: str) -> str:
    """Extract and trim ``text`` from a ``{"text": ...}`` body; other keys are ignored."""
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise ParseError(_describe(exc), body) from exc

    match payload:
        case {"text": str() as text}:
            pass
        case _:
            raise ParseError("expected a JSON object with a string 'text' field", body)

    match text.strip():
        case "":
            raise EmptyTranscriptionError()
        case stripped:
            return stripped


class OpenAICompatTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        provider: SttApiProvider,
        api_key: str,
        model: str,
        language: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._provider = provider
        self._api_key = api_key
        self._model = model
        self._language = language
        self._http_client = http_client

    async def transcribe(self, samples: Sequence[float]) -> str:
        logger.info(MSG_SENDING_REQUEST, transcription_url(self._provider), self._model, self._language)
        request = build_transcription_request(
            self._provider,
            self._api_key,
            self._model,
            samples_to_wav(samples),
            self._language,
        )
        match self._http_client:
            case None:
                async with httpx.AsyncClient(timeout=None) as client:
                    return await self._exchange(client, request)
            case client:
                return await self._exchange(client, request)

    async def _exchange(self, client: httpx.AsyncClient, request: httpx.Request) -> str:
        try:
            response = await client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise NetworkError(_describe(exc)) from exc

        try:
            await response.aread()
        except (httpx.TransportError, httpx.StreamError, httpx.DecodingError) as exc:
            raise ResponseReadError(_describe(exc)) from exc
        finally:
            await response.aclose()

        body = response.text
        match response.is_success:
            case False:
                logger.error(MSG_HTTP_ERROR_LOG, response.status_code, body)
                raise HttpStatusError(response.status_code, body)
            case True:
                pass

        logger.debug(MSG_RESPONSE_BODY, body)
        text = parse_transcription(body)
        logger.info(MSG_REQUEST_OK, len(text))
        return text
