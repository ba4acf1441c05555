"""Multipart request construction for OpenAI-compatible transcription endpoints."""
from typing import Optional

import httpx

from stt_api.constants import (
    AUDIO_FILENAME,
    AUDIO_MEDIA_TYPE,
    AUTH_HEADER,
    AUTH_SCHEME,
    FIELD_FILE,
    FIELD_LANGUAGE,
    FIELD_MODEL,
    FIELD_RESPONSE_FORMAT,
    LANGUAGE_AUTO,
    RESPONSE_FORMAT,
    TRANSCRIPTIONS_PATH,
)
from stt_api.errors import RequestBuildError
from stt_api.settings import SttApiProvider


def transcription_url(provider: SttApiProvider) -> str:
    return f"{provider.base_url.rstrip('/')}{TRANSCRIPTIONS_PATH}"


def form_fields(model: str, language: Optional[str]) -> dict[str, str]:
    fields = {FIELD_MODEL: model}
    match language:
        case str() as lang if lang and lang != LANGUAGE_AUTO:
            fields[FIELD_LANGUAGE] = lang
        case _:
            pass
    fields[FIELD_RESPONSE_FORMAT] = RESPONSE_FORMAT
    return fields


def auth_headers(api_key: str) -> dict[str, str]:
    """Bearer header only for a non-blank key — never an empty placeholder."""
    match api_key.strip():
        case "":
            return {}
        case _:
            return {AUTH_HEADER: f"{AUTH_SCHEME} {api_key}"}


def build_transcription_request(
    provider: SttApiProvider,
    api_key: str,
    model: str,
    wav_bytes: bytes,
    language: Optional[str] = None,
) -> httpx.Request:
    try:
        return httpx.Request(
            "POST",
            transcription_url(provider),
            headers=auth_headers(api_key),
            data=form_fields(model, language),
            files={FIELD_FILE: (AUDIO_FILENAME, wav_bytes, AUDIO_MEDIA_TYPE)},
        )
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestBuildError(str(exc)) from exc
