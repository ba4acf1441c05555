"""Provider resolution — turns a settings snapshot into request parameters."""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

import httpx

from stt_api.constants import LANGUAGE_AUTO
from stt_api.errors import NoProviderConfiguredError, NotEnabledError
from stt_api.settings import SttApiProvider, SttApiSettings
from stt_api.transcription.openai_compat import OpenAICompatTranscriptionClient


@dataclass(frozen=True)
class ResolvedProvider:
    provider: SttApiProvider
    api_key: str
    model: str
    language: Optional[str]


def resolve_language(selected_language: str) -> Optional[str]:
    """``"auto"`` (or blank) means let the server detect the language."""
    match selected_language:
        case lang if not lang or lang == LANGUAGE_AUTO:
            return None
        case lang:
            return lang


def resolve_request_params(settings: SttApiSettings) -> ResolvedProvider:
    match settings.enabled:
        case False:
            raise NotEnabledError()
        case True:
            pass

    provider = settings.active_provider()
    match provider:
        case None:
            raise NoProviderConfiguredError(settings.provider_id)
        case _:
            pass

    return ResolvedProvider(
        provider=provider,
        api_key=settings.api_key_for(provider.id),
        model=settings.model_for(provider.id),
        language=resolve_language(settings.selected_language),
    )


async def transcribe_with_stt_api(
    settings: SttApiSettings,
    samples: Sequence[float],
    http_client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Transcribe one utterance with the provider active in ``settings``.

    ``settings`` is the snapshot for this attempt; later edits to the store
    do not affect a request already in flight.
    """
    resolved = resolve_request_params(settings)
    client = OpenAICompatTranscriptionClient(
        resolved.provider,
        resolved.api_key,
        resolved.model,
        resolved.language,
        http_client=http_client,
    )
    return await client.transcribe(samples)
