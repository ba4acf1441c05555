"""Typed failures for the STT API path. Every one ends the current attempt."""
from stt_api.constants import (
    MSG_ERR_BASE_URL_LOCKED,
    MSG_ERR_EMPTY,
    MSG_ERR_HTTP_STATUS,
    MSG_ERR_NETWORK,
    MSG_ERR_NO_PROVIDER,
    MSG_ERR_NOT_ENABLED,
    MSG_ERR_PARSE,
    MSG_ERR_PROVIDER_NOT_FOUND,
    MSG_ERR_READ_BODY,
    MSG_ERR_REQUEST_BUILD,
)


class SttApiError(RuntimeError):
    """Base for every user-facing STT API failure."""


class NotEnabledError(SttApiError):

    def __init__(self) -> None:
        super().__init__(MSG_ERR_NOT_ENABLED)


class NoProviderConfiguredError(SttApiError):

    def __init__(self, provider_id: str) -> None:
        super().__init__(MSG_ERR_NO_PROVIDER)
        self.provider_id = provider_id


class ProviderNotFoundError(SttApiError):

    def __init__(self, provider_id: str) -> None:
        super().__init__(MSG_ERR_PROVIDER_NOT_FOUND % provider_id)
        self.provider_id = provider_id


class BaseUrlEditNotAllowedError(SttApiError):

    def __init__(self, label: str) -> None:
        super().__init__(MSG_ERR_BASE_URL_LOCKED % label)
        self.label = label


class RequestBuildError(SttApiError):

    def __init__(self, cause: str) -> None:
        super().__init__(MSG_ERR_REQUEST_BUILD % cause)
        self.cause = cause


class NetworkError(SttApiError):

    def __init__(self, cause: str) -> None:
        super().__init__(MSG_ERR_NETWORK % cause)
        self.cause = cause


class ResponseReadError(SttApiError):

    def __init__(self, cause: str) -> None:
        super().__init__(MSG_ERR_READ_BODY % cause)
        self.cause = cause


class HttpStatusError(SttApiError):
    """Non-2xx reply. The raw body is kept verbatim for diagnostics."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(MSG_ERR_HTTP_STATUS % (status, body))
        self.status = status
        self.body = body


class ParseError(SttApiError):

    def __init__(self, cause: str, raw_body: str) -> None:
        super().__init__(MSG_ERR_PARSE % (cause, raw_body))
        self.cause = cause
        self.raw_body = raw_body


class EmptyTranscriptionError(SttApiError):

    def __init__(self) -> None:
        super().__init__(MSG_ERR_EMPTY)
