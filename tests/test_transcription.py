"""TranscriptionClient tests — HTTP exchange, status and body handling."""
import asyncio
import json

import httpx
import pytest

from stt_api.errors import (
    EmptyTranscriptionError,
    HttpStatusError,
    NetworkError,
    ParseError,
    ResponseReadError,
)
from stt_api.settings import SttApiProvider
from stt_api.transcription.client import TranscriptionClient
from stt_api.transcription.openai_compat import OpenAICompatTranscriptionClient, parse_transcription

PROVIDER = SttApiProvider(id="custom", label="Custom", base_url="http://stt.local/v1")


class _BrokenStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        raise httpx.ReadError("connection reset")
        yield b""


def _client(handler, api_key: str = "sk-test", model: str = "whisper-1") -> tuple[OpenAICompatTranscriptionClient, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAICompatTranscriptionClient(PROVIDER, api_key, model, http_client=http), http


def test_openai_compat_client_implements_abc():
    assert issubclass(OpenAICompatTranscriptionClient, TranscriptionClient)


@pytest.mark.asyncio
async def test_returns_trimmed_text():
    client, http = _client(lambda request: httpx.Response(200, json={"text": "  hello world  "}))
    async with http:
        assert await client.transcribe([0.0] * 16) == "hello world"


@pytest.mark.asyncio
async def test_extra_response_fields_are_ignored():
    client, http = _client(
        lambda request: httpx.Response(200, json={"text": "hi", "language": "en", "duration": 1.2})
    )
    async with http:
        assert await client.transcribe([0.0]) == "hi"


@pytest.mark.asyncio
async def test_whitespace_only_text_is_empty_error():
    client, http = _client(lambda request: httpx.Response(200, json={"text": "   "}))
    async with http:
        with pytest.raises(EmptyTranscriptionError, match="no speech detected"):
            await client.transcribe([0.0])


@pytest.mark.asyncio
async def test_server_error_keeps_status_and_body():
    client, http = _client(lambda request: httpx.Response(500, text="server error"))
    async with http:
        with pytest.raises(HttpStatusError) as exc_info:
            await client.transcribe([0.0])

    assert exc_info.value.status == 500
    assert exc_info.value.body == "server error"
    assert "500" in str(exc_info.value)
    assert "server error" in str(exc_info.value)


@pytest.mark.asyncio
async def test_error_status_wins_over_valid_json_body():
    client, http = _client(lambda request: httpx.Response(401, json={"text": "not for you"}))
    async with http:
        with pytest.raises(HttpStatusError) as exc_info:
            await client.transcribe([0.0])

    assert exc_info.value.status == 401


@pytest.mark.asyncio
async def test_invalid_json_is_parse_error_with_raw_body():
    client, http = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    async with http:
        with pytest.raises(ParseError) as exc_info:
            await client.transcribe([0.0])

    assert exc_info.value.raw_body == "<html>oops</html>"
    assert "<html>oops</html>" in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"result": "hi"}, {"text": 42}, ["hi"], "hi"])
async def test_wrong_shape_is_parse_error(payload):
    client, http = _client(lambda request: httpx.Response(200, text=json.dumps(payload)))
    async with http:
        with pytest.raises(ParseError):
            await client.transcribe([0.0])


@pytest.mark.asyncio
async def test_transport_failure_is_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, http = _client(handler)
    async with http:
        with pytest.raises(NetworkError, match="connection refused"):
            await client.transcribe([0.0])


@pytest.mark.asyncio
async def test_body_read_failure_is_response_read_error():
    client, http = _client(lambda request: httpx.Response(200, stream=_BrokenStream()))
    async with http:
        with pytest.raises(ResponseReadError, match="connection reset"):
            await client.transcribe([0.0])


@pytest.mark.asyncio
async def test_undecodable_body_is_response_read_error():
    client, http = _client(
        lambda request: httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"definitely not gzip")
    )
    async with http:
        with pytest.raises(ResponseReadError):
            await client.transcribe([0.0])


@pytest.mark.asyncio
async def test_single_attempt_no_retry():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, text="busy")

    client, http = _client(handler)
    async with http:
        with pytest.raises(HttpStatusError):
            await client.transcribe([0.0])

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_blank_key_sends_unauthenticated_request():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"text": "ok"})

    client, http = _client(handler, api_key="  ")
    async with http:
        await client.transcribe([0.0])

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_concurrent_attempts_are_independent():
    def handler(request: httpx.Request) -> httpx.Response:
        model = b"model-a" if b"\r\n\r\nmodel-a\r\n" in request.content else b"model-b"
        return httpx.Response(200, json={"text": model.decode()})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with http:
        a = OpenAICompatTranscriptionClient(PROVIDER, "", "model-a", http_client=http)
        b = OpenAICompatTranscriptionClient(PROVIDER, "", "model-b", http_client=http)
        results = await asyncio.gather(a.transcribe([0.1]), b.transcribe([0.2]))

    assert results == ["model-a", "model-b"]


@pytest.mark.asyncio
async def test_cancellation_drops_in_flight_request():
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.Event().wait()
        return httpx.Response(200, json={"text": "never"})

    client, http = _client(handler)
    async with http:
        task = asyncio.create_task(client.transcribe([0.0]))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


def test_parse_transcription_trims():
    assert parse_transcription('{"text": "\\n hi \\t"}') == "hi"
