"""Unit tests for the OpenAIChatClient."""

import json

import httpx
import pytest

from aion.domain.entities import ChatMessage
from aion.domain.exceptions import ChatProviderError, ChatProviderTimeoutError
from aion.infrastructure.llm import PLACEHOLDER_API_KEY, OpenAIChatClient


# ── Helpers ──


def _mock_completion(content: str = "Hello!", model: str = "gpt-4o") -> dict:
    return {
        "id": "chatcmpl-test123",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "model": model,
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def _client(handler, api_key: str = "test-key") -> OpenAIChatClient:
    return OpenAIChatClient(
        api_key=api_key,
        base_url="https://llm.test/v1/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


HI = [ChatMessage(role="user", content="Hi")]


# ── Tests ──


@pytest.mark.asyncio
async def test_complete_parses_response():
    client = _client(lambda request: httpx.Response(200, json=_mock_completion("The answer is 42.")))

    result = await client.complete(HI, "gpt-4o")

    assert result.content == "The answer is 42."
    assert result.model == "gpt-4o"
    assert result.finish_reason == "stop"
    assert result.usage.total_tokens == 15
    assert result.provider == "openai"


@pytest.mark.asyncio
async def test_request_shape():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_mock_completion())

    await _client(handler).complete(HI, "gpt-4o", max_tokens=150)

    (request,) = seen
    assert str(request.url) == "https://llm.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body == {
        "model": "gpt-4o",
        "messages": [{"role": "user", "content": "Hi"}],
        "max_tokens": 150,
    }


@pytest.mark.asyncio
async def test_empty_key_sends_placeholder():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["Authorization"])
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided"}})

    with pytest.raises(ChatProviderError) as exc_info:
        await _client(handler, api_key="").complete(HI, "gpt-4o")

    assert seen == [f"Bearer {PLACEHOLDER_API_KEY}"]
    assert exc_info.value.status_code == 401
    assert "Incorrect API key" in exc_info.value.message


@pytest.mark.asyncio
async def test_non_json_error_body_uses_text():
    client = _client(lambda request: httpx.Response(503, text="upstream unavailable"))

    with pytest.raises(ChatProviderError) as exc_info:
        await client.complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "upstream unavailable"


@pytest.mark.asyncio
async def test_error_in_200_body():
    client = _client(
        lambda request: httpx.Response(200, json={"error": {"code": 429, "message": "Slow down"}})
    )

    with pytest.raises(ChatProviderError) as exc_info:
        await client.complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_no_choices():
    client = _client(lambda request: httpx.Response(200, json={"choices": []}))

    with pytest.raises(ChatProviderError, match="No choices"):
        await client.complete(HI, "gpt-4o")


@pytest.mark.asyncio
async def test_timeout_is_reported_as_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ChatProviderTimeoutError) as exc_info:
        await _client(handler).complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 504


@pytest.mark.asyncio
async def test_connection_failure_is_bad_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ChatProviderError) as exc_info:
        await _client(handler).complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 502
    assert exc_info.value.message.startswith("Transport error")


@pytest.mark.asyncio
async def test_error_string_in_200_body():
    client = _client(lambda request: httpx.Response(200, json={"error": "quota exceeded"}))

    with pytest.raises(ChatProviderError) as exc_info:
        await client.complete(HI, "gpt-4o")

    assert exc_info.value.message == "quota exceeded"


@pytest.mark.asyncio
async def test_array_body_is_malformed():
    client = _client(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(ChatProviderError) as exc_info:
        await client.complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Malformed completion response"


@pytest.mark.asyncio
async def test_structured_content_is_malformed():
    body = {"choices": [{"message": {"content": [{"type": "text", "text": "hi"}]}}]}
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(ChatProviderError, match="Malformed completion response"):
        await client.complete(HI, "gpt-4o")


@pytest.mark.asyncio
async def test_non_object_choice_is_malformed():
    client = _client(lambda request: httpx.Response(200, json={"choices": ["hi"]}))

    with pytest.raises(ChatProviderError, match="Malformed completion response"):
        await client.complete(HI, "gpt-4o")


@pytest.mark.asyncio
async def test_error_string_in_failed_response():
    client = _client(lambda request: httpx.Response(429, json={"error": "rate limited"}))

    with pytest.raises(ChatProviderError) as exc_info:
        await client.complete(HI, "gpt-4o")

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "rate limited"
