"""OpenAI chat-completions adapter for the ChatProvider port.

Speaks the ``POST {base_url}/chat/completions`` protocol over httpx, so any
OpenAI-compatible server can stand in for api.openai.com.
"""

import json
import logging
from typing import Any

import httpx

from aion.application.interfaces import ChatProvider
from aion.domain.entities import ChatCompletionResult, ChatMessage, TokenUsage
from aion.domain.exceptions import ChatProviderError, ChatProviderTimeoutError

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "dummy-key-for-development"
PROVIDER = "openai"


def completion_request(
    messages: list[ChatMessage],
    model: str,
    temperature: float | None,
    max_tokens: int | None,
) -> dict[str, Any]:
    """JSON body for one completion; unset options are left out."""
    body: dict[str, Any] = {
        "model": model,
        "messages": [{"role": m.role, "content": m.content} for m in messages],
    }
    options = {"temperature": temperature, "max_tokens": max_tokens}
    body.update({k: v for k, v in options.items() if v is not None})
    return body


def _malformed() -> ChatProviderError:
    return ChatProviderError(PROVIDER, 502, "Malformed completion response")


def _token_count(usage: dict[str, Any], key: str) -> int:
    value = usage.get(key)
    return value if isinstance(value, int) else 0


def parse_completion(body: Any) -> ChatCompletionResult:
    """Turn a chat-completions response body into a ChatCompletionResult.

    Some compatible servers answer 200 with an ``error`` object (or a bare
    error string) instead of choices; that is reported as a provider error
    as well. Any other unexpected shape raises a 502 provider error.
    """
    if not isinstance(body, dict):
        raise _malformed()

    if "error" in body:
        error = body["error"] or {}
        if isinstance(error, str):
            raise ChatProviderError(PROVIDER, 500, error)
        if not isinstance(error, dict):
            raise _malformed()
        code = error.get("code")
        raise ChatProviderError(
            PROVIDER,
            code if isinstance(code, int) else 500,
            str(error.get("message", "Unknown error")),
        )

    choices = body.get("choices") or []
    if not isinstance(choices, list):
        raise _malformed()
    if not choices:
        raise ChatProviderError(PROVIDER, 500, "No choices in response")

    first = choices[0]
    if not isinstance(first, dict):
        raise _malformed()
    message = first.get("message") or {}
    if not isinstance(message, dict):
        raise _malformed()
    content = message.get("content") or ""
    if not isinstance(content, str):
        raise _malformed()

    usage = body.get("usage")
    usage = usage if isinstance(usage, dict) else {}
    model = body.get("model")
    finish_reason = first.get("finish_reason")
    return ChatCompletionResult(
        model=model if isinstance(model, str) else "",
        content=content,
        finish_reason=finish_reason if isinstance(finish_reason, str) and finish_reason else "stop",
        usage=TokenUsage(
            prompt_tokens=_token_count(usage, "prompt_tokens"),
            completion_tokens=_token_count(usage, "completion_tokens"),
            total_tokens=_token_count(usage, "total_tokens"),
        ),
        provider=PROVIDER,
    )


def _error_message(response: httpx.Response) -> str:
    try:
        error = response.json().get("error") or {}
    except (json.JSONDecodeError, AttributeError):
        return response.text
    if isinstance(error, str):
        return error
    if not isinstance(error, dict):
        return response.text
    return str(error.get("message", response.text))


class OpenAIChatClient(ChatProvider):
    """Chat provider backed by the OpenAI HTTP API.

    Without an API key the placeholder key is sent, so requests still go
    out and get rejected upstream; callers then take their fallback path.
    Pass ``http_client`` to reuse a client (or a mock transport in tests);
    otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key or PLACEHOLDER_API_KEY
        self._endpoint = base_url.rstrip("/") + "/chat/completions"
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return PROVIDER

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        body = completion_request(messages, model, temperature, max_tokens)
        response = await self._post(body)

        if response.status_code != 200:
            raise ChatProviderError(PROVIDER, response.status_code, _error_message(response))
        try:
            payload = response.json()
        except json.JSONDecodeError as e:
            raise ChatProviderError(PROVIDER, 502, "Response body is not JSON") from e
        return parse_completion(payload)

    async def _post(self, body: dict[str, Any]) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            if self._http_client is not None:
                return await self._http_client.post(self._endpoint, headers=headers, json=body)
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                return await client.post(self._endpoint, headers=headers, json=body)
        except httpx.TimeoutException as e:
            logger.warning("%s gave no answer within %ss", self._endpoint, self._timeout_seconds)
            raise ChatProviderTimeoutError(PROVIDER, self._timeout_seconds) from e
        except httpx.HTTPError as e:
            raise ChatProviderError(PROVIDER, 502, f"Transport error: {e}") from e
