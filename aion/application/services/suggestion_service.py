"""AI suggestion bridge — turns a snapshot of user data into a stored insight."""

import asyncio
import json
import logging
import time
from datetime import datetime
from typing import Any

from aion.application.interfaces import ChatProvider, InsightRepository
from aion.domain.clock import as_utc
from aion.domain.entities import ChatCompletionResult, ChatMessage, Insight, InsightType
from aion.domain.exceptions import ChatProviderError, ChatProviderTimeoutError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an AI life assistant that provides helpful insights and suggestions "
    "based on user data. Your goal is to help users optimize their life and "
    "achieve balance."
)
USER_PROMPT = (
    "Based on this user data, provide one specific, actionable insight or "
    "suggestion that would help the user optimize their life or achieve better "
    "balance:\n\n{data}"
)
SUGGESTION_CATEGORY = "ai"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return as_utc(value).isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_snapshot(data: Any) -> str:
    """Compact JSON for the prompt; datetimes become ISO-8601 strings."""
    return json.dumps(data, separators=(",", ":"), default=_json_default)


def is_retryable(error: ChatProviderError) -> bool:
    """Timeouts and server-side failures are worth one more try; 4xx are not."""
    return isinstance(error, ChatProviderTimeoutError) or error.status_code >= 500


class SuggestionService:
    """Generates one suggestion per call and persists it as an Insight.

    Each provider call is bounded by ``timeout_seconds``. Timeouts and 5xx
    errors are retried up to ``max_retries`` times; the last error is
    re-raised when every attempt fails.
    """

    def __init__(
        self,
        provider: ChatProvider,
        insights: InsightRepository,
        *,
        model: str = "gpt-4o",
        max_tokens: int = 150,
        timeout_seconds: float = 30.0,
        max_retries: int = 1,
    ):
        self._provider = provider
        self._insights = insights
        self._model = model
        self._max_tokens = max_tokens
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries

    @staticmethod
    def build_messages(data: Any) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=USER_PROMPT.format(data=serialize_snapshot(data))),
        ]

    async def generate_suggestion(self, user_id: int, data: Any) -> Insight:
        messages = self.build_messages(data)
        result = await self._complete_with_retry(messages)

        insight = await self._insights.create(
            Insight(
                user_id=user_id,
                content=result.content,
                type=InsightType.SUGGESTION,
                category=SUGGESTION_CATEGORY,
            )
        )
        logger.info("Stored AI suggestion id=%s for user %s", insight.id, user_id)
        return insight

    async def _complete_with_retry(self, messages: list[ChatMessage]) -> ChatCompletionResult:
        attempt = 1
        while True:
            try:
                return await self._complete_once(messages)
            except ChatProviderError as e:
                if attempt > self._max_retries or not is_retryable(e):
                    logger.error("Suggestion failed after %d attempt(s): %s", attempt, e)
                    raise
                logger.warning("Suggestion attempt %d failed (%s), retrying", attempt, e)
                attempt += 1

    async def _complete_once(self, messages: list[ChatMessage]) -> ChatCompletionResult:
        start = time.monotonic()
        try:
            result = await asyncio.wait_for(
                self._provider.complete(
                    messages, self._model, max_tokens=self._max_tokens
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ChatProviderTimeoutError(
                self._provider.provider_name, self._timeout_seconds
            ) from e

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "Completion from %s/%s in %dms (tokens: prompt=%d completion=%d)",
            result.provider or self._provider.provider_name,
            result.model or self._model,
            duration_ms,
            result.usage.prompt_tokens,
            result.usage.completion_tokens,
        )

        if not result.content.strip():
            raise ChatProviderError(
                provider=self._provider.provider_name,
                status_code=502,
                message="Empty completion",
            )
        return result
