"""Shared fixtures: a fresh store, a scripted chat provider and an API client per test."""

import asyncio
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from aion.application.interfaces import ChatProvider
from aion.config import Settings
from aion.domain.entities import ChatCompletionResult, ChatMessage, TokenUsage
from aion.infrastructure.dependencies import get_clock
from aion.infrastructure.store import InMemoryEntityStore
from aion.main import create_app

# A Wednesday afternoon.
FIXED_NOW = datetime(2024, 3, 13, 15, 30, tzinfo=timezone.utc)


class FakeChatProvider(ChatProvider):
    """In-memory fake provider that plays back queued replies.

    Each queued item is either the completion text to return or an
    exception to raise. With nothing queued, every call answers
    ``default_reply``.
    """

    def __init__(self, default_reply: str = "Take a 10 minute walk after lunch."):
        self.default_reply = default_reply
        self.replies: list[str | Exception] = []
        self.calls: list[list[ChatMessage]] = []
        self.models: list[str] = []
        self.delay_seconds = 0.0

    @property
    def provider_name(self) -> str:
        return "fake"

    def queue(self, *replies: str | Exception) -> None:
        self.replies.extend(replies)

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        self.calls.append(messages)
        self.models.append(model)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        reply = self.replies.pop(0) if self.replies else self.default_reply
        if isinstance(reply, Exception):
            raise reply
        return ChatCompletionResult(
            model=model,
            content=reply,
            finish_reason="stop",
            usage=TokenUsage(prompt_tokens=12, completion_tokens=8, total_tokens=20),
            provider=self.provider_name,
        )


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def chat_provider() -> FakeChatProvider:
    return FakeChatProvider()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        suggestion_timeout_seconds=0.2,
        suggestion_max_retries=1,
    )


@pytest.fixture
def app(settings, store, chat_provider):
    application = create_app(settings=settings, store=store, chat_provider=chat_provider)
    application.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
