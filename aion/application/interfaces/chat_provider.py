"""Port for language-model completions."""

from abc import ABC, abstractmethod

from aion.domain.entities import ChatCompletionResult, ChatMessage


class ChatProvider(ABC):
    """What the suggestion bridge needs from an LLM backend."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short name used in logs and error messages, e.g. ``openai``."""

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        """Return one completion for ``messages``.

        Raises ChatProviderTimeoutError when the backend does not answer in
        time and ChatProviderError for every other failure.
        """
