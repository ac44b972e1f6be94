"""LLM infrastructure module — concrete chat provider implementations."""

from .openai_chat_client import OpenAIChatClient, PLACEHOLDER_API_KEY

__all__ = [
    "OpenAIChatClient",
    "PLACEHOLDER_API_KEY",
]
