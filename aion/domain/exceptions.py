"""Errors raised by the services; the HTTP layer maps each to a status code."""


class EntityNotFoundError(Exception):
    """No record of ``entity_type`` exists under ``entity_id``."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """A unique field (username, email) is already taken."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidCredentialsError(Exception):
    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class ChatProviderError(Exception):
    """The language-model provider failed to produce a completion.

    ``status_code`` is the upstream HTTP status when there was one, or the
    closest equivalent (502 for transport failures and empty completions).
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class ChatProviderTimeoutError(ChatProviderError):
    """No answer arrived within ``timeout_seconds``."""

    def __init__(self, provider: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(provider, 504, f"No response within {timeout_seconds:g}s")
