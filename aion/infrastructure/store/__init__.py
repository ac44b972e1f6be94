from .memory_repository import (
    InMemoryRepository,
    InMemoryUserOwnedRepository,
    InMemoryUserRepository,
    InMemoryInsightRepository,
)
from .memory_store import InMemoryEntityStore, DEMO_USER

__all__ = [
    "InMemoryRepository",
    "InMemoryUserOwnedRepository",
    "InMemoryUserRepository",
    "InMemoryInsightRepository",
    "InMemoryEntityStore",
    "DEMO_USER",
]
