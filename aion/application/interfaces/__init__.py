from .entity_repository import Repository, UserOwnedRepository
from .user_repository import UserRepository
from .insight_repository import InsightRepository
from .chat_provider import ChatProvider

__all__ = [
    "Repository",
    "UserOwnedRepository",
    "UserRepository",
    "InsightRepository",
    "ChatProvider",
]
