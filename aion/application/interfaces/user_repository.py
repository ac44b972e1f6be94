"""Abstract repository interface (port) for User persistence."""

from abc import abstractmethod

from aion.application.interfaces.entity_repository import Repository
from aion.domain.entities import User


class UserRepository(Repository[User]):
    """Port for user persistence."""

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_first(self) -> User | None:
        """The earliest stored user, or None when there are none."""
        ...
