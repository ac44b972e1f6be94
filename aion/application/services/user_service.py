"""Application service (use case) for user registration, login and removal."""

import logging

from aion.application.interfaces import UserOwnedRepository, UserRepository
from aion.application.schemas.user import UserCreate
from aion.domain.entities import User
from aion.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


class UserService:
    """User use cases.

    ``owned`` lists every repository holding user-owned data; deleting a
    user removes that user's records from all of them.
    """

    def __init__(
        self,
        users: UserRepository,
        owned: list[UserOwnedRepository] | None = None,
    ):
        self._users = users
        self._owned = owned or []

    async def register(self, data: UserCreate) -> User:
        if await self._users.get_by_username(data.username) is not None:
            raise DuplicateEntityError("User", "username", data.username)
        if await self._users.get_by_email(data.email) is not None:
            raise DuplicateEntityError("User", "email", data.email)

        user = await self._users.create(User(**data.model_dump()))
        logger.info("Registered user '%s' (id=%s)", user.username, user.id)
        return user

    async def authenticate(self, username: str, password: str) -> User:
        user = await self._users.get_by_username(username)
        if user is None or user.password != password:
            logger.info("Rejected login for '%s'", username)
            raise InvalidCredentialsError()
        logger.info("User '%s' logged in", username)
        return user

    async def get_current_user(self) -> User:
        """The first stored user; there are no sessions yet."""
        user = await self._users.get_first()
        if user is None:
            raise EntityNotFoundError("User", "me")
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def delete_user(self, user_id: int) -> None:
        if not await self._users.delete(user_id):
            raise EntityNotFoundError("User", user_id)

        removed = 0
        for repository in self._owned:
            removed += await repository.delete_for_user(user_id)
        logger.info("Deleted user id=%s and %d owned record(s)", user_id, removed)
