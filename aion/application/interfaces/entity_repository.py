"""Abstract repository interfaces (ports) shared by every entity kind."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """Port for keyed entity persistence — implemented in the infrastructure layer.

    Ordinary not-found is signalled by ``None`` / ``False``, never by raising.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> E | None:
        """Retrieve a single entity by id."""
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Persist a new entity and return a copy carrying its assigned id.

        The argument itself is left untouched.
        """
        ...

    @abstractmethod
    async def update(self, entity_id: int, changes: dict[str, Any]) -> E | None:
        """Shallow-merge ``changes`` onto the stored entity.

        Returns the merged entity, or None if the id is unknown.
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...


class UserOwnedRepository(Repository[E]):
    """Port for entities partitioned by ``user_id``."""

    @abstractmethod
    async def list_for_user(
        self,
        user_id: int,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> list[E]:
        """List a user's entities.

        ``start``/``end`` are inclusive bounds on the kind's date field and
        are ignored by kinds that have none. Ordering is kind-specific.
        """
        ...

    @abstractmethod
    async def delete_for_user(self, user_id: int) -> int:
        """Delete every entity owned by the user. Returns how many were removed."""
        ...
