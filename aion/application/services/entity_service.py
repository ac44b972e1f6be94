"""Application services (use cases) for the user-owned entity kinds."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

from aion.application.interfaces import InsightRepository, UserOwnedRepository
from aion.application.schemas.base import PatchModel
from aion.domain.entities import (
    Contact,
    Event,
    Goal,
    Insight,
    LifeDomain,
    Mood,
    Transaction,
)
from aion.domain.exceptions import EntityNotFoundError

E = TypeVar("E")


class OwnedEntityService(Generic[E]):
    """Orchestrates CRUD for one entity kind. Depends on the repository port (DI).

    Subclasses set ``entity_type`` (used in error messages) and
    ``entity_class`` (built from validated create payloads).
    """

    entity_type: str = "Entity"
    entity_class: type

    def __init__(self, repository: UserOwnedRepository[E]):
        self._repository = repository

    async def get(self, entity_id: int) -> E:
        entity = await self._repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_type, entity_id)
        return entity

    async def list_for_user(
        self,
        user_id: int,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> list[E]:
        return await self._repository.list_for_user(
            user_id, start=start, end=end, limit=limit
        )

    async def create(self, data: BaseModel) -> E:
        return await self._repository.create(self.entity_class(**data.model_dump()))

    async def update(self, entity_id: int, patch: PatchModel) -> E:
        updated = await self._repository.update(entity_id, patch.changes())
        if updated is None:
            raise EntityNotFoundError(self.entity_type, entity_id)
        return updated

    async def delete(self, entity_id: int) -> None:
        if not await self._repository.delete(entity_id):
            raise EntityNotFoundError(self.entity_type, entity_id)


class LifeDomainService(OwnedEntityService[LifeDomain]):
    entity_type = "LifeDomain"
    entity_class = LifeDomain


class EventService(OwnedEntityService[Event]):
    entity_type = "Event"
    entity_class = Event


class MoodService(OwnedEntityService[Mood]):
    entity_type = "Mood"
    entity_class = Mood


class TransactionService(OwnedEntityService[Transaction]):
    entity_type = "Transaction"
    entity_class = Transaction


class GoalService(OwnedEntityService[Goal]):
    entity_type = "Goal"
    entity_class = Goal


class ContactService(OwnedEntityService[Contact]):
    entity_type = "Contact"
    entity_class = Contact


class InsightService(OwnedEntityService[Insight]):
    entity_type = "Insight"
    entity_class = Insight

    def __init__(self, repository: InsightRepository):
        super().__init__(repository)
        self._insights = repository

    async def mark_as_read(self, insight_id: int) -> Insight:
        insight = await self._insights.mark_as_read(insight_id)
        if insight is None:
            raise EntityNotFoundError(self.entity_type, insight_id)
        return insight

    async def mark_as_actioned(self, insight_id: int) -> Insight:
        insight = await self._insights.mark_as_actioned(insight_id)
        if insight is None:
            raise EntityNotFoundError(self.entity_type, insight_id)
        return insight
