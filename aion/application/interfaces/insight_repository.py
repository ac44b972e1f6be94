"""Abstract repository interface (port) for Insight persistence."""

from abc import abstractmethod

from aion.application.interfaces.entity_repository import UserOwnedRepository
from aion.domain.entities import Insight


class InsightRepository(UserOwnedRepository[Insight]):
    """Insights are listed newest first and carry read / actioned flags."""

    @abstractmethod
    async def mark_as_read(self, insight_id: int) -> Insight | None:
        ...

    @abstractmethod
    async def mark_as_actioned(self, insight_id: int) -> Insight | None:
        ...
