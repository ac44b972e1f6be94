"""In-memory repository implementations.

Each repository keeps its records in a dict keyed by id and hands out
copies, so nothing outside the store can mutate a stored record.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from typing import Any, Generic, TypeVar

from aion.application.interfaces import (
    InsightRepository,
    Repository,
    UserOwnedRepository,
    UserRepository,
)
from aion.domain.clock import as_utc, utc_now
from aion.domain.entities import Insight, User

logger = logging.getLogger(__name__)

E = TypeVar("E")

Clock = Callable[[], datetime]


class InMemoryRepository(Repository[E], Generic[E]):
    """Keyed storage with a per-kind id counter that starts at 1 and never reuses ids."""

    def __init__(self, kind: str, clock: Clock = utc_now):
        self.kind = kind
        self._clock = clock
        self._records: dict[int, E] = {}
        self._next_id = 1

    def _prepare(self, entity: E) -> E:
        """Hook for kinds that stamp fields at insert time."""
        return entity

    def insert(self, entity: E) -> E:
        stored = replace(self._prepare(entity), id=self._next_id)
        self._records[self._next_id] = stored
        self._next_id += 1
        logger.debug("Created %s id=%s", self.kind, stored.id)
        return replace(stored)

    def all(self) -> list[E]:
        """Every record, in insertion order."""
        return [replace(r) for r in self._records.values()]

    async def get_by_id(self, entity_id: int) -> E | None:
        record = self._records.get(entity_id)
        return replace(record) if record is not None else None

    async def create(self, entity: E) -> E:
        return self.insert(entity)

    async def update(self, entity_id: int, changes: dict[str, Any]) -> E | None:
        record = self._records.get(entity_id)
        if record is None:
            return None
        changes = {k: v for k, v in changes.items() if k != "id"}
        merged = replace(record, **changes)
        self._records[entity_id] = merged
        logger.debug("Updated %s id=%s fields=%s", self.kind, entity_id, sorted(changes))
        return replace(merged)

    async def delete(self, entity_id: int) -> bool:
        if self._records.pop(entity_id, None) is None:
            return False
        logger.debug("Deleted %s id=%s", self.kind, entity_id)
        return True


class InMemoryUserOwnedRepository(InMemoryRepository[E], UserOwnedRepository[E]):
    """Repository for entities partitioned by ``user_id``.

    Args:
        date_field: attribute used for range filters and ordering; kinds
            without one ignore range arguments and keep insertion order.
        newest_first: order by ``date_field`` descending instead of ascending.
    """

    def __init__(
        self,
        kind: str,
        *,
        date_field: str | None = None,
        newest_first: bool = False,
        clock: Clock = utc_now,
    ):
        super().__init__(kind, clock)
        self._date_field = date_field
        self._newest_first = newest_first

    def _sort_key(self, record: E) -> Any:
        return as_utc(getattr(record, self._date_field))

    async def list_for_user(
        self,
        user_id: int,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
        limit: int | None = None,
    ) -> list[E]:
        records = [r for r in self._records.values() if r.user_id == user_id]

        if self._date_field is not None:
            if start is not None:
                start = as_utc(start)
                records = [r for r in records if as_utc(getattr(r, self._date_field)) >= start]
            if end is not None:
                end = as_utc(end)
                records = [r for r in records if as_utc(getattr(r, self._date_field)) <= end]
            records = sorted(records, key=self._sort_key, reverse=self._newest_first)

        if limit is not None:
            records = records[:limit]
        return [replace(r) for r in records]

    async def delete_for_user(self, user_id: int) -> int:
        doomed = [k for k, r in self._records.items() if r.user_id == user_id]
        for key in doomed:
            del self._records[key]
        if doomed:
            logger.debug("Deleted %d %s record(s) of user %s", len(doomed), self.kind, user_id)
        return len(doomed)


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    """Users; lookups by username and email are linear scans."""

    def __init__(self, clock: Clock = utc_now):
        super().__init__("User", clock)

    async def get_by_username(self, username: str) -> User | None:
        return next((replace(u) for u in self._records.values() if u.username == username), None)

    async def get_by_email(self, email: str) -> User | None:
        return next((replace(u) for u in self._records.values() if u.email == email), None)

    async def get_first(self) -> User | None:
        return next((replace(u) for u in self._records.values()), None)


class InMemoryInsightRepository(InMemoryUserOwnedRepository[Insight], InsightRepository):
    """Insights, newest first; ``created_at`` is always stamped from the store clock."""

    def __init__(self, clock: Clock = utc_now):
        super().__init__("Insight", date_field="created_at", newest_first=True, clock=clock)

    def _prepare(self, entity: Insight) -> Insight:
        return replace(entity, created_at=as_utc(self._clock()))

    def _sort_key(self, record: Insight) -> Any:
        return (as_utc(record.created_at), record.id)

    async def mark_as_read(self, insight_id: int) -> Insight | None:
        return await self.update(insight_id, {"is_read": True})

    async def mark_as_actioned(self, insight_id: int) -> Insight | None:
        return await self.update(insight_id, {"is_actioned": True})
