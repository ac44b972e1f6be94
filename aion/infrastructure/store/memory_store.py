"""The in-memory Entity Store: one repository per entity kind.

Data lives only as long as the process. The store is built once per
application and handed to request handlers through dependencies.
"""

import logging

from aion.domain.clock import utc_now
from aion.domain.entities import (
    Contact,
    Event,
    Goal,
    LifeDomain,
    Mood,
    Transaction,
    User,
)
from aion.infrastructure.store.memory_repository import (
    Clock,
    InMemoryInsightRepository,
    InMemoryUserOwnedRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)

DEMO_USER = User(
    username="demo",
    password="password123",
    email="demo@example.com",
    full_name="Alex Morgan",
    avatar_url=(
        "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
        "?ixlib=rb-1.2.1&auto=format&fit=facearea&facepad=2&w=256&h=256&q=80"
    ),
)


class InMemoryEntityStore:
    def __init__(self, *, clock: Clock = utc_now, seed_demo_user: bool = True):
        self.clock = clock
        self.users = InMemoryUserRepository(clock)
        self.life_domains: InMemoryUserOwnedRepository[LifeDomain] = (
            InMemoryUserOwnedRepository("LifeDomain", clock=clock)
        )
        self.events: InMemoryUserOwnedRepository[Event] = InMemoryUserOwnedRepository(
            "Event", date_field="start_time", clock=clock
        )
        self.moods: InMemoryUserOwnedRepository[Mood] = InMemoryUserOwnedRepository(
            "Mood", date_field="date", newest_first=True, clock=clock
        )
        self.transactions: InMemoryUserOwnedRepository[Transaction] = (
            InMemoryUserOwnedRepository(
                "Transaction", date_field="date", newest_first=True, clock=clock
            )
        )
        self.goals: InMemoryUserOwnedRepository[Goal] = InMemoryUserOwnedRepository(
            "Goal", clock=clock
        )
        self.contacts: InMemoryUserOwnedRepository[Contact] = InMemoryUserOwnedRepository(
            "Contact", clock=clock
        )
        self.insights = InMemoryInsightRepository(clock)

        if seed_demo_user:
            user = self.users.insert(DEMO_USER)
            logger.info("Seeded demo user '%s' (id=%s)", user.username, user.id)

    def owned_repositories(self) -> list[InMemoryUserOwnedRepository]:
        """Every repository whose records belong to a user."""
        return [
            self.life_domains,
            self.events,
            self.moods,
            self.transactions,
            self.goals,
            self.contacts,
            self.insights,
        ]
