"""FastAPI dependency injection — wires infrastructure to application layer.

The entity store, settings and chat provider are created once by
``create_app`` and kept on ``app.state``; services are built per request.
"""

from collections.abc import Callable
from datetime import datetime

from fastapi import Depends, Request

from aion.application.interfaces import ChatProvider
from aion.application.services import (
    ContactService,
    DashboardService,
    EventService,
    GoalService,
    InsightService,
    LifeDomainService,
    LifeInsightService,
    MoodService,
    SuggestionService,
    TransactionService,
    UserService,
)
from aion.config import Settings
from aion.domain.clock import utc_now
from aion.infrastructure.store import InMemoryEntityStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> InMemoryEntityStore:
    """The application's single entity store."""
    return request.app.state.store


def get_chat_provider(request: Request) -> ChatProvider:
    return request.app.state.chat_provider


def get_clock() -> Callable[[], datetime]:
    """Source of "now" for the dashboard views; overridden in tests."""
    return utc_now


def get_user_service(store: InMemoryEntityStore = Depends(get_store)) -> UserService:
    return UserService(store.users, store.owned_repositories())


def get_life_domain_service(
    store: InMemoryEntityStore = Depends(get_store),
) -> LifeDomainService:
    return LifeDomainService(store.life_domains)


def get_event_service(store: InMemoryEntityStore = Depends(get_store)) -> EventService:
    return EventService(store.events)


def get_mood_service(store: InMemoryEntityStore = Depends(get_store)) -> MoodService:
    return MoodService(store.moods)


def get_transaction_service(
    store: InMemoryEntityStore = Depends(get_store),
) -> TransactionService:
    return TransactionService(store.transactions)


def get_goal_service(store: InMemoryEntityStore = Depends(get_store)) -> GoalService:
    return GoalService(store.goals)


def get_contact_service(store: InMemoryEntityStore = Depends(get_store)) -> ContactService:
    return ContactService(store.contacts)


def get_insight_service(store: InMemoryEntityStore = Depends(get_store)) -> InsightService:
    return InsightService(store.insights)


def get_suggestion_service(
    store: InMemoryEntityStore = Depends(get_store),
    provider: ChatProvider = Depends(get_chat_provider),
    settings: Settings = Depends(get_app_settings),
) -> SuggestionService:
    """Provides a SuggestionService configured from settings."""
    return SuggestionService(
        provider,
        store.insights,
        model=settings.suggestion_model,
        max_tokens=settings.suggestion_max_tokens,
        timeout_seconds=settings.suggestion_timeout_seconds,
        max_retries=settings.suggestion_max_retries,
    )


def get_life_insight_service(
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> LifeInsightService:
    return LifeInsightService(suggestions)


def get_dashboard_service(
    store: InMemoryEntityStore = Depends(get_store),
) -> DashboardService:
    return DashboardService(
        life_domains=store.life_domains,
        events=store.events,
        moods=store.moods,
        transactions=store.transactions,
        goals=store.goals,
        contacts=store.contacts,
        insights=store.insights,
    )
