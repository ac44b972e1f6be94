from .entity_service import (
    OwnedEntityService,
    LifeDomainService,
    EventService,
    MoodService,
    TransactionService,
    GoalService,
    ContactService,
    InsightService,
)
from .user_service import UserService
from .suggestion_service import SuggestionService
from .life_insight_service import LifeInsightService, LifeBalanceAnalysis
from .dashboard_service import DashboardService

__all__ = [
    "OwnedEntityService",
    "LifeDomainService",
    "EventService",
    "MoodService",
    "TransactionService",
    "GoalService",
    "ContactService",
    "InsightService",
    "UserService",
    "SuggestionService",
    "LifeInsightService",
    "LifeBalanceAnalysis",
    "DashboardService",
]
