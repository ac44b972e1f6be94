from .base import CamelModel, PatchModel, UtcDatetime
from .user import UserCreate, LoginRequest, UserResponse
from .life_domain import LifeDomainCreate, LifeDomainUpdate, LifeDomainResponse
from .event import EventCreate, EventUpdate, EventResponse
from .mood import MoodCreate, MoodResponse
from .transaction import TransactionCreate, TransactionResponse
from .goal import GoalCreate, GoalUpdate, GoalResponse
from .contact import ContactCreate, ContactUpdate, ContactResponse
from .insight import InsightCreate, InsightResponse
from .ai import (
    SuggestionRequest,
    RecommendationsRequest,
    LifeBalanceInsightResponse,
    TextInsightResponse,
    RecommendationsResponse,
)
from .dashboard import (
    DashboardResponse,
    MoodReportResponse,
    FinanceSummaryResponse,
)
from .health import HealthResponse

__all__ = [
    "CamelModel",
    "PatchModel",
    "UtcDatetime",
    "UserCreate",
    "LoginRequest",
    "UserResponse",
    "LifeDomainCreate",
    "LifeDomainUpdate",
    "LifeDomainResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "MoodCreate",
    "MoodResponse",
    "TransactionCreate",
    "TransactionResponse",
    "GoalCreate",
    "GoalUpdate",
    "GoalResponse",
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "InsightCreate",
    "InsightResponse",
    "SuggestionRequest",
    "RecommendationsRequest",
    "LifeBalanceInsightResponse",
    "TextInsightResponse",
    "RecommendationsResponse",
    "DashboardResponse",
    "MoodReportResponse",
    "FinanceSummaryResponse",
    "HealthResponse",
]
