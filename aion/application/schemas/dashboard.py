"""Pydantic DTOs for the dashboard views.

These mirror the dataclasses of ``aion.domain.analytics`` and are filled
from them with ``from_attributes``.
"""

from pydantic import Field

from aion.application.schemas.base import CamelModel, UtcDatetime
from aion.application.schemas.insight import InsightResponse
from aion.application.schemas.life_domain import LifeDomainResponse
from aion.domain.analytics import ContactStatus, FinancePeriod, GoalStatus
from aion.domain.entities import EventType


class ScheduleItemResponse(CamelModel):
    id: int
    title: str
    start_time: UtcDatetime
    duration: str = Field(..., examples=["1h 30m"])
    description: str
    type: EventType


class MoodTrendPointResponse(CamelModel):
    day: str
    score: int
    is_today: bool = False


class MoodShareResponse(CamelModel):
    name: str
    value: int
    color: str


class MoodHistoryPointResponse(CamelModel):
    date: UtcDatetime
    label: str = Field(..., examples=["Mar 4"])
    mood: str
    notes: str | None = None
    score: int


class GoalViewResponse(CamelModel):
    id: int
    title: str
    current: float
    target: float
    progress: int
    remaining_time: str
    status: GoalStatus
    category: str
    icon: str


class ContactViewResponse(CamelModel):
    id: int
    name: str
    avatar_url: str | None = None
    last_contact: str = Field(..., examples=["2 weeks ago"])
    last_contact_status: ContactStatus


class CategoryTotalResponse(CamelModel):
    category: str
    label: str
    amount: float
    color: str
    percentage: int


class FinanceDayResponse(CamelModel):
    day: str
    income: float
    expenses: float


class FinanceSummaryResponse(CamelModel):
    period: FinancePeriod
    start: UtcDatetime
    end: UtcDatetime
    income: float
    expenses: float
    net_savings: float
    savings_rate: float
    categories: list[CategoryTotalResponse]
    top_expenses: list[CategoryTotalResponse]


class LifeBalanceSummary(CamelModel):
    overall_score: int
    lowest_domain: str | None = None
    domains: list[LifeDomainResponse]


class DashboardResponse(CamelModel):
    """Everything the home screen shows, computed for one instant."""

    generated_at: UtcDatetime
    life_balance: LifeBalanceSummary
    today_schedule: list[ScheduleItemResponse]
    todays_mood: str | None = None
    mood_trend: list[MoodTrendPointResponse]
    finance: FinanceSummaryResponse
    cash_flow: list[FinanceDayResponse]
    active_goals: list[GoalViewResponse]
    priority_contacts: list[ContactViewResponse]
    latest_insight: InsightResponse | None = None


class MoodReportResponse(CamelModel):
    todays_mood: str | None = None
    most_common_mood: str | None = None
    history: list[MoodHistoryPointResponse]
    distribution: list[MoodShareResponse]
    weekday_averages: list[MoodTrendPointResponse]
