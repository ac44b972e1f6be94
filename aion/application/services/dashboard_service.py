"""Dashboard use cases — read the store, run the derived-state engine."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta

from aion.application.interfaces import InsightRepository, UserOwnedRepository
from aion.domain.analytics import (
    ContactView,
    FinanceDay,
    FinancePeriod,
    FinanceSummary,
    GoalView,
    MoodHistoryPoint,
    MoodShare,
    MoodTrendPoint,
    ScheduleItem,
    active_goal_views,
    daily_cash_flow,
    display_score,
    events_on_day,
    lowest_domain,
    mood_distribution,
    mood_history,
    most_common_mood,
    overall_score,
    priority_contacts,
    schedule_items,
    summarize_finances,
    todays_mood,
    weekday_mood_averages,
    weekly_mood_trend,
)
from aion.domain.clock import as_utc
from aion.domain.entities import (
    Contact,
    Event,
    Goal,
    Insight,
    LifeDomain,
    Mood,
    Transaction,
)

TREND_DAYS = 7
MOOD_REPORT_DAYS = 30


@dataclass
class LifeBalanceSnapshot:
    overall_score: int
    lowest_domain: str | None
    domains: list[LifeDomain] = field(default_factory=list)


@dataclass
class DashboardOverview:
    generated_at: datetime
    life_balance: LifeBalanceSnapshot
    today_schedule: list[ScheduleItem]
    todays_mood: str | None
    mood_trend: list[MoodTrendPoint]
    finance: FinanceSummary
    cash_flow: list[FinanceDay]
    active_goals: list[GoalView]
    priority_contacts: list[ContactView]
    latest_insight: Insight | None = None


@dataclass
class MoodReport:
    todays_mood: str | None
    most_common_mood: str | None
    history: list[MoodHistoryPoint]
    distribution: list[MoodShare]
    weekday_averages: list[MoodTrendPoint]


def day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Inclusive start and end of the UTC day containing ``now``."""
    start = as_utc(now).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


class DashboardService:
    def __init__(
        self,
        *,
        life_domains: UserOwnedRepository[LifeDomain],
        events: UserOwnedRepository[Event],
        moods: UserOwnedRepository[Mood],
        transactions: UserOwnedRepository[Transaction],
        goals: UserOwnedRepository[Goal],
        contacts: UserOwnedRepository[Contact],
        insights: InsightRepository,
    ):
        self._life_domains = life_domains
        self._events = events
        self._moods = moods
        self._transactions = transactions
        self._goals = goals
        self._contacts = contacts
        self._insights = insights

    async def life_balance(self, user_id: int) -> LifeBalanceSnapshot:
        """Scores as shown: stored values may sit outside 0-100 and are clamped here."""
        domains = await self._life_domains.list_for_user(user_id)
        lowest = lowest_domain(domains)
        return LifeBalanceSnapshot(
            overall_score=display_score(overall_score(domains)),
            lowest_domain=lowest.name if lowest else None,
            domains=[replace(d, score=display_score(d.score)) for d in domains],
        )

    async def overview(self, user_id: int, now: datetime) -> DashboardOverview:
        day_start, day_end = day_bounds(now)
        week_start = day_start - timedelta(days=TREND_DAYS - 1)

        events = await self._events.list_for_user(user_id, start=day_start, end=day_end)
        recent_moods = await self._moods.list_for_user(user_id, start=week_start, end=day_end)
        transactions = await self._transactions.list_for_user(user_id)
        goals = await self._goals.list_for_user(user_id)
        contacts = await self._contacts.list_for_user(user_id)
        insights = await self._insights.list_for_user(user_id)

        finance = summarize_finances(transactions, FinancePeriod.WEEK, now)

        return DashboardOverview(
            generated_at=as_utc(now),
            life_balance=await self.life_balance(user_id),
            today_schedule=schedule_items(events_on_day(events, now)),
            todays_mood=todays_mood(recent_moods, now),
            mood_trend=weekly_mood_trend(recent_moods, now),
            finance=finance,
            cash_flow=daily_cash_flow(transactions, finance.start),
            active_goals=active_goal_views(goals, now),
            priority_contacts=priority_contacts(contacts, now),
            latest_insight=next((i for i in insights if not i.is_actioned), None),
        )

    async def finance_report(
        self, user_id: int, period: FinancePeriod, reference: datetime
    ) -> FinanceSummary:
        transactions = await self._transactions.list_for_user(user_id)
        return summarize_finances(transactions, period, reference)

    async def recent_moods(self, user_id: int, now: datetime, days: int = MOOD_REPORT_DAYS) -> list[Mood]:
        """Moods from the last ``days`` days up to the end of today, newest first."""
        day_start, day_end = day_bounds(now)
        return await self._moods.list_for_user(
            user_id, start=day_start - timedelta(days=days), end=day_end
        )

    async def mood_report(self, user_id: int, now: datetime) -> MoodReport:
        moods = await self.recent_moods(user_id, now)
        return MoodReport(
            todays_mood=todays_mood(moods, now),
            most_common_mood=most_common_mood(moods) or None,
            history=mood_history(moods),
            distribution=mood_distribution(moods),
            weekday_averages=weekday_mood_averages(moods),
        )
