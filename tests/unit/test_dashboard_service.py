"""Unit tests for the DashboardService views."""

from datetime import datetime, timedelta, timezone

import pytest

from aion.application.services import DashboardService
from aion.application.services.dashboard_service import day_bounds
from aion.domain.analytics import FinancePeriod, GoalStatus
from aion.domain.entities import (
    Contact,
    Event,
    EventType,
    Goal,
    Insight,
    InsightType,
    LifeDomain,
    Mood,
    MoodType,
    Transaction,
    TransactionType,
)


@pytest.fixture
def dashboard(store) -> DashboardService:
    return DashboardService(
        life_domains=store.life_domains,
        events=store.events,
        moods=store.moods,
        transactions=store.transactions,
        goals=store.goals,
        contacts=store.contacts,
        insights=store.insights,
    )


def test_day_bounds(now):
    start, end = day_bounds(now)
    assert start == datetime(2024, 3, 13, tzinfo=timezone.utc)
    assert end == datetime(2024, 3, 13, 23, 59, 59, 999999, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_overview_of_empty_user(dashboard, now):
    overview = await dashboard.overview(1, now)

    assert overview.generated_at == now
    assert overview.life_balance.overall_score == 0
    assert overview.life_balance.lowest_domain is None
    assert overview.today_schedule == []
    assert overview.todays_mood is None
    assert [p.score for p in overview.mood_trend] == [0] * 7
    assert overview.finance.savings_rate == 0
    assert len(overview.cash_flow) == 7
    assert overview.latest_insight is None


@pytest.mark.asyncio
async def test_overview_collects_every_section(dashboard, store, now):
    await store.life_domains.create(LifeDomain(user_id=1, name="Health", score=80, icon="heart", color="#10B981"))
    await store.life_domains.create(LifeDomain(user_id=1, name="Finance", score=50, icon="coin", color="#F59E0B"))
    await store.events.create(Event(user_id=1, title="Gym", start_time=now + timedelta(hours=2),
                                    end_time=now + timedelta(hours=3), type=EventType.HEALTH))
    await store.events.create(Event(user_id=1, title="Tomorrow", start_time=now + timedelta(days=1),
                                    end_time=now + timedelta(days=1, hours=1), type=EventType.WORK))
    await store.moods.create(Mood(user_id=1, date=now, mood_type=MoodType.HAPPY))
    await store.moods.create(Mood(user_id=1, date=now - timedelta(days=20), mood_type=MoodType.SAD))
    await store.transactions.create(Transaction(user_id=1, amount=2000, category="salary",
                                                date=now, type=TransactionType.INCOME))
    await store.transactions.create(Transaction(user_id=1, amount=500, category="housing",
                                                date=now - timedelta(days=1), type=TransactionType.EXPENSE))
    await store.goals.create(Goal(user_id=1, title="Done", target=1, current=1, category="x",
                                  icon="check", is_completed=True))
    await store.goals.create(Goal(user_id=1, title="Open", target=10, current=2, category="x", icon="flag"))
    await store.contacts.create(Contact(user_id=1, name="Jo", last_contact=now - timedelta(days=30)))
    first = await store.insights.create(Insight(user_id=1, content="Old", type=InsightType.REMINDER, category="x"))
    await store.insights.mark_as_actioned(first.id)

    overview = await dashboard.overview(1, now)

    assert overview.life_balance.overall_score == 65
    assert overview.life_balance.lowest_domain == "Finance"
    assert [i.title for i in overview.today_schedule] == ["Gym"]
    assert overview.today_schedule[0].duration == "1h"
    assert overview.todays_mood == "happy"
    assert overview.mood_trend[2].score == 90
    assert overview.mood_trend[2].is_today
    assert overview.finance.period is FinancePeriod.WEEK
    assert overview.finance.net_savings == 1500
    assert overview.cash_flow[1].expenses == 500
    assert overview.cash_flow[2].income == 2000
    assert [g.title for g in overview.active_goals] == ["Open"]
    assert overview.active_goals[0].status is GoalStatus.ON_TRACK
    assert overview.priority_contacts[0].last_contact == "1 months ago"
    assert overview.latest_insight is None


@pytest.mark.asyncio
async def test_finance_report_for_a_past_month(dashboard, store):
    feb = datetime(2024, 2, 10, tzinfo=timezone.utc)
    await store.transactions.create(Transaction(user_id=1, amount=40, category="food",
                                                date=feb, type=TransactionType.EXPENSE))
    await store.transactions.create(Transaction(user_id=1, amount=99, category="food",
                                                date=feb + timedelta(days=30), type=TransactionType.EXPENSE))

    report = await dashboard.finance_report(1, FinancePeriod.MONTH, feb)

    assert report.expenses == 40
    assert report.start == datetime(2024, 2, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_mood_report(dashboard, store, now):
    for days, mood in [(0, MoodType.CALM), (1, MoodType.CALM), (2, MoodType.SAD), (45, MoodType.ANGRY)]:
        await store.moods.create(Mood(user_id=1, date=now - timedelta(days=days), mood_type=mood))

    report = await dashboard.mood_report(1, now)

    assert report.todays_mood == "calm"
    assert report.most_common_mood == "calm"
    assert len(report.history) == 3
    assert {s.name: s.value for s in report.distribution} == {"Calm": 2, "Sad": 1}


@pytest.mark.asyncio
async def test_mood_report_without_moods(dashboard, now):
    report = await dashboard.mood_report(1, now)

    assert report.most_common_mood is None
    assert report.history == []
