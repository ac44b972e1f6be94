"""Derived-state engine: pure functions turning entity lists into dashboard values.

Nothing here reads the clock; callers pass ``now`` explicitly.
"""

from .common import days_between, round_half_up, clamp
from .time_format import format_last_contact, format_remaining_time, format_event_duration
from .goals import (
    GoalStatus,
    GoalView,
    goal_progress,
    goal_progress_percent,
    derive_goal_status,
    summarize_goal,
    active_goal_views,
)
from .contacts import (
    ContactStatus,
    ContactView,
    derive_contact_status,
    summarize_contact,
    priority_contacts,
)
from .moods import (
    MOOD_SCORES,
    MoodTrendPoint,
    MoodShare,
    MoodHistoryPoint,
    mood_score,
    weekly_mood_trend,
    weekday_mood_averages,
    mood_distribution,
    mood_history,
    todays_mood,
    most_common_mood,
)
from .finance import (
    FinancePeriod,
    CategoryTotal,
    FinanceDay,
    FinanceSummary,
    category_label,
    category_color,
    period_bounds,
    in_period,
    type_total,
    totals_by_type,
    category_totals,
    summarize_finances,
    daily_cash_flow,
)
from .schedule import ScheduleItem, schedule_items, events_on_day
from .life_balance import overall_score, lowest_domain, display_score

__all__ = [
    "days_between",
    "round_half_up",
    "clamp",
    "format_last_contact",
    "format_remaining_time",
    "format_event_duration",
    "GoalStatus",
    "GoalView",
    "goal_progress",
    "goal_progress_percent",
    "derive_goal_status",
    "summarize_goal",
    "active_goal_views",
    "ContactStatus",
    "ContactView",
    "derive_contact_status",
    "summarize_contact",
    "priority_contacts",
    "MOOD_SCORES",
    "MoodTrendPoint",
    "MoodShare",
    "MoodHistoryPoint",
    "mood_score",
    "weekly_mood_trend",
    "weekday_mood_averages",
    "mood_distribution",
    "mood_history",
    "todays_mood",
    "most_common_mood",
    "FinancePeriod",
    "CategoryTotal",
    "FinanceDay",
    "FinanceSummary",
    "category_label",
    "category_color",
    "period_bounds",
    "in_period",
    "type_total",
    "totals_by_type",
    "category_totals",
    "summarize_finances",
    "daily_cash_flow",
    "ScheduleItem",
    "schedule_items",
    "events_on_day",
    "overall_score",
    "lowest_domain",
    "display_score",
]
