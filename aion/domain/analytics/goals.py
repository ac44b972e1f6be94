"""Goal progress and pacing status.

The status is a pacing heuristic, not a feasibility check: a goal is
"behind" when it is overdue, or when little time remains relative to the
progress made (under 80% with less than a week left, under 50% with less
than a month left).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from aion.domain.analytics.common import clamp, days_between, round_half_up
from aion.domain.analytics.time_format import format_remaining_time
from aion.domain.entities import Goal


class GoalStatus(str, Enum):
    ON_TRACK = "on-track"
    BEHIND = "behind"
    COMPLETED = "completed"


@dataclass
class GoalView:
    """Presentation-ready goal."""

    id: int | None
    title: str
    current: float
    target: float
    progress: int
    remaining_time: str
    status: GoalStatus
    category: str
    icon: str


def goal_progress(goal: Goal) -> float:
    """Unclamped progress in percent; 0 when the target is not positive."""
    if goal.target <= 0:
        return 0.0
    return goal.current / goal.target * 100


def goal_progress_percent(goal: Goal) -> int:
    """Progress for display: rounded and clamped to 0–100."""
    return int(clamp(round_half_up(goal_progress(goal))))


def derive_goal_status(goal: Goal, now: datetime) -> GoalStatus:
    if goal.is_completed:
        return GoalStatus.COMPLETED
    if goal.deadline is None:
        return GoalStatus.ON_TRACK

    progress = goal_progress(goal)
    days_left = days_between(now, goal.deadline)

    if days_left < 0:
        return GoalStatus.BEHIND
    if days_left < 7 and progress < 80:
        return GoalStatus.BEHIND
    if days_left < 30 and progress < 50:
        return GoalStatus.BEHIND
    return GoalStatus.ON_TRACK


def summarize_goal(goal: Goal, now: datetime) -> GoalView:
    remaining = (
        format_remaining_time(goal.deadline, now) if goal.deadline else "No deadline"
    )
    return GoalView(
        id=goal.id,
        title=goal.title,
        current=goal.current,
        target=goal.target,
        progress=goal_progress_percent(goal),
        remaining_time=remaining,
        status=derive_goal_status(goal, now),
        category=goal.category,
        icon=goal.icon,
    )


def active_goal_views(goals: list[Goal], now: datetime, limit: int = 3) -> list[GoalView]:
    """The first ``limit`` goals that are not completed, as views."""
    views = [summarize_goal(goal, now) for goal in goals]
    return [v for v in views if v.status is not GoalStatus.COMPLETED][:limit]
