"""User-visible relative-time and duration strings.

These strings are shown verbatim in the dashboard, so thresholds and
wording (including plurals such as "1 weeks ago") must not drift.
"""

from datetime import datetime

from aion.domain.analytics.common import days_between
from aion.domain.clock import as_utc


def format_last_contact(date: datetime, now: datetime) -> str:
    """Describe how long ago ``date`` was."""
    days = days_between(date, now)

    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    if days < 365:
        return f"{days // 30} months ago"
    return f"{days // 365} years ago"


def format_remaining_time(deadline: datetime, now: datetime) -> str:
    """Describe how much time is left until ``deadline``."""
    days_left = days_between(now, deadline)

    if days_left < 0:
        return "Overdue"
    if days_left == 0:
        return "Due today"
    if days_left == 1:
        return "1 day remaining"
    if days_left < 7:
        return f"{days_left} days remaining"
    if days_left < 30:
        return f"{days_left // 7} weeks remaining"
    if days_left < 365:
        return f"{days_left // 30} months remaining"
    return f"{days_left // 365} years remaining"


def format_event_duration(start: datetime, end: datetime) -> str:
    """Render an event length as ``45m``, ``2h`` or ``1h 30m`` (floored minutes)."""
    minutes = int((as_utc(end) - as_utc(start)).total_seconds() // 60)

    if minutes < 60:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m" if remaining > 0 else f"{hours}h"
