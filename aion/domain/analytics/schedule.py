"""Schedule views built from events."""

from dataclasses import dataclass
from datetime import date, datetime

from aion.domain.analytics.time_format import format_event_duration
from aion.domain.clock import as_utc
from aion.domain.entities import Event, EventType


@dataclass
class ScheduleItem:
    id: int | None
    title: str
    start_time: datetime
    duration: str
    description: str
    type: EventType | str


def schedule_items(events: list[Event]) -> list[ScheduleItem]:
    return [
        ScheduleItem(
            id=event.id,
            title=event.title,
            start_time=as_utc(event.start_time),
            duration=format_event_duration(event.start_time, event.end_time),
            description=event.description or "",
            type=event.type,
        )
        for event in events
    ]


def events_on_day(events: list[Event], day: date | datetime) -> list[Event]:
    """Events starting on the given UTC calendar day, earliest first."""
    if isinstance(day, datetime):
        day = as_utc(day).date()
    selected = [e for e in events if as_utc(e.start_time).date() == day]
    return sorted(selected, key=lambda e: as_utc(e.start_time))
