"""Domain entity — a scheduled block of time."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EventType(str, Enum):
    """Kinds of schedule entries, used for colour-coding."""

    WORK = "work"
    HEALTH = "health"
    PERSONAL = "personal"
    OTHER = "other"


@dataclass
class Event:
    user_id: int
    title: str
    start_time: datetime
    end_time: datetime
    type: EventType | str
    description: str | None = None
    location: str | None = None
    id: int | None = None
