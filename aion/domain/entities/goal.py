"""Domain entity — a measurable target with optional deadline."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Goal:
    """A goal tracked as ``current`` out of ``target``.

    Progress is not clamped at storage time; a goal may overshoot its target.
    """

    user_id: int
    title: str
    target: float
    current: float
    category: str
    icon: str
    description: str | None = None
    deadline: datetime | None = None
    is_completed: bool = False
    id: int | None = None
