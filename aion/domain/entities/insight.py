"""Domain entity — a piece of AI- or rule-generated advice shown to the user."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class InsightType(str, Enum):
    SUGGESTION = "suggestion"
    REMINDER = "reminder"
    ANALYSIS = "analysis"


@dataclass
class Insight:
    """Persisted insight.

    ``created_at`` is always assigned by the store at insert time.
    """

    user_id: int
    content: str
    type: InsightType | str
    category: str
    is_read: bool = False
    is_actioned: bool = False
    created_at: datetime | None = None
    id: int | None = None
