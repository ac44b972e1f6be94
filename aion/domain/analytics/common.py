"""Arithmetic shared by the derived-state functions."""

import math
from datetime import datetime, timedelta

from aion.domain.clock import as_utc

DAY = timedelta(days=1)


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, floored (negative when reversed)."""
    return (as_utc(later) - as_utc(earlier)) // DAY


def round_half_up(value: float) -> int:
    """Round .5 upwards, the way dashboard percentages have always been shown."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))
