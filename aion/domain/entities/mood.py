"""Domain entity — a single mood check-in."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MoodType(str, Enum):
    """The eight mood labels a user can record."""

    HAPPY = "happy"
    ENERGETIC = "energetic"
    CALM = "calm"
    NEUTRAL = "neutral"
    TIRED = "tired"
    ANXIOUS = "anxious"
    SAD = "sad"
    ANGRY = "angry"


@dataclass
class Mood:
    """One recorded mood. Several moods may share the same day."""

    user_id: int
    date: datetime
    mood_type: MoodType | str
    notes: str | None = None
    id: int | None = None
