"""Mood scoring and the series built from it."""

from dataclasses import dataclass
from datetime import datetime

from aion.domain.analytics.common import round_half_up
from aion.domain.clock import as_utc
from aion.domain.entities import Mood, MoodType

MOOD_SCORES: dict[str, int] = {
    MoodType.HAPPY.value: 90,
    MoodType.ENERGETIC.value: 85,
    MoodType.CALM.value: 75,
    MoodType.NEUTRAL.value: 60,
    MoodType.TIRED.value: 40,
    MoodType.ANXIOUS.value: 30,
    MoodType.SAD.value: 20,
    MoodType.ANGRY.value: 10,
}
UNKNOWN_MOOD_SCORE = 50

# Chart label and colour per mood, in display order.
MOOD_OPTIONS: dict[str, tuple[str, str]] = {
    MoodType.HAPPY.value: ("Happy", "#4F46E5"),
    MoodType.ENERGETIC.value: ("Energetic", "#10B981"),
    MoodType.CALM.value: ("Calm", "#06B6D4"),
    MoodType.NEUTRAL.value: ("Neutral", "#9CA3AF"),
    MoodType.TIRED.value: ("Tired", "#6B7280"),
    MoodType.ANXIOUS.value: ("Anxious", "#F59E0B"),
    MoodType.SAD.value: ("Sad", "#7C3AED"),
    MoodType.ANGRY.value: ("Angry", "#EF4444"),
}

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass
class MoodTrendPoint:
    day: str
    score: int
    is_today: bool = False


@dataclass
class MoodShare:
    name: str
    value: int
    color: str


@dataclass
class MoodHistoryPoint:
    date: datetime
    label: str
    mood: str
    notes: str | None
    score: int


def _label(mood_type: MoodType | str) -> str:
    return mood_type.value if isinstance(mood_type, MoodType) else str(mood_type)


def mood_score(mood_type: MoodType | str) -> int:
    """Intensity 0–100 for a mood label; unknown labels score 50."""
    return MOOD_SCORES.get(_label(mood_type), UNKNOWN_MOOD_SCORE)


def weekly_mood_trend(moods: list[Mood], now: datetime) -> list[MoodTrendPoint]:
    """One point per weekday, Monday first.

    Each weekday takes the score of the first mood in ``moods`` that falls on
    it (0 when none). Callers pass moods already restricted to the window of
    interest, newest first.
    """
    today = as_utc(now).weekday()
    points = []
    for index, day in enumerate(WEEKDAY_LABELS):
        match = next(
            (m for m in moods if as_utc(m.date).weekday() == index), None
        )
        points.append(
            MoodTrendPoint(
                day=day,
                score=mood_score(match.mood_type) if match else 0,
                is_today=index == today,
            )
        )
    return points


def weekday_mood_averages(moods: list[Mood]) -> list[MoodTrendPoint]:
    """Average score per weekday, Monday first; 0 for days without moods."""
    points = []
    for index, day in enumerate(WEEKDAY_LABELS):
        scores = [mood_score(m.mood_type) for m in moods if as_utc(m.date).weekday() == index]
        average = round_half_up(sum(scores) / len(scores)) if scores else 0
        points.append(MoodTrendPoint(day=day, score=average))
    return points


def mood_distribution(moods: list[Mood]) -> list[MoodShare]:
    counts: dict[str, int] = {}
    for mood in moods:
        label = _label(mood.mood_type)
        counts[label] = counts.get(label, 0) + 1

    return [
        MoodShare(name=name, value=counts[key], color=color)
        for key, (name, color) in MOOD_OPTIONS.items()
        if counts.get(key)
    ]


def mood_history(moods: list[Mood], limit: int = 14) -> list[MoodHistoryPoint]:
    """The newest ``limit`` moods in chronological order."""
    history = []
    for mood in moods[:limit]:
        date = as_utc(mood.date)
        history.append(
            MoodHistoryPoint(
                date=date,
                label=f"{date:%b} {date.day}",
                mood=_label(mood.mood_type),
                notes=mood.notes,
                score=mood_score(mood.mood_type),
            )
        )
    history.reverse()
    return history


def todays_mood(moods: list[Mood], now: datetime) -> str | None:
    today = as_utc(now).date()
    for mood in moods:
        if as_utc(mood.date).date() == today:
            return _label(mood.mood_type)
    return None


def most_common_mood(moods: list[Mood]) -> str:
    """Most frequent label; on a tie the label seen first wins."""
    counts: dict[str, int] = {}
    for mood in moods:
        label = _label(mood.mood_type)
        counts[label] = counts.get(label, 0) + 1

    best, best_count = "", 0
    for label, count in counts.items():
        if count > best_count:
            best, best_count = label, count
    return best
