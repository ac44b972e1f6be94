"""Pydantic DTOs for mood entries."""

from aion.application.schemas.base import CamelModel, UtcDatetime
from aion.domain.entities import MoodType


class MoodCreate(CamelModel):
    user_id: int
    date: UtcDatetime
    mood_type: MoodType
    notes: str | None = None


class MoodResponse(CamelModel):
    id: int
    user_id: int
    date: UtcDatetime
    mood_type: MoodType
    notes: str | None = None
