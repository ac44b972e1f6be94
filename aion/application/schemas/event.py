"""Pydantic DTOs for schedule events."""

from pydantic import Field

from aion.application.schemas.base import CamelModel, PatchModel, UtcDatetime
from aion.domain.entities import EventType


class EventCreate(CamelModel):
    user_id: int
    title: str = Field(..., min_length=1, examples=["Team standup"])
    description: str | None = None
    start_time: UtcDatetime
    end_time: UtcDatetime
    type: EventType
    location: str | None = None


class EventUpdate(PatchModel):
    non_nullable = ("user_id", "title", "start_time", "end_time", "type")

    user_id: int | None = None
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    start_time: UtcDatetime | None = None
    end_time: UtcDatetime | None = None
    type: EventType | None = None
    location: str | None = None


class EventResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: str | None = None
    start_time: UtcDatetime
    end_time: UtcDatetime
    type: EventType
    location: str | None = None
