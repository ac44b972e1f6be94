"""Pydantic DTOs for goals."""

from pydantic import Field

from aion.application.schemas.base import CamelModel, PatchModel, UtcDatetime


class GoalCreate(CamelModel):
    user_id: int
    title: str = Field(..., min_length=1, examples=["Run a half marathon"])
    description: str | None = None
    target: float = Field(..., examples=[21.1])
    current: float = Field(..., examples=[8.0])
    deadline: UtcDatetime | None = None
    category: str = Field(..., min_length=1)
    icon: str
    is_completed: bool = False


class GoalUpdate(PatchModel):
    non_nullable = (
        "user_id", "title", "target", "current", "category", "icon", "is_completed",
    )

    user_id: int | None = None
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    target: float | None = None
    current: float | None = None
    deadline: UtcDatetime | None = None
    category: str | None = Field(None, min_length=1)
    icon: str | None = None
    is_completed: bool | None = None


class GoalResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: str | None = None
    target: float
    current: float
    deadline: UtcDatetime | None = None
    category: str
    icon: str
    is_completed: bool
