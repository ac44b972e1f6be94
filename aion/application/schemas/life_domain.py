"""Pydantic DTOs for life domains."""

from pydantic import Field

from aion.application.schemas.base import CamelModel, PatchModel


class LifeDomainCreate(CamelModel):
    user_id: int
    name: str = Field(..., min_length=1, examples=["Health"])
    score: int = Field(..., examples=[72])
    icon: str
    color: str = Field(..., examples=["#10B981"])


class LifeDomainUpdate(PatchModel):
    non_nullable = ("user_id", "name", "score", "icon", "color")

    user_id: int | None = None
    name: str | None = Field(None, min_length=1)
    score: int | None = None
    icon: str | None = None
    color: str | None = None


class LifeDomainResponse(CamelModel):
    id: int
    user_id: int
    name: str
    score: int
    icon: str
    color: str
