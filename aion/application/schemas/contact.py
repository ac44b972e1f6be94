"""Pydantic DTOs for contacts."""

from pydantic import Field

from aion.application.schemas.base import CamelModel, PatchModel, UtcDatetime


class ContactCreate(CamelModel):
    user_id: int
    name: str = Field(..., min_length=1, examples=["Emma Wilson"])
    email: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    last_contact: UtcDatetime | None = None
    relationship: str | None = Field(None, examples=["friend"])
    notes: str | None = None


class ContactUpdate(PatchModel):
    non_nullable = ("user_id", "name")

    user_id: int | None = None
    name: str | None = Field(None, min_length=1)
    email: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    last_contact: UtcDatetime | None = None
    relationship: str | None = None
    notes: str | None = None


class ContactResponse(CamelModel):
    id: int
    user_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    last_contact: UtcDatetime | None = None
    relationship: str | None = None
    notes: str | None = None
