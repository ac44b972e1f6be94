"""Pydantic DTOs for users and login."""

from pydantic import Field

from aion.application.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100, examples=["demo"])
    password: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1, examples=["demo@example.com"])
    full_name: str = Field(..., min_length=1, examples=["Alex Morgan"])
    avatar_url: str | None = None


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User as returned to the client; the password is never included."""

    id: int
    username: str
    email: str
    full_name: str
    avatar_url: str | None = None
