"""Pydantic DTOs for insights.

Any ``createdAt`` sent by a client is ignored; the store stamps it.
"""

from pydantic import Field

from aion.application.schemas.base import CamelModel, UtcDatetime
from aion.domain.entities import InsightType


class InsightCreate(CamelModel):
    user_id: int
    content: str = Field(..., min_length=1)
    type: InsightType
    category: str = Field(..., min_length=1, examples=["health"])
    is_read: bool = False
    is_actioned: bool = False


class InsightResponse(CamelModel):
    id: int
    user_id: int
    content: str
    type: InsightType
    category: str
    created_at: UtcDatetime
    is_read: bool
    is_actioned: bool
