"""Pydantic DTOs for financial transactions."""

from pydantic import Field

from aion.application.schemas.base import CamelModel, UtcDatetime
from aion.domain.entities import TransactionType


class TransactionCreate(CamelModel):
    user_id: int
    amount: float = Field(..., examples=[42.5])
    category: str = Field(..., min_length=1, examples=["food"])
    date: UtcDatetime
    description: str | None = None
    type: TransactionType


class TransactionResponse(CamelModel):
    id: int
    user_id: int
    amount: float
    category: str
    date: UtcDatetime
    description: str | None = None
    type: TransactionType
