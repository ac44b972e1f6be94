"""Pydantic DTOs for the AI endpoints."""

from typing import Any

from pydantic import Field

from aion.application.schemas.base import CamelModel


class SuggestionRequest(CamelModel):
    """Snapshot of the user's data to base one suggestion on."""

    user_id: int = Field(..., gt=0)
    data: dict[str, Any] = Field(
        ..., examples=[{"lifeDomains": [{"name": "Health", "score": 72}]}],
    )


class RecommendationsRequest(CamelModel):
    user_id: int = Field(..., gt=0)
    context: str = Field(..., min_length=1, examples=["health"])
    user_data: dict[str, Any] = Field(default_factory=dict)


class LifeBalanceInsightResponse(CamelModel):
    overall_score: int
    insights: str


class TextInsightResponse(CamelModel):
    content: str


class RecommendationsResponse(CamelModel):
    recommendations: list[str]
