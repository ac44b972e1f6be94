"""Insight endpoints, including the read / actioned flags."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from aion.application.schemas import InsightCreate, InsightResponse
from aion.application.services import InsightService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_insight_service
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.get("", response_model=list[InsightResponse])
async def list_insights(
    user_id: UserIdQuery,
    limit: int | None = Query(None, ge=0, description="Return at most this many"),
    service: InsightService = Depends(get_insight_service),
) -> list[InsightResponse]:
    """A user's insights, newest first."""
    insights = await service.list_for_user(user_id, limit=limit)
    return [InsightResponse.model_validate(i, from_attributes=True) for i in insights]


@router.get("/{insight_id}", response_model=InsightResponse)
async def get_insight(
    insight_id: int,
    service: InsightService = Depends(get_insight_service),
) -> InsightResponse:
    try:
        insight = await service.get(insight_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return InsightResponse.model_validate(insight, from_attributes=True)


@router.post("", response_model=InsightResponse, status_code=status.HTTP_201_CREATED)
async def create_insight(
    data: InsightCreate,
    service: InsightService = Depends(get_insight_service),
) -> InsightResponse:
    """Store an insight; its creation time is assigned by the server."""
    insight = await service.create(data)
    return InsightResponse.model_validate(insight, from_attributes=True)


@router.patch("/{insight_id}/read", response_model=InsightResponse)
async def mark_insight_read(
    insight_id: int,
    service: InsightService = Depends(get_insight_service),
) -> InsightResponse:
    try:
        insight = await service.mark_as_read(insight_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return InsightResponse.model_validate(insight, from_attributes=True)


@router.patch("/{insight_id}/action", response_model=InsightResponse)
async def mark_insight_actioned(
    insight_id: int,
    service: InsightService = Depends(get_insight_service),
) -> InsightResponse:
    try:
        insight = await service.mark_as_actioned(insight_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return InsightResponse.model_validate(insight, from_attributes=True)
