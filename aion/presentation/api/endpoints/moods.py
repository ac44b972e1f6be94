"""Mood endpoints. Moods are append-only."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import MoodCreate, MoodResponse
from aion.application.services import MoodService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_mood_service
from aion.presentation.api.params import (
    EndDateQuery,
    StartDateQuery,
    UserIdQuery,
    utc_or_none,
)

router = APIRouter(prefix="/moods", tags=["Moods"])


@router.get("", response_model=list[MoodResponse])
async def list_moods(
    user_id: UserIdQuery,
    start_date: StartDateQuery = None,
    end_date: EndDateQuery = None,
    service: MoodService = Depends(get_mood_service),
) -> list[MoodResponse]:
    """A user's moods within the optional range, newest first."""
    moods = await service.list_for_user(
        user_id, start=utc_or_none(start_date), end=utc_or_none(end_date)
    )
    return [MoodResponse.model_validate(m, from_attributes=True) for m in moods]


@router.get("/{mood_id}", response_model=MoodResponse)
async def get_mood(
    mood_id: int,
    service: MoodService = Depends(get_mood_service),
) -> MoodResponse:
    try:
        mood = await service.get(mood_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MoodResponse.model_validate(mood, from_attributes=True)


@router.post("", response_model=MoodResponse, status_code=status.HTTP_201_CREATED)
async def create_mood(
    data: MoodCreate,
    service: MoodService = Depends(get_mood_service),
) -> MoodResponse:
    mood = await service.create(data)
    return MoodResponse.model_validate(mood, from_attributes=True)
