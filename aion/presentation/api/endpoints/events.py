"""Schedule event CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import EventCreate, EventResponse, EventUpdate
from aion.application.services import EventService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_event_service
from aion.presentation.api.params import (
    EndDateQuery,
    StartDateQuery,
    UserIdQuery,
    utc_or_none,
)

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def list_events(
    user_id: UserIdQuery,
    start_date: StartDateQuery = None,
    end_date: EndDateQuery = None,
    service: EventService = Depends(get_event_service),
) -> list[EventResponse]:
    """A user's events starting within the optional range, earliest first."""
    events = await service.list_for_user(
        user_id, start=utc_or_none(start_date), end=utc_or_none(end_date)
    )
    return [EventResponse.model_validate(e, from_attributes=True) for e in events]


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: int,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    try:
        event = await service.get(event_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EventResponse.model_validate(event, from_attributes=True)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    event = await service.create(data)
    return EventResponse.model_validate(event, from_attributes=True)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int,
    data: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> EventResponse:
    try:
        event = await service.update(event_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EventResponse.model_validate(event, from_attributes=True)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: int,
    service: EventService = Depends(get_event_service),
) -> None:
    try:
        await service.delete(event_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
