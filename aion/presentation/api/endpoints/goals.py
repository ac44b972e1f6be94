"""Goal CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import GoalCreate, GoalResponse, GoalUpdate
from aion.application.services import GoalService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_goal_service
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/goals", tags=["Goals"])


@router.get("", response_model=list[GoalResponse])
async def list_goals(
    user_id: UserIdQuery,
    service: GoalService = Depends(get_goal_service),
) -> list[GoalResponse]:
    """A user's goals in creation order."""
    goals = await service.list_for_user(user_id)
    return [GoalResponse.model_validate(g, from_attributes=True) for g in goals]


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(
    goal_id: int,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    try:
        goal = await service.get(goal_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return GoalResponse.model_validate(goal, from_attributes=True)


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    data: GoalCreate,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    goal = await service.create(data)
    return GoalResponse.model_validate(goal, from_attributes=True)


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: int,
    data: GoalUpdate,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    try:
        goal = await service.update(goal_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return GoalResponse.model_validate(goal, from_attributes=True)


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: int,
    service: GoalService = Depends(get_goal_service),
) -> None:
    try:
        await service.delete(goal_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
