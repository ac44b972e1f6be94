"""Login endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import LoginRequest, UserResponse
from aion.application.services import UserService
from aion.domain.exceptions import InvalidCredentialsError
from aion.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Check a username/password pair and return the user without the password."""
    try:
        user = await service.authenticate(credentials.username, credentials.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)
