"""Health check endpoint — no store access, always available."""

from fastapi import APIRouter, Depends

from aion.application.schemas import HealthResponse
from aion.config import Settings
from aion.infrastructure.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Returns the current application health status."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.app_env,
    )
