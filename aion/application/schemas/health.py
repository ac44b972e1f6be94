"""Pydantic DTO for the health check."""

from aion.application.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: str
    version: str
    environment: str
