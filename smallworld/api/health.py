"""Liveness endpoint for the bridge service."""

from fastapi import APIRouter
from pydantic import BaseModel

from smallworld.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    service: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the service is up. The card catalog is not contacted."""
    return HealthResponse(status="healthy", service=settings.app_name)
