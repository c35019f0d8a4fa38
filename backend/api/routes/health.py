"""
Health check endpoint.

Lets load balancers and uptime checks confirm the API process is serving.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running. Does not touch the store.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)
