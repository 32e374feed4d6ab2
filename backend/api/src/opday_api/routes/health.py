"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from opday_api import __version__
from opday_api.models.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(timestamp=datetime.now(UTC), version=__version__)
