"""
Health check routes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..config import AppSettings
from ..dependencies import get_settings
from ..models.responses import HealthResponse

router = APIRouter(tags=["monitoring"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: AppSettings = Depends(get_settings)):
    """Liveness check used by containers and orchestrators."""
    return HealthResponse(
        status="ok",
        service="habity-api",
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
    )
