"""
Shared API response models.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    environment: str = Field(..., description="Deployment environment")
    timestamp: datetime = Field(..., description="Check timestamp")
