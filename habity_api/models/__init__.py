"""
API models package initialization.
"""

from .imports import (
    ImportJobStatus,
    ImportHabitifyRequest,
    ImportHabitifyResponse,
    ImportStatusResponse,
)

from .responses import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Import models
    "ImportJobStatus",
    "ImportHabitifyRequest",
    "ImportHabitifyResponse",
    "ImportStatusResponse",
    # Shared responses
    "ErrorResponse",
    "HealthResponse",
]
