"""
Services package initialization.
"""

from .jwt_service import JWTService, TokenValidationError
from .import_service import HabitifyImportService, generate_job_id

__all__ = [
    "JWTService",
    "TokenValidationError",
    "HabitifyImportService",
    "generate_job_id",
]
