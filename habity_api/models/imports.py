"""
Habitify import request and response models.
"""

from typing import Any, List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ImportJobStatus(str, Enum):
    """Lifecycle states of an import job."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ImportHabitifyRequest(BaseModel):
    """Request body for a Habitify import.

    Types are checked strictly; JSON ``null`` leaves a field at its
    zero value.
    """

    model_config = ConfigDict(strict=True)

    api_key: str = Field(default="", description="Habitify API key")
    import_habits: bool = Field(default=False, description="Import habits")
    import_logs: bool = Field(default=False, description="Import habit logs")
    import_areas: bool = Field(default=False, description="Import areas")
    log_date_from: Optional[str] = Field(
        None, description="Earliest log date to import"
    )
    log_date_to: Optional[str] = Field(None, description="Latest log date to import")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat null values as absent."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ImportHabitifyResponse(BaseModel):
    """Response returned when an import is accepted."""

    job_id: str = Field(..., description="Import job identifier")
    status: ImportJobStatus = Field(
        default=ImportJobStatus.PENDING, description="Job status"
    )
    message: str = Field(..., description="Human readable message")


class ImportStatusResponse(BaseModel):
    """Status and progress of an import job."""

    job_id: str = Field(..., description="Import job identifier")
    status: ImportJobStatus = Field(..., description="Job status")
    progress: int = Field(default=0, description="Overall progress percentage")
    total_habits: int = Field(default=0, description="Habits found in Habitify")
    imported_habits: int = Field(default=0, description="Habits imported so far")
    total_logs: int = Field(default=0, description="Logs found in Habitify")
    imported_logs: int = Field(default=0, description="Logs imported so far")
    errors: Optional[List[str]] = Field(None, description="Errors raised by the job")
    completed_at: Optional[str] = Field(None, description="Completion timestamp")
