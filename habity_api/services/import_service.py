"""
Habitify import service.

Accepts import requests and reports job status. The import pipeline
itself (fetching from the Habitify API, transforming and storing habits,
logs and areas, tracking progress) is not implemented yet, so every job
is reported as pending.
"""

import uuid

import structlog

from ..config import AppSettings
from ..models.imports import (
    ImportHabitifyRequest,
    ImportHabitifyResponse,
    ImportJobStatus,
    ImportStatusResponse,
)

logger = structlog.get_logger(__name__)

QUEUED_MESSAGE = "Import job has been queued"


def generate_job_id() -> str:
    """Generate an opaque import job identifier."""
    return f"job_{uuid.uuid4().hex}"


class HabitifyImportService:
    """Entry point for Habitify import jobs."""

    def __init__(self, settings: AppSettings):
        self.settings = settings

    def queue_import(
        self, user_id: str, import_request: ImportHabitifyRequest
    ) -> ImportHabitifyResponse:
        """Accept an import request for a user and return its job."""
        # TODO: hand the job to a worker once the Habitify client and
        # habit/log persistence exist.
        job_id = generate_job_id()

        logger.info(
            "Habitify import queued",
            job_id=job_id,
            user_id=user_id,
            import_habits=import_request.import_habits,
            import_logs=import_request.import_logs,
            import_areas=import_request.import_areas,
            log_date_from=import_request.log_date_from,
            log_date_to=import_request.log_date_to,
        )

        return ImportHabitifyResponse(
            job_id=job_id,
            status=ImportJobStatus.PENDING,
            message=QUEUED_MESSAGE,
        )

    def get_import_status(self, job_id: str) -> ImportStatusResponse:
        """Report the status of an import job."""
        return ImportStatusResponse(
            job_id=job_id,
            status=ImportJobStatus.PENDING,
            progress=0,
            total_habits=0,
            imported_habits=0,
            total_logs=0,
            imported_logs=0,
        )
