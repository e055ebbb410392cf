"""
Habitify import routes.
"""

import json

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
import structlog

from ..dependencies import get_import_service
from ..middleware.auth import get_current_user_id
from ..middleware.logging import audit_logger
from ..models.imports import (
    ImportHabitifyRequest,
    ImportHabitifyResponse,
    ImportStatusResponse,
)
from ..models.responses import ErrorResponse
from ..services import HabitifyImportService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/import", tags=["import"])


@router.post(
    "/habitify",
    response_model=ImportHabitifyResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
async def import_habitify(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    import_service: HabitifyImportService = Depends(get_import_service),
):
    """Queue an import of the caller's Habitify data."""

    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Identity is checked before the body is read.
    try:
        payload = await request.json()
        import_request = ImportHabitifyRequest.model_validate(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.info("Invalid import request body", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="invalid request body"
        )

    if not import_request.api_key:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="api_key is required"
        )

    response = import_service.queue_import(user_id, import_request)

    audit_logger.log_user_action(
        request=request,
        action="habitify_import_requested",
        user_id=user_id,
        details={
            "job_id": response.job_id,
            "import_habits": import_request.import_habits,
            "import_logs": import_request.import_logs,
            "import_areas": import_request.import_areas,
        },
    )

    return response


@router.get(
    "/habitify/jobs/{job_id:path}",
    response_model=ImportStatusResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def get_import_status(
    job_id: str,
    import_service: HabitifyImportService = Depends(get_import_service),
):
    """Get the status of a Habitify import job."""

    # The path converter lets an empty id reach this handler; ids are
    # still a single path segment.
    if "/" in job_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    if not job_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="job_id is required"
        )

    return import_service.get_import_status(job_id)
