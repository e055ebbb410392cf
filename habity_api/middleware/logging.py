"""
Request logging middleware and audit logger.

Each request gets an id that is bound to structlog's context variables,
so every log line emitted while handling it carries ``request_id``.
"""

import time
import uuid
from typing import Dict, Any, Optional
from fastapi import Request
import structlog

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def logging_middleware(request: Request, call_next):
    """Log one line per request with its outcome and the caller's user id."""

    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            "Request failed",
            method=request.method,
            path=request.url.path,
            user_id=getattr(request.state, "user_id", None),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            error_type=type(e).__name__,
        )
        raise

    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    response.headers[REQUEST_ID_HEADER] = request_id

    # user_id is only set on routes that resolve the caller's identity
    log = logger.warning if response.status_code >= 400 else logger.info
    log(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        user_id=getattr(request.state, "user_id", None),
        client_ip=_client_ip(request),
        duration_ms=duration_ms,
    )

    return response


class AuditLogger:
    """Audit trail of actions users take on their data."""

    def __init__(self):
        self.audit_logger = structlog.get_logger("audit")

    def log_user_action(
        self,
        request: Request,
        action: str,
        user_id: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Record an action; ``request_id`` comes from the bound context."""
        self.audit_logger.info(
            "User action",
            action=action,
            user_id=user_id,
            endpoint=f"{request.method} {request.url.path}",
            client_ip=_client_ip(request),
            details=details or {},
        )


audit_logger = AuditLogger()
