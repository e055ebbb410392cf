"""
Middleware package initialization.
"""

from .auth import get_current_user_id, security

from .logging import (
    logging_middleware,
    AuditLogger,
    audit_logger,
)

__all__ = [
    # Authentication
    "get_current_user_id",
    "security",
    # Logging
    "logging_middleware",
    "AuditLogger",
    "audit_logger",
]
