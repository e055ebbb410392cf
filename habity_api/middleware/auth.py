"""
Authentication dependency for bearer access tokens.

Resolves the user identifier of the caller. Handlers decide what an
anonymous caller is allowed to do, so failures here never raise.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import structlog

from ..config import AppSettings
from ..dependencies import get_settings
from ..services import JWTService, TokenValidationError

logger = structlog.get_logger(__name__)

# auto_error=False so a missing header resolves to an anonymous caller
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: AppSettings = Depends(get_settings),
) -> str:
    """
    Extract the authenticated user's identifier from the bearer token.

    The resolved identifier is also stored on ``request.state.user_id``
    for the request logging middleware.

    Args:
        request: Incoming request
        credentials: Optional HTTP Bearer token credentials
        settings: Application settings holding the JWT secret

    Returns:
        str: The user identifier, or an empty string when the request
        carries no valid token
    """
    user_id = ""

    if credentials:
        jwt_service = JWTService(settings.jwt_secret, audience=settings.jwt_audience)
        try:
            user_id = jwt_service.get_user_id(credentials.credentials)
        except TokenValidationError as e:
            logger.warning("Token validation failed", error=str(e))

    request.state.user_id = user_id
    return user_id
