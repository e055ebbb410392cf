"""
JWT token service for request authentication.

Access tokens are issued by Supabase Auth and signed with the project's
JWT secret (HS256). This module verifies them and extracts the user
identifier from the ``sub`` claim. Token creation is provided for local
development and tests, producing tokens with the same claims.

Dependencies:
- python-jose[cryptography]: JWT token operations
- structlog: Structured logging
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from jose import JWTError, jwt
import structlog

logger = structlog.get_logger(__name__)


class TokenValidationError(Exception):
    """Raised when token validation fails."""

    pass


class JWTService:
    """
    Service class for verifying and issuing access tokens.

    Args:
        secret_key: Shared HMAC secret
        audience: Expected ``aud`` claim
    """

    ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = 60

    def __init__(self, secret_key: str, audience: str = "authenticated"):
        self.secret_key = secret_key
        self.audience = audience

    def create_access_token(
        self,
        user_id: str,
        expires_delta: Optional[timedelta] = None,
        extra_claims: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: Subject of the token
            expires_delta: Custom lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES
            extra_claims: Additional claims merged into the payload

        Returns:
            str: Encoded JWT access token
        """
        now = datetime.now(timezone.utc)
        expire = now + (
            expires_delta or timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)
        )

        claims = {
            "sub": user_id,
            "aud": self.audience,
            "role": "authenticated",
            "iat": now,
            "exp": expire,
        }
        if extra_claims:
            claims.update(extra_claims)

        return jwt.encode(claims, self.secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify token signature, expiry and audience.

        Returns:
            Dict[str, Any]: Decoded token payload

        Raises:
            TokenValidationError: If the token is invalid
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                audience=self.audience,
            )
        except JWTError as e:
            raise TokenValidationError(f"Invalid token: {e}") from e

    def get_user_id(self, token: str) -> str:
        """
        Extract the user identifier from a verified token.

        Raises:
            TokenValidationError: If the token is invalid or has no subject
        """
        payload = self.verify_token(token)
        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise TokenValidationError("Token has no subject")
        return user_id
