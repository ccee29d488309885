"""JWT authentication backend for Django REST Framework.

Access tokens are validated locally against the shared ``JWT_SECRET``; the
``sub`` claim carries the numeric user ID.
"""

from typing import Any

from django.conf import settings

import jwt
import structlog
from rest_framework import authentication, exceptions

logger = structlog.get_logger(__name__)


class LoginUser:
    """Authenticated user built from token claims.

    This is not a Django model, just a container for the claims the
    services need.
    """

    def __init__(self, user_id: int, username: str | None = None):
        """Initialize login user.

        Args:
            user_id: User ID from the token's ``sub`` claim
            username: Username claim, if present
        """
        self.id = user_id
        self.user_id = user_id
        self.username = username
        self.is_authenticated = True

    def __str__(self):
        """String representation."""
        return f"LoginUser(user_id={self.user_id}, username={self.username})"


class JWTAuthentication(authentication.BaseAuthentication):
    """Bearer token authentication with local JWT validation."""

    def authenticate(self, request):
        """Authenticate the request using a Bearer token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token) or None if authentication not attempted

        Raises:
            AuthenticationFailed: If authentication fails
        """
        if not settings.AUTH_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None  # No authentication attempted

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        payload = self._decode(token)

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Token has no valid subject", sub=payload.get("sub"))
            raise exceptions.AuthenticationFailed("Invalid token subject") from e

        return (LoginUser(user_id=user_id, username=payload.get("username")), token)

    def _decode(self, token: str) -> dict[str, Any]:
        """Validate a token by verifying its JWT signature.

        Args:
            token: JWT access token to validate

        Returns:
            Token claims

        Raises:
            AuthenticationFailed: If token is invalid
        """
        if not settings.JWT_SECRET:
            logger.error("JWT_SECRET not configured but authentication is enabled")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_iat": True,
                    "verify_nbf": True,
                },
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
