"""Authentication for the admin service API."""

from core.auth.jwt_authentication import JWTAuthentication, LoginUser

__all__ = ["JWTAuthentication", "LoginUser"]
