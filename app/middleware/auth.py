"""
Freaky Fit API - Authentication Middleware.

JWT verification for protected routes.
"""

from typing import Optional

from fastapi import Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.services.auth import verify_token, is_token_blacklisted
from app.utils.errors import AuthenticationError


class JWTBearer(HTTPBearer):
    """
    JWT Bearer token authentication.

    Custom HTTPBearer that validates JWT tokens on protected routes and
    resolves them to the user id carried in the ``sub`` claim. Every
    failure is a 401.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        """
        Verify JWT token from Authorization header.

        Returns:
            str: User ID from token.

        Raises:
            AuthenticationError: token missing, invalid, expired or revoked.
        """
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)

        if not credentials or not credentials.credentials:
            raise AuthenticationError("Not authorized, no token provided")

        token = credentials.credentials

        # Check if token is blacklisted (logout)
        if await is_token_blacklisted(token):
            raise AuthenticationError("Not authorized, invalid token", detail="Token has been revoked")

        payload = verify_token(token)
        if not payload or not payload.get("sub"):
            raise AuthenticationError("Not authorized, invalid token")

        request.state.token = token
        request.state.token_payload = payload
        request.state.user_id = payload["sub"]
        return payload["sub"]


# Global JWT bearer instance for dependency injection
jwt_bearer = JWTBearer()
