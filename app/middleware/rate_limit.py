"""
Freaky Fit API - Rate Limiting Middleware.

Per-route rate limits on the credential endpoints.
Uses SlowAPI with Redis backend for distributed rate limiting.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from settings import settings


logger = logging.getLogger(__name__)


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key identifier from request.

    Uses user ID from JWT if authenticated, otherwise IP address.
    """
    # Set by JWTBearer once the token is verified
    user_id = getattr(request.state, "user_id", None)
    if user_id:
        return f"user:{user_id}"

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_user_identifier,
    storage_uri=settings.REDIS_URL if settings.CACHE_ENABLED else "memory://",
    default_limits=["60/minute"],
    enabled=settings.ENV != "testing"  # Disable rate limiting in test environment
)


def auth_limit() -> str:
    """Rate limit for auth endpoints (login/register)."""
    return "5/minute"


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a 429 with a Retry-After hint."""
    retry_after = getattr(exc, "retry_after", 60)
    logger.warning(f"Rate limit exceeded for {get_user_identifier(request)}")

    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "Rate limit exceeded",
            "message": "Please slow down your requests",
            "retry_after_seconds": retry_after,
        },
        headers={"Retry-After": str(retry_after)}
    )
