"""Freaky Fit API - Utilities Package."""

from app.utils.security import validate_password_strength
from app.utils.errors import (
    FreakyFitException,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
    SubscriptionLimitError,
    SubscriptionCheckError,
    server_error_guard,
)

__all__ = [
    "validate_password_strength",
    "FreakyFitException",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "SubscriptionLimitError",
    "SubscriptionCheckError",
    "server_error_guard",
]
