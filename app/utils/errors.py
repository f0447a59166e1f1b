"""
Freaky Fit API - Custom Exception Classes.

Exception hierarchy for application error handling. Each exception knows
the JSON body it is rendered as by the handler registered in ``main.py``.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class FreakyFitException(Exception):
    """
    Base exception class for Freaky Fit application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details (logged, never sent to the client).
    """

    def __init__(
        self,
        message: str = "Server error",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)

    def to_response(self) -> Dict[str, Any]:
        """JSON body sent to the client."""
        return {"error": self.message}


class AuthenticationError(FreakyFitException):
    """
    Exception raised for authentication failures.

    Used when:
    - Missing or malformed bearer token
    - Invalid, expired or revoked token
    - Token subject no longer exists
    """

    def __init__(
        self,
        message: str = "Not authorized",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=401, detail=detail)

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message}


class ForbiddenError(FreakyFitException):
    """
    Exception raised for authorization failures.

    Used when:
    - User role is not permitted on the route
    - Access denied to another user's resource
    """

    def __init__(
        self,
        message: str = "Access denied",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=403, detail=detail)

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message}


class NotFoundError(FreakyFitException):
    """Exception raised when a resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=404, detail=detail)


class ValidationError(FreakyFitException):
    """
    Exception raised for input validation failures.

    Used when:
    - Invalid input format
    - Duplicate email on registration or trainer creation
    - Illegal session status transition
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=400, detail=detail)


class SubscriptionLimitError(FreakyFitException):
    """Raised when a free subscription has used up its generation quota."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=403)

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": False,
            "message": self.message,
            "subscriptionRequired": True,
        }


class SubscriptionCheckError(FreakyFitException):
    """Raised when the subscription gate cannot decide (no identity, store down)."""

    def __init__(
        self,
        message: str = "Server error checking subscription",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        super().__init__(message=message, status_code=status_code, detail=detail)

    def to_response(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


@contextmanager
def server_error_guard(action: str) -> Iterator[None]:
    """
    Turn unexpected exceptions inside the block into a generic 500.

    Application exceptions pass through untouched; anything else is logged
    with its cause and re-raised as ``FreakyFitException``.

    Example:
        with server_error_guard("listing trainers"):
            trainers = await users.list_by_role(Role.TRAINER)
    """
    try:
        yield
    except FreakyFitException:
        raise
    except Exception as e:
        logger.exception(f"Error {action}: {e}")
        raise FreakyFitException(detail=str(e)) from e
