"""
Freaky Fit API - Security Utilities.

Password validation and input sanitizing helpers.
"""

import re
from typing import Tuple


def validate_password_strength(password: str) -> Tuple[bool, str]:
    """
    Validate password strength requirements.

    Requirements:
    - Minimum 8 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit

    Args:
        password: Password string to validate.

    Returns:
        Tuple[bool, str]: (is_valid, error_message)

    Example:
        >>> validate_password_strength("Short1")
        (False, 'Password must be at least 8 characters')
        >>> validate_password_strength("ValidPass1")
        (True, '')
    """
    if len(password) < 8:
        return False, "Password must be at least 8 characters"

    if not re.search(r"[A-Z]", password):
        return False, "Password must contain at least one uppercase letter"

    if not re.search(r"[a-z]", password):
        return False, "Password must contain at least one lowercase letter"

    if not re.search(r"\d", password):
        return False, "Password must contain at least one digit"

    return True, ""


def sanitize_string(value: str, max_length: int = 255) -> str:
    """
    Strip whitespace and limit length.

    Example:
        >>> sanitize_string("  Jane Doe  ")
        'Jane Doe'
    """
    return value.strip()[:max_length]
