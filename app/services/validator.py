"""Email syntax check run before any submission"""
import re

# something@something.something, no whitespace, a single @
# \ufeff is whitespace for browsers but not for Python's \s
EMAIL_PATTERN = re.compile(r"[^\s\ufeff@]+@[^\s\ufeff@]+\.[^\s\ufeff@]+")


class InvalidEmailError(ValueError):
    """Raised when a form's email field is not an email address"""


def is_valid_email(value: str) -> bool:
    """Return True if value looks like an email address (syntax only, not deliverability)"""
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def ensure_valid_email(value: str) -> str:
    """
    Validate an email field

    Args:
        value: Raw field value

    Returns:
        The value, unchanged

    Raises:
        InvalidEmailError: If the value fails is_valid_email
    """
    if not is_valid_email(value):
        raise InvalidEmailError(f"Invalid email address: {value!r}")
    return value
