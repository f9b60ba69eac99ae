# =============================================================================
# core/validation.py - User Input Validation
# =============================================================================
# Pure checks run before any storage access. Each raises InvalidInputError
# with a distinct message so clients can tell the failures apart:
# - parse_user_id: "Invalid user ID"
# - require_user_fields: "Name and email are required"
# - validate_email: "Invalid email format"
# =============================================================================

import re

from app.exceptions import InvalidInputError

# local@domain.tld, no whitespace and exactly one "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_USER_ID_PATTERN = re.compile(r"^[+-]?\d+$")

# Largest value a SERIAL / 32-bit id column can hold
MAX_USER_ID = 2**31 - 1


def parse_user_id(raw: str | int | None) -> int:
    """
    Parse a user id taken from the URL path.

    Args:
        raw: Path parameter value

    Returns:
        The id as an int

    Raises:
        InvalidInputError: If the value is not a decimal integer
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw

    text = raw.strip() if isinstance(raw, str) else ""
    if not _USER_ID_PATTERN.match(text):
        raise InvalidInputError("Invalid user ID", details={"id": raw})
    return int(text)


def is_storable_user_id(user_id: int) -> bool:
    """Whether the id fits the id column; larger ids cannot exist in storage."""
    return abs(user_id) <= MAX_USER_ID


def require_user_fields(name: str | None, email: str | None) -> tuple[str, str]:
    """
    Check that both name and email were provided.

    Whitespace-only values count as missing.

    Returns:
        (name, email): name with surrounding whitespace removed, email as
        submitted so validate_email sees the raw value

    Raises:
        InvalidInputError: If either field is missing or blank
    """
    name = name.strip() if isinstance(name, str) else ""
    if not name or not isinstance(email, str) or not email.strip():
        raise InvalidInputError("Name and email are required")
    return name, email


def validate_email(email: str) -> str:
    """Raise InvalidInputError unless email matches EMAIL_PATTERN."""
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidInputError("Invalid email format", details={"email": email})
    return email
