# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User request/row schemas
# - response.py: The {success, message, data, count, error} envelope
#
# These models define the "contract" between API and clients.
# =============================================================================

from .response import ApiResponse
from .user import CreatedUser, User, UserPayload

__all__ = [
    "ApiResponse",
    "CreatedUser",
    "User",
    "UserPayload",
]
