# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserPayload: Input for create and update (name + email)
# - User: A stored row returned by the list endpoint
# - CreatedUser: Output of the create endpoint
#
# Storage assigns `id`, `created_at` and `updated_at`; clients only ever
# send `name` and `email`.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """
    Request body for creating or updating a user.

    Both fields are optional at the schema level on purpose: presence and
    email format are checked by core.validation so that missing fields get
    the service's 400 response instead of a framework 422.

    Example:
        {
            "name": "Ana",
            "email": "ana@example.com"
        }
    """

    name: str | None = Field(
        default=None,
        examples=["Ana"],
        description="Display name (required, non-empty)"
    )

    email: str | None = Field(
        default=None,
        examples=["ana@example.com"],
        description="Email address (required, unique, local@domain.tld)"
    )


class User(BaseModel):
    """
    Schema for a stored user row.

    Returned by:
    - GET /api/users (list, newest first)

    Example:
        {
            "id": 7,
            "name": "Ana",
            "email": "ana@example.com",
            "created_at": "2024-01-15T10:30:00",
            "updated_at": "2024-01-15T10:30:00"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    # Generated by storage, never reused
    id: int = Field(
        ...,
        description="Unique user identifier"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    email: str = Field(
        ...,
        description="Unique email address"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the user was created"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Timestamp of the last update"
    )


class CreatedUser(BaseModel):
    """Schema returned by POST /api/users: the new id plus the submitted fields."""

    id: int
    name: str
    email: str
