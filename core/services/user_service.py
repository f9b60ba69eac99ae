# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations: validation first, then a single statement
# against storage (create issues two: the duplicate check and the insert).
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging

from app.exceptions import (
    EmailConflictError,
    UserNotFoundError,
    UserStorageError,
)
from core.models.user import CreatedUser, User
from core.validation import (
    is_storable_user_id,
    parse_user_id,
    require_user_fields,
    validate_email,
)
from lib.database import DuplicateKeyError, StorageClient, StorageError

logger = logging.getLogger(__name__)


LIST_USERS_SQL = """
    SELECT id, name, email, created_at
    FROM users
    ORDER BY created_at DESC, id DESC
"""

FIND_BY_EMAIL_SQL = "SELECT id FROM users WHERE email = :email"

INSERT_USER_SQL = """
    INSERT INTO users (name, email, created_at, updated_at)
    VALUES (:name, :email, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
    RETURNING id
"""

UPDATE_USER_SQL = """
    UPDATE users
    SET name = :name, email = :email, updated_at = CURRENT_TIMESTAMP
    WHERE id = :id
    RETURNING id
"""

DELETE_USER_SQL = "DELETE FROM users WHERE id = :id RETURNING id"


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the database. Holds
    no state besides the injected storage client.
    """

    def __init__(self, storage: StorageClient):
        self.storage = storage

    async def list_users(self) -> list[User]:
        """
        List every user, newest first.

        Returns:
            All users ordered by created_at descending

        Raises:
            UserStorageError: If the query fails
        """
        try:
            rows = await self.storage.select(LIST_USERS_SQL)
        except StorageError as e:
            logger.error(f"Failed to list users: {e}")
            raise UserStorageError("Internal server error while retrieving users", e) from e

        return [User.model_validate(row) for row in rows]

    async def create_user(self, name: str | None, email: str | None) -> CreatedUser:
        """
        Create a new user.

        Args:
            name: Display name (required)
            email: Email address (required, must be unused)

        Returns:
            The new id with the submitted name and email

        Raises:
            InvalidInputError: If a field is missing or the email is malformed
            EmailConflictError: If the email is already registered
            UserStorageError: If a query fails
        """
        name, email = require_user_fields(name, email)
        validate_email(email)

        try:
            existing = await self.storage.select_one(FIND_BY_EMAIL_SQL, {"email": email})
            if existing:
                raise EmailConflictError(email)

            # A concurrent create can pass the check above; the UNIQUE
            # constraint rejects the second insert.
            user_id = await self.storage.insert(INSERT_USER_SQL, {"name": name, "email": email})
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate email rejected by storage: {email}")
            raise EmailConflictError(email) from e
        except StorageError as e:
            logger.error(f"Failed to create user: {e}")
            raise UserStorageError("Internal server error while creating user", e) from e

        logger.info(f"Created user: {user_id}")
        return CreatedUser(id=user_id, name=name, email=email)

    async def update_user(
        self,
        user_id: str | int | None,
        name: str | None,
        email: str | None,
    ) -> int:
        """
        Replace a user's name and email.

        Both fields are required; there is no partial update.

        Args:
            user_id: Raw id from the URL path
            name: New display name
            email: New email address

        Returns:
            The parsed user id

        Raises:
            InvalidInputError: If the id, a field, or the email format is invalid
            UserNotFoundError: If no user has this id
            EmailConflictError: If the email belongs to another user
            UserStorageError: If the query fails
        """
        parsed_id = parse_user_id(user_id)
        name, email = require_user_fields(name, email)
        validate_email(email)

        if not is_storable_user_id(parsed_id):
            raise UserNotFoundError(parsed_id)

        try:
            updated = await self.storage.update(
                UPDATE_USER_SQL,
                {"id": parsed_id, "name": name, "email": email},
            )
        except DuplicateKeyError as e:
            raise EmailConflictError(email) from e
        except StorageError as e:
            logger.error(f"Failed to update user {parsed_id}: {e}")
            raise UserStorageError("Internal server error while updating user", e) from e

        if updated == 0:
            raise UserNotFoundError(parsed_id)

        logger.info(f"Updated user: {parsed_id}")
        return parsed_id

    async def delete_user(self, user_id: str | int | None) -> int:
        """
        Hard-delete a user.

        Returns:
            The parsed user id

        Raises:
            InvalidInputError: If the id is not an integer
            UserNotFoundError: If no user has this id
            UserStorageError: If the query fails
        """
        parsed_id = parse_user_id(user_id)

        if not is_storable_user_id(parsed_id):
            raise UserNotFoundError(parsed_id)

        try:
            deleted = await self.storage.delete(DELETE_USER_SQL, {"id": parsed_id})
        except StorageError as e:
            logger.error(f"Failed to delete user {parsed_id}: {e}")
            raise UserStorageError("Internal server error while deleting user", e) from e

        if deleted == 0:
            raise UserNotFoundError(parsed_id)

        logger.info(f"Deleted user: {parsed_id}")
        return parsed_id
