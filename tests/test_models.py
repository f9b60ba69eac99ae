# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user schemas and the response envelope:
# - Rows from either database driver parse into User
# - The envelope omits unset optional keys
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.models import ApiResponse, CreatedUser, User, UserPayload


class TestUserPayload:
    """Tests for UserPayload model."""

    def test_fields_optional(self):
        """Test an empty body parses; presence is checked by the service."""
        payload = UserPayload()

        assert payload.name is None
        assert payload.email is None

    def test_rejects_non_string(self):
        """Test non-string values are rejected."""
        with pytest.raises(ValidationError):
            UserPayload(name=123, email="ana@example.com")


class TestUser:
    """Tests for User model."""

    def test_from_sqlite_row(self):
        """Test SQLite's text timestamps are parsed."""
        user = User.model_validate({
            "id": 1,
            "name": "Ana",
            "email": "ana@example.com",
            "created_at": "2024-01-15 10:30:00",
            "updated_at": "2024-01-15 10:30:00",
        })

        assert user.created_at == datetime(2024, 1, 15, 10, 30)

    def test_from_postgres_row(self):
        """Test native datetimes are kept."""
        created = datetime(2024, 1, 15, 10, 30)
        user = User.model_validate({
            "id": 1,
            "name": "Ana",
            "email": "ana@example.com",
            "created_at": created,
            "updated_at": created,
        })

        assert user.updated_at == created

    def test_id_required(self):
        """Test a row without id is rejected."""
        with pytest.raises(ValidationError):
            User(name="Ana", email="ana@example.com")


class TestApiResponse:
    """Tests for the response envelope."""

    def test_omits_unset_keys(self):
        """Test optional keys are dropped rather than null."""
        content = ApiResponse(success=True, message="User deleted successfully").to_content()

        assert content == {"success": True, "message": "User deleted successfully"}

    def test_keeps_empty_list(self):
        """Test an empty data list is still present."""
        content = ApiResponse(success=True, message="ok", data=[], count=0).to_content()

        assert content["data"] == []
        assert content["count"] == 0

    def test_serializes_models(self):
        """Test nested models and datetimes become JSON values."""
        user = User(id=1, name="Ana", email="ana@example.com", created_at=datetime(2024, 1, 15, 10, 30))

        content = ApiResponse(success=True, message="ok", data=[user], count=1).to_content()

        assert content["data"][0]["created_at"] == "2024-01-15T10:30:00"
        assert content["data"][0].get("updated_at") is None

    def test_created_user_payload(self):
        """Test the create payload carries only id, name and email."""
        content = ApiResponse(
            success=True,
            message="User created successfully",
            data=CreatedUser(id=3, name="Ana", email="ana@example.com"),
        ).to_content()

        assert content["data"] == {"id": 3, "name": "Ana", "email": "ana@example.com"}

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            ApiResponse(success=True, message="ok", count=-1)
