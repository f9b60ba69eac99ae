# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Study App API:
# - test_validation.py: Unit tests for id/field/email checks
# - test_models.py: Unit tests for Pydantic models and the envelope
# - test_database.py: StorageClient against a temporary SQLite database
# - test_user_service.py: UserService with mocked and real storage
# - test_api.py / test_health.py: HTTP tests through TestClient
# - test_config.py: Settings defaults and response options
#
# Run tests with: pytest
# =============================================================================
