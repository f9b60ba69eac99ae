# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a FastAPI TestClient backed by a temporary SQLite database
# - Provides a connected StorageClient for storage/service tests
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.setdefault("DATABASE_URL", "sqlite:///./study_app_test.db")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.schema import init_schema
from lib.database import StorageClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh SQLite database file for one test."""
    return f"sqlite:///{tmp_path / 'study_app.db'}"


@pytest.fixture
def test_settings(database_url):
    """Development settings pointing at the temporary database."""
    return Settings(
        _env_file=None,
        DATABASE_URL=database_url,
        ENVIRONMENT="development",
        EXPOSE_ERROR_DETAILS=True,
    )


@pytest.fixture
def production_settings(database_url):
    """Production settings: internal error details are hidden."""
    return Settings(
        _env_file=None,
        DATABASE_URL=database_url,
        ENVIRONMENT="production",
    )


@pytest.fixture
def app(test_settings):
    """Application bound to the temporary database."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running (storage connected, table created)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def storage(database_url):
    """Connected StorageClient with the users table created."""
    client = StorageClient(database_url, log_queries=True)
    await client.connect()
    await init_schema(client)
    yield client
    await client.disconnect()


@pytest.fixture
def sample_user():
    """Sample user payload for testing."""
    return {"name": "Ana", "email": "ana@example.com"}
