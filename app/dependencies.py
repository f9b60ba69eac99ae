# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import ResponseOptions, Settings
from app.exceptions import get_response_options
from core.services.user_service import UserService
from lib.database import StorageClient


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_storage(request: Request) -> StorageClient:
    """
    Get the storage client owned by the application.

    Created in create_app() and connected by the lifespan.
    """
    return request.app.state.storage


def get_user_service(storage: Annotated[StorageClient, Depends(get_storage)]) -> UserService:
    """Build a UserService bound to the application's storage client."""
    return UserService(storage)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
StorageDep = Annotated[StorageClient, Depends(get_storage)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ResponseOptionsDep = Annotated[ResponseOptions, Depends(get_response_options)]
