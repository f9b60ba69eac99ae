# =============================================================================
# app/exceptions.py - Custom Exceptions & Handlers
# =============================================================================
# Centralized exception handling for the API.
# Services raise these exceptions; the handlers below turn them into the
# standard {success, message, error?} envelope with the right status code.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import ResponseOptions
from core.models.response import ApiResponse
from lib.database import StorageError

logger = logging.getLogger(__name__)


# Endpoints advertised by the not-found fallback
AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /health",
    "GET /api/users",
    "POST /api/users",
    "PUT /api/users/:id",
    "DELETE /api/users/:id",
]


class StudyAppException(Exception):
    """
    Base exception for the Study App API.

    All request-level errors inherit from this class and carry the HTTP
    status they map to.
    """

    def __init__(
        self,
        message: str,
        code: str = "STUDY_APP_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_response(self) -> ApiResponse:
        """Convert exception to the API envelope."""
        return ApiResponse(success=False, message=self.message)


# =============================================================================
# User Exceptions
# =============================================================================

class InvalidInputError(StudyAppException):
    """Raised when request input is malformed or missing. Storage is never touched."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details=details,
        )


class EmailConflictError(StudyAppException):
    """Raised when an email is already registered to another user."""

    def __init__(self, email: str):
        super().__init__(
            message="Email is already registered",
            code="EMAIL_CONFLICT",
            status_code=409,
            details={"email": email},
        )


class UserNotFoundError(StudyAppException):
    """Raised when an update or delete affects no rows."""

    def __init__(self, user_id: int):
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
            details={"user_id": user_id},
        )


class UserStorageError(StudyAppException):
    """
    Raised when the data layer fails during a user operation.

    Wraps the underlying StorageError so the handler can decide whether
    its message is exposed.
    """

    def __init__(self, message: str, cause: StorageError):
        super().__init__(
            message=message,
            code=cause.code,
            status_code=500,
        )
        self.cause = cause


# =============================================================================
# Exception Handlers
# =============================================================================

def get_response_options(request: Request) -> ResponseOptions:
    """Options stored on the app at creation time."""
    return getattr(request.app.state, "response_options", ResponseOptions())


async def study_app_exception_handler(
    request: Request,
    exc: StudyAppException
) -> JSONResponse:
    """
    Convert StudyAppException to JSON response.

    Storage failures get the driver message in `error` only when error
    details are exposed.
    """
    response = exc.to_response()
    if isinstance(exc, UserStorageError) and get_response_options(request).expose_error_details:
        response.error = exc.cause.message

    return JSONResponse(
        status_code=exc.status_code,
        content=response.to_content()
    )


async def storage_exception_handler(
    request: Request,
    exc: StorageError
) -> JSONResponse:
    """Handle storage errors that escaped a service without translation."""
    logger.error(f"Unhandled storage error on {request.method} {request.url.path}: {exc}")
    response = ApiResponse(success=False, message="Internal server error")
    if get_response_options(request).expose_error_details:
        response.error = exc.message

    return JSONResponse(status_code=500, content=response.to_content())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (invalid JSON, non-string fields).

    Answered with 400 like every other input error.
    """
    errors = [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    content = ApiResponse(success=False, message="Invalid request body").to_content()
    content["errors"] = errors
    return JSONResponse(status_code=400, content=content)


async def route_not_found_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Not-found fallback for unmatched method+path.

    Starlette answers 405 when the path exists under another method; both
    cases are reported as an unknown route.
    """
    if exc.status_code not in (404, 405):
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse(success=False, message=str(exc.detail)).to_content(),
            headers=getattr(exc, "headers", None),
        )

    content = ApiResponse(
        success=False,
        message=f"Route {request.method} {request.url.path} does not exist",
    ).to_content()
    content["available_endpoints"] = AVAILABLE_ENDPOINTS
    return JSONResponse(status_code=404, content=content)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Last-resort handler: log with traceback, answer a generic 500."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    response = ApiResponse(success=False, message="Internal server error")
    if get_response_options(request).expose_error_details:
        response.error = str(exc)

    return JSONResponse(status_code=500, content=response.to_content())
