# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Handles listing, creating, updating and deleting users.
#
# The same four handlers are served under two sets of paths:
# - router:        current RESTful routes, mounted at /api/users
# - legacy_router: deprecated aliases (/users/list, /users/create, ...)
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import UserServiceDep
from core.models.response import ApiResponse
from core.models.user import UserPayload

router = APIRouter()
legacy_router = APIRouter()


# =============================================================================
# Handlers
# =============================================================================

async def list_users(service: UserServiceDep):
    """
    List all users.

    Returns every user ordered by creation time, newest first, with a count.
    """
    users = await service.list_users()

    return JSONResponse(
        status_code=200,
        content=ApiResponse(
            success=True,
            message="Users retrieved successfully",
            data=users,
            count=len(users),
        ).to_content(),
    )


async def create_user(
    service: UserServiceDep,
    payload: UserPayload | None = None,
):
    """
    Create a new user.

    Requires `name` and a well-formed, unused `email`.
    Returns the new id with the submitted fields.
    """
    payload = payload or UserPayload()
    user = await service.create_user(payload.name, payload.email)

    return JSONResponse(
        status_code=201,
        content=ApiResponse(
            success=True,
            message="User created successfully",
            data=user,
        ).to_content(),
    )


async def update_user(
    user_id: str,
    service: UserServiceDep,
    payload: UserPayload | None = None,
):
    """
    Replace a user's name and email.

    Both fields are required. The updated record is not echoed back.
    """
    payload = payload or UserPayload()
    await service.update_user(user_id, payload.name, payload.email)

    return JSONResponse(
        status_code=200,
        content=ApiResponse(success=True, message="User updated successfully").to_content(),
    )


async def delete_user(user_id: str, service: UserServiceDep):
    """Delete a user by id (hard delete)."""
    await service.delete_user(user_id)

    return JSONResponse(
        status_code=200,
        content=ApiResponse(success=True, message="User deleted successfully").to_content(),
    )


# =============================================================================
# Routes
# =============================================================================

router.add_api_route("", list_users, methods=["GET"])
router.add_api_route("", create_user, methods=["POST"], status_code=201)
router.add_api_route("/{user_id}", update_user, methods=["PUT"])
router.add_api_route("/{user_id}", delete_user, methods=["DELETE"])

# Deprecated aliases kept for older clients; prefer /api/users
legacy_router.add_api_route("/users/list", list_users, methods=["GET"], deprecated=True)
legacy_router.add_api_route("/users/create", create_user, methods=["POST"], status_code=201, deprecated=True)
legacy_router.add_api_route("/users/update/{user_id}", update_user, methods=["PUT"], deprecated=True)
legacy_router.add_api_route("/users/delete/{user_id}", delete_user, methods=["DELETE"], deprecated=True)
