# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - users.py: User CRUD endpoints (current routes + legacy aliases)
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import users

__all__ = [
    "health",
    "users",
]
