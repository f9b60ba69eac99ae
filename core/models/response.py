# =============================================================================
# core/models/response.py - Response Envelope
# =============================================================================
# Every user endpoint answers with the same envelope:
#
#   { "success": bool, "message": str, "data"?: ..., "count"?: int, "error"?: str }
#
# Optional keys are omitted (not null) when unset.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """
    Standard JSON envelope for user endpoints.

    `error` carries internal error detail and is only filled in when the
    service runs with error details exposed.
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")
    data: Any = Field(default=None, description="Operation payload")
    count: int | None = Field(default=None, ge=0, description="Number of items in data")
    error: str | None = Field(default=None, description="Internal error detail")

    def to_content(self) -> dict[str, Any]:
        """Serialize for a JSONResponse, dropping unset optional keys."""
        return self.model_dump(mode="json", exclude_none=True)
