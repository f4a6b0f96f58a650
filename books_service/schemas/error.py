"""Error envelope returned in every non-2xx JSON response."""

from pydantic import BaseModel, Field


class ApiError(BaseModel):
    """
    Body of an error response.

    Example:
        {"message": "offset must be a non-negative integer"}
    """

    message: str = Field(..., description="Human-readable description of the problem")
