"""
Pydantic schemas for API responses.

These schemas define the API contract of the service's own endpoints
and of structured error responses.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for health check endpoint.

    Attributes:
        status: Always "ok" while the app serves requests.
        version: Application version.
        production: Whether error responses hide diagnostic detail.
    """

    status: str
    version: str
    production: bool


class ErrorResponse(BaseModel):
    """Structured error body sent to clients asking for JSON.

    Attributes:
        statusCode: HTTP status of the response (400-599).
        name: Kind of error.
        message: Human-readable description.
        stack: Stack trace, empty in production.
    """

    statusCode: int = Field(..., ge=400, le=599)
    name: str = Field(..., min_length=1)
    message: str
    stack: str
