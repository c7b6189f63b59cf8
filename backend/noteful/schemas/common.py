"""
Noteful Backend — Shared Response Schemas
===========================================

What:  Error envelope and health check response models.
Why:   Every error leaves the API as `{"error": {"message": ...}}`, so clients
       can parse failures the same way on every endpoint.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {"error": {"message": "folder does not exist"}}
    """
    error: ErrorDetail

    @classmethod
    def of(cls, message: str) -> "ErrorResponse":
        return cls(error=ErrorDetail(message=message))


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
