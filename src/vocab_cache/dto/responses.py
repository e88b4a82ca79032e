"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the Redis cache is reachable")


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str] = Field(default_factory=dict)
