"""Data Transfer Objects for API contracts.

Lookup endpoints answer in plain text; these Pydantic models cover the
JSON endpoints.
"""

from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
