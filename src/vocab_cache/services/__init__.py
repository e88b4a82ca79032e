"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .lookup_service import LookupService, normalize_word

__all__ = [
    "LookupService",
    "normalize_word",
]
