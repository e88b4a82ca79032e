"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services and
handlers. They carry no HTTP or Redis concerns.
"""

from .lookup_result import LookupResult, Origin, RandomWordResult

__all__ = ["LookupResult", "Origin", "RandomWordResult"]
