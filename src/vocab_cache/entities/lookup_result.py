"""Lookup result domain entities."""

from dataclasses import dataclass
from enum import Enum


class Origin(Enum):
    """Where a definition came from.

    The value is the label the HTTP layer prefixes to the definition.
    """

    CACHE_HIT = "REDIS"
    FRESH_FETCH = "NINJA"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a cache-aside definition lookup.

    Attributes:
        word: The normalized word used as the cache key
        definition: The definition text (may be empty)
        origin: Whether it was served from cache or fetched upstream
    """

    word: str
    definition: str
    origin: Origin

    @property
    def is_hit(self) -> bool:
        return self.origin is Origin.CACHE_HIT


@dataclass(frozen=True)
class RandomWordResult:
    """A generated word together with the lookup of its definition."""

    word: str
    result: LookupResult
