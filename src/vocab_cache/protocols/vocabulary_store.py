"""Vocabulary storage protocol.

Defines the interface for the key-value backend that caches word
definitions with a time-to-live.

Implementations can include:
- Redis (default)
- An in-memory dict (tests)
- Any store with atomic per-key set-with-expiry
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class VocabularyStore(Protocol):
    """Protocol for definition cache backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed.

    Example:
        ```python
        from vocab_cache.protocols import VocabularyStore

        store: VocabularyStore = RedisVocabularyRepository(client)
        ```
    """

    async def get(self, key: str) -> str | None:
        """Read a cached definition.

        Args:
            key: The normalized word

        Returns:
            The definition, or None when absent or expired

        Raises:
            CacheUnavailableError: If the backend cannot be reached
        """
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a definition, replacing any entry and resetting its expiry.

        Args:
            key: The normalized word
            value: The definition text
            ttl: Time-to-live in seconds, must be positive

        Raises:
            ValueError: If ttl is not positive
            CacheWriteError: If the backend rejects the write
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    async def close(self) -> None:
        """Release backend connections."""
        ...
