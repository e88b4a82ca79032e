"""Redis implementation of VocabularyStore.

Definitions are plain Redis strings written with ``SET key value EX ttl``,
a single atomic command, so a cancelled request either wrote the entry or
did not touch it.
"""

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from vocab_cache.errors import CacheUnavailableError, CacheWriteError


class RedisVocabularyRepository:
    """Redis-backed definition cache.

    This class satisfies the VocabularyStore protocol through structural
    typing - no explicit inheritance needed.

    The client is shared by all concurrent requests; redis-py's connection
    pool makes that safe without extra locking.
    """

    def __init__(self, redis_client: aioredis.Redis, key_prefix: str = "") -> None:
        """Initialize the Redis vocabulary repository.

        Args:
            redis_client: Async Redis client instance.
            key_prefix: Optional namespace prepended to every key.
        """
        self._client = redis_client
        self._key_prefix = key_prefix

    def _key(self, word: str) -> str:
        return f"{self._key_prefix}{word}"

    async def get(self, key: str) -> str | None:
        """Read a cached definition.

        Args:
            key: The normalized word

        Returns:
            The definition, or None when absent or expired
        """
        try:
            cached = await self._client.get(self._key(key))
        except RedisError as e:
            raise CacheUnavailableError(f"failed to read {key!r} from Redis: {e}") from e

        if cached is None:
            return None
        if isinstance(cached, bytes):
            try:
                return cached.decode("utf-8")
            except UnicodeDecodeError as e:
                raise CacheUnavailableError(f"cached value for {key!r} is not valid UTF-8") from e
        return str(cached)

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a definition with an expiry.

        Args:
            key: The normalized word
            value: The definition text
            ttl: Time-to-live in seconds; entries are never stored without one
        """
        if ttl <= 0:
            raise ValueError(f"ttl must be a positive number of seconds, got {ttl}")

        try:
            await self._client.set(self._key(key), value, ex=ttl)
        except RedisError as e:
            raise CacheWriteError(f"failed to cache meaning of {key!r}: {e}") from e

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError):
            return False

    async def close(self) -> None:
        """Close the client and its connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> aioredis.Redis:
        """Get the Redis client."""
        return self._client
