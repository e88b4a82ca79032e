"""Lookup service for the cache-aside read path.

This service orchestrates a definition lookup by coordinating the
vocabulary store (cache), the definition fetcher and the word generator.
"""

from vocab_cache.entities import LookupResult, Origin, RandomWordResult
from vocab_cache.errors import CacheUnavailableError, CacheWriteError, InvalidInputError
from vocab_cache.logging_config import get_logger
from vocab_cache.metrics import VocabularyMetrics
from vocab_cache.protocols import DefinitionFetcher, VocabularyStore, WordGenerator

logger = get_logger(__name__)


def normalize_word(word: str) -> str:
    """Return the cache key form of a word."""
    return word.strip().lower()


class LookupService:
    """Cache-aside orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - VocabularyStore: Redis in production, a dict in tests
    - DefinitionFetcher / WordGenerator: API Ninjas, or any other source

    The service keeps no per-request state, so one instance serves all
    concurrent requests. Two concurrent misses for the same word both fetch
    and both write; the last write wins.

    Example:
        ```python
        service = LookupService.create(
            store=RedisVocabularyRepository(redis_client),
            fetcher=NinjasDefinitionClient.create(http, settings),
            generator=NinjasWordGeneratorClient.create(http, settings),
            ttl=settings.cache_time,
        )
        result = await service.dictionary_lookup("apple")
        ```
    """

    def __init__(
        self,
        store: VocabularyStore,
        fetcher: DefinitionFetcher,
        generator: WordGenerator,
        ttl: int,
        metrics: VocabularyMetrics | None = None,
    ) -> None:
        """Initialize the lookup service.

        Args:
            store: Definition cache backend (required).
            fetcher: Upstream definition source (required).
            generator: Upstream random word source (required).
            ttl: Time-to-live for cached definitions in seconds.
            metrics: Optional metrics sink for cache write failures.
        """
        if ttl <= 0:
            raise ValueError("ttl must be a positive number of seconds")

        self._store = store
        self._fetcher = fetcher
        self._generator = generator
        self._ttl = ttl
        self._metrics = metrics

    @classmethod
    def create(
        cls,
        store: VocabularyStore,
        fetcher: DefinitionFetcher,
        generator: WordGenerator,
        ttl: int,
        metrics: VocabularyMetrics | None = None,
    ) -> "LookupService":
        """Factory method to create LookupService."""
        return cls(store=store, fetcher=fetcher, generator=generator, ttl=ttl, metrics=metrics)

    async def dictionary_lookup(self, word: str) -> LookupResult:
        """Look up a definition, serving from cache when possible.

        Business logic:
        1. Reject an empty word
        2. Read the cache; a hit is returned as is
        3. On a miss or an unreachable cache, fetch the definition upstream
        4. Write it back with the configured TTL (best effort)

        Args:
            word: The word to define

        Returns:
            LookupResult tagged with its origin

        Raises:
            InvalidInputError: If the word is empty
            UpstreamError: If the definition could not be fetched
        """
        key = normalize_word(word or "")
        if not key:
            raise InvalidInputError("No word provided")

        try:
            cached = await self._store.get(key)
        except CacheUnavailableError as e:
            logger.warning("cache read failed, fetching upstream", word=key, error=str(e))
            cached = None

        if cached is not None:
            return LookupResult(word=key, definition=cached, origin=Origin.CACHE_HIT)

        definition = await self._fetcher.fetch_definition(key)

        try:
            await self._store.set(key, definition, self._ttl)
        except CacheWriteError as e:
            logger.error("failed to cache definition", word=key, ttl=self._ttl, error=str(e))
            if self._metrics is not None:
                self._metrics.record_cache_write_error()

        return LookupResult(word=key, definition=definition, origin=Origin.FRESH_FETCH)

    async def random_word_lookup(self) -> RandomWordResult:
        """Generate a random word and look up its definition.

        Returns:
            RandomWordResult with the generated word and its lookup result

        Raises:
            UpstreamError: If the word or its definition could not be fetched
        """
        word = await self._generator.fetch_random_word()
        result = await self.dictionary_lookup(word)
        return RandomWordResult(word=word, result=result)

    @property
    def ttl(self) -> int:
        """Get the cache TTL in seconds."""
        return self._ttl

    @property
    def store(self) -> VocabularyStore:
        """Get the underlying store (for health checks and testing)."""
        return self._store
