"""Vocabulary Cache - word definitions cached in Redis.

This package provides a layered architecture for cache-aside lookups:

Layers:
    - protocols: Interface contracts (VocabularyStore, DefinitionFetcher, WordGenerator)
    - repositories: Redis and API Ninjas implementations
    - services: Cache-aside business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from vocab_cache.services import LookupService

    service = LookupService.create(store=store, fetcher=fetcher, generator=generator, ttl=3600)
    result = await service.dictionary_lookup("apple")
    ```

For HTTP API:
    ```python
    from vocab_cache.api.app import app
    ```
"""

__version__ = "0.1.0"

from vocab_cache.config import Settings, get_settings, load_settings
from vocab_cache.entities import LookupResult, Origin, RandomWordResult
from vocab_cache.errors import (
    CacheUnavailableError,
    CacheWriteError,
    EmptyResultError,
    InvalidInputError,
    ParseError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTransportError,
    VocabularyError,
)
from vocab_cache.handlers import VocabularyHandler
from vocab_cache.protocols import DefinitionFetcher, VocabularyStore, WordGenerator
from vocab_cache.repositories import NinjasDefinitionClient, NinjasWordGeneratorClient, RedisVocabularyRepository
from vocab_cache.services import LookupService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "load_settings",
    # Protocols (interfaces)
    "VocabularyStore",
    "DefinitionFetcher",
    "WordGenerator",
    # Services (business logic)
    "LookupService",
    # Handlers (HTTP)
    "VocabularyHandler",
    # Repositories (data access)
    "RedisVocabularyRepository",
    "NinjasDefinitionClient",
    "NinjasWordGeneratorClient",
    # Entities (domain models)
    "LookupResult",
    "Origin",
    "RandomWordResult",
    # Errors
    "VocabularyError",
    "InvalidInputError",
    "CacheUnavailableError",
    "CacheWriteError",
    "UpstreamError",
    "UpstreamTransportError",
    "UpstreamStatusError",
    "ParseError",
    "EmptyResultError",
]
