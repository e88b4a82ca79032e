"""Repository layer for data access.

This layer wraps external dependencies (Redis, the API Ninjas endpoints)
behind the protocol interfaces in ``vocab_cache.protocols``.

The repositories are protocol-based (structural typing), not
inheritance-based. Any class implementing the required methods will
satisfy the protocol.
"""

from vocab_cache.protocols import DefinitionFetcher, VocabularyStore, WordGenerator

from .ninjas_client import NinjasDefinitionClient, NinjasWordGeneratorClient, create_http_client
from .redis_repository import RedisVocabularyRepository

__all__ = [
    "DefinitionFetcher",
    "VocabularyStore",
    "WordGenerator",
    "NinjasDefinitionClient",
    "NinjasWordGeneratorClient",
    "RedisVocabularyRepository",
    "create_http_client",
]
