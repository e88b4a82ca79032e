"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from vocab_cache.config import Settings, get_redis_client, get_settings
from vocab_cache.handlers import VocabularyHandler
from vocab_cache.logging_config import get_logger, setup_logging
from vocab_cache.metrics import VocabularyMetrics
from vocab_cache.repositories import (
    NinjasDefinitionClient,
    NinjasWordGeneratorClient,
    RedisVocabularyRepository,
    create_http_client,
)
from vocab_cache.services import LookupService

logger = get_logger(__name__)


def get_handler(request: Request) -> VocabularyHandler:
    """Dependency injection for VocabularyHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The VocabularyHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "vocabulary_handler", None)
    if handler is None:
        raise RuntimeError("VocabularyHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository and upstream clients (data access)
    2. Service (business logic) - stored in app.state.lookup_service
    3. Handler (HTTP endpoints) - stored in app.state.vocabulary_handler

    Settings come from app.state.settings when already set, otherwise
    from get_settings().

    Cleanup:
        Closes the HTTP client and Redis pool, then removes all services
        from app.state on shutdown
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    setup_logging(settings.log_level, settings.log_json)

    redis_client = get_redis_client(settings)
    repository = RedisVocabularyRepository(redis_client, key_prefix=settings.redis_key_prefix)
    http_client = None

    try:
        if await repository.health_check():
            logger.info("connected to Redis", address=settings.redis_address)
        else:
            # lookups still work, every read becomes a soft miss
            logger.warning("Redis is not reachable", address=settings.redis_address)

        if settings.insecure_skip_verify:
            logger.warning("TLS certificate verification is disabled for upstream calls")
        http_client = create_http_client(settings)

        metrics = VocabularyMetrics()
        lookup_service = LookupService.create(
            store=repository,
            fetcher=NinjasDefinitionClient.create(http_client, settings),
            generator=NinjasWordGeneratorClient.create(http_client, settings),
            ttl=settings.cache_time,
            metrics=metrics,
        )
        handler = VocabularyHandler(lookup_service=lookup_service, metrics=metrics)

        # Store in app.state (FastAPI pattern)
        app.state.settings = settings
        app.state.lookup_service = lookup_service
        app.state.vocabulary_handler = handler

        logger.info("vocabulary service initialized", cache_time=settings.cache_time)

        yield
    finally:
        if http_client is not None:
            await http_client.aclose()
        await repository.close()

        for name in ("vocabulary_handler", "lookup_service"):
            if hasattr(app.state, name):
                delattr(app.state, name)
        logger.info("vocabulary service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[VocabularyHandler, Depends(get_handler)]
