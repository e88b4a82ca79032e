"""HTTP handlers for vocabulary lookups.

Handlers turn service results into plain-text bodies and map the error
taxonomy onto status codes. They also own the per-endpoint metrics.
"""

from fastapi import Response, status
from fastapi.responses import PlainTextResponse

from vocab_cache.dto import HealthCheckResponse
from vocab_cache.entities import LookupResult
from vocab_cache.errors import InvalidInputError, VocabularyError
from vocab_cache.logging_config import get_logger
from vocab_cache.metrics import VocabularyMetrics
from vocab_cache.services import LookupService

logger = get_logger(__name__)

DICTIONARY_ENDPOINT = "/dictionary"
RANDOM_WORD_ENDPOINT = "/randomword"


def format_lookup(result: LookupResult) -> str:
    """Render a lookup as ``"<ORIGIN>: <definition>"``."""
    return f"{result.origin.value}: {result.definition}"


class VocabularyHandler:
    """HTTP handlers for dictionary and random word lookups.

    Example:
        ```python
        handler = VocabularyHandler(lookup_service=service, metrics=metrics)

        @app.get("/api/v1/dictionary")
        async def dictionary(word: str | None = None):
            return await handler.dictionary(word)
        ```
    """

    def __init__(self, lookup_service: LookupService, metrics: VocabularyMetrics) -> None:
        """Initialize the vocabulary handler.

        Args:
            lookup_service: The lookup service for business logic (required).
            metrics: Metrics recorder shared with the /metrics endpoint.
        """
        self._lookup = lookup_service
        self._metrics = metrics

    def _error(self, endpoint: str, status_code: int, message: str) -> PlainTextResponse:
        self._metrics.record_error(endpoint)
        return PlainTextResponse(message, status_code=status_code)

    async def dictionary(self, word: str | None) -> PlainTextResponse:
        """Handle GET /api/v1/dictionary requests.

        Args:
            word: The ``word`` query parameter, if present

        Returns:
            200 with ``REDIS: ...`` or ``NINJA: ...``, 400 without a word,
            500 when the definition could not be fetched
        """
        with self._metrics.track(DICTIONARY_ENDPOINT):
            try:
                result = await self._lookup.dictionary_lookup(word or "")
            except InvalidInputError as e:
                return self._error(DICTIONARY_ENDPOINT, status.HTTP_400_BAD_REQUEST, str(e))
            except VocabularyError as e:
                logger.error("dictionary lookup failed", word=word, error=str(e))
                return self._error(DICTIONARY_ENDPOINT, status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
            except Exception:
                self._metrics.record_error(DICTIONARY_ENDPOINT)
                raise

            if result.is_hit:
                self._metrics.record_hit(DICTIONARY_ENDPOINT)
            return PlainTextResponse(format_lookup(result))

    async def random_word(self) -> PlainTextResponse:
        """Handle GET /api/v1/randomword requests.

        Returns:
            200 with ``<word> is the word REDIS: ...`` (or ``NINJA``),
            500 on any upstream or parse failure
        """
        with self._metrics.track(RANDOM_WORD_ENDPOINT):
            try:
                random_word = await self._lookup.random_word_lookup()
            except VocabularyError as e:
                logger.error("random word lookup failed", error=str(e))
                return self._error(RANDOM_WORD_ENDPOINT, status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
            except Exception:
                self._metrics.record_error(RANDOM_WORD_ENDPOINT)
                raise

            if random_word.result.is_hit:
                self._metrics.record_hit(RANDOM_WORD_ENDPOINT)
            return PlainTextResponse(f"{random_word.word} is the word {format_lookup(random_word.result)}")

    async def health_check(self, response: Response) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse; the status code is 503 when Redis is down
        """
        is_healthy = await self._lookup.store.health_check()
        if not is_healthy:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )

    def metrics(self) -> Response:
        """Handle GET /metrics requests."""
        payload, content_type = self._metrics.render()
        return Response(content=payload, media_type=content_type)
