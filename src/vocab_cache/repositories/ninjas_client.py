"""API Ninjas clients for word definitions and random words.

Endpoints:
    - GET /v1/dictionary?word=<word>  -> {"word": ..., "definition": ..., "valid": ...}
    - GET /v1/randomword              -> {"word": ["..."]}

Both authenticate with the ``X-Api-Key`` header. The two clients share one
``httpx.AsyncClient`` so connections are pooled across concurrent requests.
"""

from typing import Any

import httpx

from vocab_cache.config import Settings
from vocab_cache.errors import EmptyResultError, ParseError, UpstreamStatusError, UpstreamTransportError

API_KEY_HEADER = "X-Api-Key"


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared async HTTP client for upstream calls.

    Certificate verification stays on unless ``insecure_skip_verify`` is set.
    """
    return httpx.AsyncClient(
        timeout=settings.upstream_timeout,
        verify=not settings.insecure_skip_verify,
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
    )


class _NinjasClient:
    """Request and envelope handling shared by the API Ninjas clients."""

    def __init__(self, client: httpx.AsyncClient, url: str, api_key: str) -> None:
        self._client = client
        self._url = url
        self._api_key = api_key

    async def _get_json(
        self,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        request_headers = {API_KEY_HEADER: self._api_key}
        request_headers.update(headers or {})

        try:
            response = await self._client.get(self._url, params=params, headers=request_headers)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            raise UpstreamTransportError(f"failed to send request to {self._url}: {e}") from e

        if not response.is_success:
            raise UpstreamStatusError(self._url, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"failed to unmarshal response from {self._url}: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(f"unexpected response format from {self._url}: {data!r}")
        return data


class NinjasDefinitionClient(_NinjasClient):
    """API Ninjas implementation of the DefinitionFetcher protocol.

    Example:
        ```python
        async with httpx.AsyncClient() as http:
            client = NinjasDefinitionClient(http, url, api_key)
            definition = await client.fetch_definition("serendipity")
        ```
    """

    @classmethod
    def create(cls, client: httpx.AsyncClient, settings: Settings) -> "NinjasDefinitionClient":
        """Factory method wiring the client from settings."""
        return cls(client, settings.definition_url, settings.def_api_key)

    async def fetch_definition(self, word: str) -> str:
        """Fetch the definition of a word.

        Args:
            word: The word to define

        Returns:
            The definition text; empty when the API knows no definition
        """
        data = await self._get_json(params={"word": word})

        definition = data.get("definition")
        if not isinstance(definition, str):
            raise ParseError(f"response for {word!r} has no definition field")
        return definition


class NinjasWordGeneratorClient(_NinjasClient):
    """API Ninjas implementation of the WordGenerator protocol."""

    @classmethod
    def create(cls, client: httpx.AsyncClient, settings: Settings) -> "NinjasWordGeneratorClient":
        """Factory method wiring the client from settings."""
        return cls(client, settings.word_generator_url, settings.random_word_api_key)

    async def fetch_random_word(self) -> str:
        """Fetch a random word.

        Returns:
            The first candidate in the response
        """
        data = await self._get_json(headers={"Accept": "application/json"})

        words = data.get("word")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ParseError(f"unexpected random word response: {data!r}")
        if not words:
            raise EmptyResultError("word generator returned no words")
        return words[0]
